"""Inspect and converge the webhook on a single repository.

Both mutating operations re-read the repository's hooks immediately before
writing, so concurrent automation editing the same hooks is observed rather
than overwritten from a stale snapshot.
"""

from __future__ import annotations

import typing as typ

from .models import HookOutcome

if typ.TYPE_CHECKING:
    from hookwarden.github.client import GitHubHooksClient
    from hookwarden.github.models import WebhookRecord

    from .config import SyncConfig


async def find_matching_hook(
    client: GitHubHooksClient, full_name: str, target_url: str
) -> WebhookRecord | None:
    """Return the first hook on *full_name* whose URL equals *target_url*.

    Matching is exact string equality with no URL normalization.
    """
    for hook in await client.list_hooks(full_name):
        if hook.target_url == target_url:
            return hook
    return None


async def ensure_hook(
    client: GitHubHooksClient, full_name: str, config: SyncConfig
) -> HookOutcome:
    """Create the desired hook on *full_name* unless one already matches."""
    if await find_matching_hook(client, full_name, config.target_url) is not None:
        return HookOutcome.UNCHANGED

    await client.create_hook(
        full_name, target_url=config.target_url, secret=config.secret
    )
    return HookOutcome.CREATED


async def remove_hook(
    client: GitHubHooksClient, full_name: str, config: SyncConfig
) -> bool:
    """Delete the matching hook from *full_name*; return whether one existed."""
    hook = await find_matching_hook(client, full_name, config.target_url)
    if hook is None:
        return False

    await client.delete_hook(full_name, hook.id)
    return True
