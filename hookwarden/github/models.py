"""Typed views of the GitHub REST payloads the reconciler reads."""

from __future__ import annotations

import msgspec


class RepositoryRecord(msgspec.Struct, kw_only=True, frozen=True):
    """Repository entry from ``GET /user/repos``.

    Attributes
    ----------
    full_name : str
        ``owner/name`` slug, unique per account.
    archived : bool
        Whether GitHub has archived the repository.

    """

    full_name: str
    archived: bool = False


class HookConfig(msgspec.Struct, kw_only=True, frozen=True):
    """The ``config`` object of a repository webhook."""

    url: str | None = None


class WebhookRecord(msgspec.Struct, kw_only=True, frozen=True):
    """Webhook entry from ``GET /repos/{owner}/{name}/hooks``."""

    id: int
    config: HookConfig = msgspec.field(default_factory=HookConfig)

    @property
    def target_url(self) -> str | None:
        """Return the delivery URL the hook posts to."""
        return self.config.url
