"""Desired webhook configuration for a reconciliation run.

Usage
-----
Build a configuration directly:

>>> config = SyncConfig(
...     token="ghp_example",
...     target_url="https://ci.example.com/webhook",
...     secret="s3cret",
... )
>>> config.concurrency
5

Or load it from environment variables:

>>> config = SyncConfig.from_env()

"""

from __future__ import annotations

import dataclasses as dc
import os

from .errors import WebhookSyncConfigError

DEFAULT_CONCURRENCY = 5


@dc.dataclass(frozen=True, slots=True)
class SyncConfig:
    """Immutable input shared by every worker of a reconciliation run.

    Attributes
    ----------
    token
        GitHub credential for the account whose repositories are reconciled.
    target_url
        Delivery URL every active repository's hook must point at.
    secret
        Shared secret embedded in newly created hooks.
    concurrency
        Number of repositories reconciled at once. Default is 5.

    """

    token: str = dc.field(repr=False)
    target_url: str
    secret: str = dc.field(default="", repr=False)
    concurrency: int = DEFAULT_CONCURRENCY

    @staticmethod
    def _parse_concurrency() -> int:
        raw = os.environ.get("HOOKWARDEN_SYNC_CONCURRENCY", "")
        if not raw.strip():
            return DEFAULT_CONCURRENCY
        try:
            value = int(raw)
        except ValueError as exc:
            raise WebhookSyncConfigError.invalid_concurrency(raw) from exc
        if value < 1:
            raise WebhookSyncConfigError.invalid_concurrency(raw)
        return value

    @classmethod
    def from_env(cls) -> SyncConfig:
        """Create configuration from environment variables.

        Reads ``HOOKWARDEN_GITHUB_TOKEN`` and ``HOOKWARDEN_WEBHOOK_URL``
        (both required), ``HOOKWARDEN_WEBHOOK_SECRET`` and
        ``HOOKWARDEN_SYNC_CONCURRENCY``.

        Raises
        ------
        WebhookSyncConfigError
            If a required variable is unset or concurrency is invalid.

        """
        token = os.environ.get("HOOKWARDEN_GITHUB_TOKEN", "").strip()
        target_url = os.environ.get("HOOKWARDEN_WEBHOOK_URL", "").strip()
        if not token or not target_url:
            raise WebhookSyncConfigError.missing_settings()

        return cls(
            token=token,
            target_url=target_url,
            secret=os.environ.get("HOOKWARDEN_WEBHOOK_SECRET", ""),
            concurrency=cls._parse_concurrency(),
        )
