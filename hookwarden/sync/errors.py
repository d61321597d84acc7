"""Errors raised while preparing a webhook reconciliation run."""

from __future__ import annotations


class WebhookSyncConfigError(ValueError):
    """Raised when reconciliation settings are missing or invalid."""

    @classmethod
    def missing_settings(cls) -> WebhookSyncConfigError:
        """Return an error when the token or target URL is unset."""
        return cls("HOOKWARDEN_GITHUB_TOKEN and HOOKWARDEN_WEBHOOK_URL are required")

    @classmethod
    def invalid_concurrency(cls, raw: str) -> WebhookSyncConfigError:
        """Return an error for a non-positive or non-integer concurrency."""
        return cls(
            f"HOOKWARDEN_SYNC_CONCURRENCY must be a positive integer, got: {raw!r}"
        )
