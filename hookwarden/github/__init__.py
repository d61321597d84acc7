"""GitHub REST client primitives for webhook reconciliation."""

from __future__ import annotations

from .client import (
    CI_COMPLETION_EVENT,
    GitHubHooksClient,
    GitHubRestClient,
    GitHubRestConfig,
)
from .errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubRateLimitError,
    GitHubResponseShapeError,
)
from .models import HookConfig, RepositoryRecord, WebhookRecord
from .ratelimit import is_rate_limited, raise_if_rate_limited

__all__ = [
    "CI_COMPLETION_EVENT",
    "GitHubAPIError",
    "GitHubConfigError",
    "GitHubHooksClient",
    "GitHubRateLimitError",
    "GitHubResponseShapeError",
    "GitHubRestClient",
    "GitHubRestConfig",
    "HookConfig",
    "RepositoryRecord",
    "WebhookRecord",
    "is_rate_limited",
    "raise_if_rate_limited",
]
