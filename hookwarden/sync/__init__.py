"""Webhook reconciliation engine."""

from __future__ import annotations

from .config import DEFAULT_CONCURRENCY, SyncConfig
from .errors import WebhookSyncConfigError
from .hooks import ensure_hook, find_matching_hook, remove_hook
from .models import (
    RATE_LIMITED_REPO,
    HookOutcome,
    ReconciliationResult,
    SyncErrorEntry,
)
from .observability import (
    ErrorCategory,
    SyncEventLogger,
    SyncEventType,
    categorize_error,
)
from .runner import run_bounded
from .service import WebhookSyncService, synchronize

__all__ = [
    "DEFAULT_CONCURRENCY",
    "RATE_LIMITED_REPO",
    "ErrorCategory",
    "HookOutcome",
    "ReconciliationResult",
    "SyncConfig",
    "SyncErrorEntry",
    "SyncEventLogger",
    "SyncEventType",
    "WebhookSyncConfigError",
    "WebhookSyncService",
    "categorize_error",
    "ensure_hook",
    "find_matching_hook",
    "remove_hook",
    "run_bounded",
    "synchronize",
]
