"""Structured log events for webhook reconciliation runs.

Events are emitted through femtologging as ``[event] key=value`` lines so
log aggregators can parse run outcomes and alert on failures by category.

Usage
-----
>>> event_logger = SyncEventLogger()
>>> event_logger.log_run_started(repositories=12)

"""

from __future__ import annotations

import enum
import typing as typ

import httpx

from hookwarden.github.errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubRateLimitError,
    GitHubResponseShapeError,
)
from hookwarden.logging import get_logger, log_error, log_info, log_warning

if typ.TYPE_CHECKING:
    import datetime as dt

    from .models import ReconciliationResult

logger = get_logger(__name__)

# HTTP status code threshold for server errors (5xx)
_HTTP_SERVER_ERROR_THRESHOLD = 500


class SyncEventType(enum.StrEnum):
    """Structured log event types for reconciliation observability."""

    RUN_STARTED = "webhook_sync.run.started"
    RUN_COMPLETED = "webhook_sync.run.completed"
    RUN_FAILED = "webhook_sync.run.failed"
    RUN_RATE_LIMITED = "webhook_sync.run.rate_limited"
    REPOSITORY_FAILED = "webhook_sync.repository.failed"


class ErrorCategory(enum.StrEnum):
    """Categories for error classification in alerts."""

    RATE_LIMITED = "rate_limited"
    TRANSIENT = "transient"
    CLIENT_ERROR = "client_error"
    SCHEMA_DRIFT = "schema_drift"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


_EXCEPTION_CATEGORY_MAP: tuple[tuple[type[BaseException], ErrorCategory], ...] = (
    (GitHubResponseShapeError, ErrorCategory.SCHEMA_DRIFT),
    (GitHubConfigError, ErrorCategory.CONFIGURATION),
    (httpx.TransportError, ErrorCategory.TRANSIENT),
)


def categorize_error(exc: BaseException) -> ErrorCategory:
    """Categorize an exception for alerting purposes."""
    if isinstance(exc, GitHubRateLimitError):
        return ErrorCategory.RATE_LIMITED

    # GitHubAPIError requires special handling for status code distinction
    if isinstance(exc, GitHubAPIError):
        if (
            exc.status_code is not None
            and exc.status_code >= _HTTP_SERVER_ERROR_THRESHOLD
        ):
            return ErrorCategory.TRANSIENT
        return ErrorCategory.CLIENT_ERROR

    for exc_type, category in _EXCEPTION_CATEGORY_MAP:
        if isinstance(exc, exc_type):
            return category

    return ErrorCategory.UNKNOWN


class SyncEventLogger:
    """Emit structured reconciliation events via femtologging."""

    def log_run_started(self, *, repositories: int) -> None:
        """Log the start of reconciliation over *repositories* repositories."""
        log_info(
            logger,
            "[%s] repositories=%d",
            SyncEventType.RUN_STARTED,
            repositories,
        )

    def log_run_completed(
        self, result: ReconciliationResult, duration: dt.timedelta
    ) -> None:
        """Log run completion with per-list counts."""
        log_info(
            logger,
            "[%s] duration_seconds=%.3f created=%d deleted=%d unchanged=%d "
            "errors=%d",
            SyncEventType.RUN_COMPLETED,
            duration.total_seconds(),
            len(result.created),
            len(result.deleted),
            len(result.unchanged),
            len(result.errors),
        )

    def log_run_failed(self, error: BaseException, duration: dt.timedelta) -> None:
        """Log a run that failed before producing a result."""
        log_error(
            logger,
            "[%s] duration_seconds=%.3f error_type=%s error_category=%s "
            "error_message=%s",
            SyncEventType.RUN_FAILED,
            duration.total_seconds(),
            type(error).__name__,
            categorize_error(error),
            str(error),
            exc_info=error,
        )

    def log_run_rate_limited(
        self, error: GitHubRateLimitError, *, processed: int, total: int
    ) -> None:
        """Log a run aborted by rate limiting (partial results kept)."""
        log_warning(
            logger,
            "[%s] retry_after=%s status_code=%s processed=%d repositories=%d",
            SyncEventType.RUN_RATE_LIMITED,
            error.retry_after,
            error.status_code,
            processed,
            total,
        )

    def log_repository_failed(self, repo_slug: str, error: BaseException) -> None:
        """Log a repository whose reconciliation was recorded as an error."""
        log_warning(
            logger,
            "[%s] repo_slug=%s error_type=%s error_category=%s error_message=%s",
            SyncEventType.REPOSITORY_FAILED,
            repo_slug,
            type(error).__name__,
            categorize_error(error),
            str(error),
        )
