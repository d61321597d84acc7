"""Reconcile webhooks across every repository owned by an account.

Each run lists the account's repositories, then converges every repository
towards its desired state with bounded concurrency:

- archived repositories must carry no matching hook;
- active repositories must carry exactly one hook pointing at the target URL.

Per-repository failures are recorded and the run continues. A rate-limit
response stops further work, keeps the results gathered so far, and adds a
single ``(rate-limited)`` entry to ``errors``. Nothing is retried; callers
wait out ``Retry-After`` and run again.
"""

from __future__ import annotations

import dataclasses
import typing as typ

from hookwarden.common.time import utcnow
from hookwarden.github.client import GitHubRestClient, GitHubRestConfig
from hookwarden.github.errors import GitHubRateLimitError

from .hooks import ensure_hook, remove_hook
from .models import RATE_LIMITED_REPO, ReconciliationResult
from .observability import SyncEventLogger
from .runner import run_bounded

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    import httpx

    from hookwarden.github.client import GitHubHooksClient
    from hookwarden.github.models import RepositoryRecord

    from .config import SyncConfig


class WebhookSyncService:
    """Run webhook reconciliation for a desired configuration."""

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        event_logger: SyncEventLogger | None = None,
    ) -> None:
        """Create a service.

        Parameters
        ----------
        http_client
            Optional shared HTTP client. When omitted, each run opens and
            closes its own client.
        base_url
            Optional GitHub API base URL override (e.g. GitHub Enterprise).
        event_logger
            Structured event sink; defaults to :class:`SyncEventLogger`.

        """
        self._http_client = http_client
        self._base_url = base_url
        self._event_logger = event_logger or SyncEventLogger()

    def _build_client(self, config: SyncConfig) -> GitHubRestClient:
        rest_config = GitHubRestConfig(token=config.token)
        if self._base_url is not None:
            rest_config = dataclasses.replace(rest_config, base_url=self._base_url)
        return GitHubRestClient(rest_config, http_client=self._http_client)

    async def synchronize(self, config: SyncConfig) -> ReconciliationResult:
        """Reconcile every owned repository against *config*.

        Raises
        ------
        GitHubAPIError
            If the repository listing fails, including when it is rate
            limited. No hook has been touched at that point.

        """
        async with self._build_client(config) as client:
            return await self.reconcile(client, config)

    async def reconcile(
        self, client: GitHubHooksClient, config: SyncConfig
    ) -> ReconciliationResult:
        """Reconcile using an already constructed *client*."""
        started_at = utcnow()
        try:
            repositories = await client.list_owned_repositories()
        except Exception as exc:
            self._event_logger.log_run_failed(exc, utcnow() - started_at)
            raise

        self._event_logger.log_run_started(repositories=len(repositories))
        result = ReconciliationResult()
        reconcile_one = self._reconciler(client, config, result)

        try:
            await run_bounded(repositories, config.concurrency, reconcile_one)
        except GitHubRateLimitError as exc:
            self._event_logger.log_run_rate_limited(
                exc, processed=result.processed, total=len(repositories)
            )
            result.record_error(RATE_LIMITED_REPO, exc)
        except Exception as exc:
            self._event_logger.log_run_failed(exc, utcnow() - started_at)
            raise

        self._event_logger.log_run_completed(result, utcnow() - started_at)
        return result

    def _reconciler(
        self,
        client: GitHubHooksClient,
        config: SyncConfig,
        result: ReconciliationResult,
    ) -> cabc.Callable[[RepositoryRecord], cabc.Awaitable[None]]:
        async def reconcile_one(repo: RepositoryRecord) -> None:
            try:
                if repo.archived:
                    if await remove_hook(client, repo.full_name, config):
                        result.deleted.append(repo.full_name)
                else:
                    outcome = await ensure_hook(client, repo.full_name, config)
                    result.record_hook(repo.full_name, outcome)
            except GitHubRateLimitError:
                raise
            except Exception as exc:  # noqa: BLE001 - recorded against the repository
                self._event_logger.log_repository_failed(repo.full_name, exc)
                result.record_error(repo.full_name, exc)

        return reconcile_one


async def synchronize(config: SyncConfig) -> ReconciliationResult:
    """Reconcile webhooks for *config* using a default service."""
    return await WebhookSyncService().synchronize(config)
