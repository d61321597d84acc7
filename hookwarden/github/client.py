"""GitHub REST client for repository and webhook management."""

from __future__ import annotations

import dataclasses
import os
import typing as typ
from http import HTTPStatus

import httpx
import msgspec

from hookwarden.common.slug import parse_repo_slug
from hookwarden.logging import get_logger, log_warning

from .errors import GitHubAPIError, GitHubConfigError, GitHubResponseShapeError
from .models import RepositoryRecord, WebhookRecord
from .ratelimit import raise_if_rate_limited

logger = get_logger(__name__)

T = typ.TypeVar("T")

CI_COMPLETION_EVENT = "workflow_run"


class GitHubHooksClient(typ.Protocol):
    """Interface the reconciler needs from a GitHub client."""

    async def list_owned_repositories(self) -> list[RepositoryRecord]:
        """Return every repository owned by the authenticated account."""
        ...

    async def list_hooks(self, full_name: str) -> list[WebhookRecord]:
        """Return the webhooks registered on a repository."""
        ...

    async def create_hook(
        self, full_name: str, *, target_url: str, secret: str
    ) -> None:
        """Register a CI completion webhook on a repository."""
        ...

    async def delete_hook(self, full_name: str, hook_id: int) -> None:
        """Delete a webhook by id."""
        ...


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubRestConfig:
    """Configuration for the GitHub REST API client."""

    token: str
    base_url: str = "https://api.github.com"
    timeout_s: float = 20.0
    user_agent: str = "hookwarden/0.1"
    per_page: int = 100
    max_pages: int = 50

    @classmethod
    def from_env(cls) -> GitHubRestConfig:
        """Build configuration using the `HOOKWARDEN_GITHUB_TOKEN` env var."""
        token = os.environ.get("HOOKWARDEN_GITHUB_TOKEN", "").strip()
        if not token:
            raise GitHubConfigError.missing_token()
        return cls(token=token)


def _decode(response: httpx.Response, type_: type[T], *, field: str) -> T:
    """Decode a JSON body into *type_*, mapping failures to shape errors."""
    try:
        return msgspec.json.decode(response.content, type=type_)
    except (msgspec.ValidationError, msgspec.DecodeError) as exc:
        raise GitHubResponseShapeError.missing(field) from exc


def _is_success(response: httpx.Response) -> bool:
    return HTTPStatus.OK <= response.status_code < HTTPStatus.MULTIPLE_CHOICES


class GitHubRestClient:
    """GitHub REST implementation of :class:`GitHubHooksClient`.

    Every response is checked for rate limiting before its status is
    interpreted, so an exhausted quota always surfaces as
    :class:`~hookwarden.github.errors.GitHubRateLimitError`.
    """

    def __init__(
        self,
        config: GitHubRestConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        if not config.token.strip():
            raise GitHubConfigError.empty_token()

        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {config.token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": config.user_agent,
        }
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout_s)

    async def __aenter__(self) -> typ.Self:
        """Return the client for use as an async context manager."""
        return self

    async def __aexit__(self, *_exc: object) -> None:
        """Close owned HTTP resources on context exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    def _hooks_url(self, full_name: str) -> str:
        owner, name = parse_repo_slug(full_name)
        return f"{self._base_url}/repos/{owner}/{name}/hooks"

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, typ.Any] | None = None,
        json: dict[str, typ.Any] | None = None,
    ) -> httpx.Response:
        response = await self._client.request(
            method, url, params=params, json=json, headers=self._headers
        )
        raise_if_rate_limited(response)
        return response

    async def list_owned_repositories(self) -> list[RepositoryRecord]:
        """Return all repositories owned by the token's account.

        Follows ``Link: rel="next"`` headers until exhausted or until
        ``max_pages`` pages have been read.

        Raises
        ------
        GitHubRateLimitError
            If any page request is rate limited.
        GitHubAPIError
            If any page request fails.

        """
        repositories: list[RepositoryRecord] = []
        url: str | None = f"{self._base_url}/user/repos"
        params: dict[str, typ.Any] | None = {
            "type": "owner",
            "per_page": self._config.per_page,
        }
        pages = 0

        while url is not None and pages < self._config.max_pages:
            response = await self._send("GET", url, params=params)
            if not _is_success(response):
                raise GitHubAPIError.list_repositories_failed(response.status_code)
            repositories.extend(
                _decode(response, list[RepositoryRecord], field="repositories")
            )
            pages += 1
            # Next links already carry the query string.
            params = None
            url = response.links.get("next", {}).get("url")

        if url is not None:
            log_warning(
                logger,
                "Repository listing stopped at page ceiling max_pages=%d "
                "repositories=%d",
                self._config.max_pages,
                len(repositories),
            )
        return repositories

    async def list_hooks(self, full_name: str) -> list[WebhookRecord]:
        """Return the first page of webhooks registered on *full_name*."""
        response = await self._send("GET", self._hooks_url(full_name))
        if not _is_success(response):
            raise GitHubAPIError.list_hooks_failed(response.status_code)
        return _decode(response, list[WebhookRecord], field="hooks")

    async def create_hook(
        self, full_name: str, *, target_url: str, secret: str
    ) -> None:
        """Register a JSON ``workflow_run`` webhook on *full_name*."""
        payload = {
            "name": "web",
            "active": True,
            "events": [CI_COMPLETION_EVENT],
            "config": {
                "url": target_url,
                "content_type": "json",
                "secret": secret,
            },
        }
        response = await self._send("POST", self._hooks_url(full_name), json=payload)
        if not _is_success(response):
            raise GitHubAPIError.create_hook_failed(
                response.status_code, response.reason_phrase
            )

    async def delete_hook(self, full_name: str, hook_id: int) -> None:
        """Delete webhook *hook_id* from *full_name*."""
        response = await self._send(
            "DELETE", f"{self._hooks_url(full_name)}/{hook_id}"
        )
        if not _is_success(response):
            raise GitHubAPIError.delete_hook_failed(response.status_code)
