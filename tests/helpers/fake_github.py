"""In-memory GitHub REST API served through ``httpx.MockTransport``.

The fake keeps repository pages and per-repository hooks as plain dicts,
applies POST/DELETE calls to that state, and records every request so tests
can assert which calls were (or were not) issued.
"""

from __future__ import annotations

import dataclasses
import json
import re
import typing as typ

import httpx

from hookwarden.github import GitHubRestClient, GitHubRestConfig

API_BASE = "https://api.github.test"
TARGET_URL = "https://ci.example.test/webhook"

_HOOKS_PATH = re.compile(r"^/repos/(?P<owner>[^/]+)/(?P<name>[^/]+)/hooks$")
_HOOK_PATH = re.compile(r"^/repos/(?P<owner>[^/]+)/(?P<name>[^/]+)/hooks/(?P<id>\d+)$")


def repo(full_name: str, *, archived: bool = False) -> dict[str, typ.Any]:
    """Build a ``/user/repos`` entry."""
    return {"full_name": full_name, "archived": archived, "private": False}


def hook(hook_id: int, url: str = TARGET_URL) -> dict[str, typ.Any]:
    """Build a ``/repos/{owner}/{name}/hooks`` entry."""
    return {
        "id": hook_id,
        "name": "web",
        "active": True,
        "events": ["workflow_run"],
        "config": {"url": url, "content_type": "json", "insecure_ssl": "0"},
    }


@dataclasses.dataclass(frozen=True, slots=True)
class RecordedCall:
    """A request observed by the fake API."""

    method: str
    path: str
    query: str
    headers: dict[str, str]
    body: bytes


class FakeGitHubAPI:
    """Stateful fake of the GitHub endpoints used by webhook reconciliation."""

    def __init__(
        self,
        pages: list[list[dict[str, typ.Any]]] | None = None,
        hooks: dict[str, list[dict[str, typ.Any]]] | None = None,
    ) -> None:
        """Store repository pages and existing hooks keyed by ``owner/name``."""
        self.pages = pages if pages is not None else [[]]
        self.hooks: dict[str, list[dict[str, typ.Any]]] = {
            name: list(entries) for name, entries in (hooks or {}).items()
        }
        self.calls: list[RecordedCall] = []
        self._overrides: dict[tuple[str, str], tuple[int, dict[str, str]]] = {}
        self._next_hook_id = 1000

    @classmethod
    def with_repositories(
        cls,
        repositories: list[dict[str, typ.Any]],
        hooks: dict[str, list[dict[str, typ.Any]]] | None = None,
    ) -> FakeGitHubAPI:
        """Build a fake whose repositories fit on a single page."""
        return cls(pages=[repositories], hooks=hooks)

    def fail(
        self,
        method: str,
        path: str,
        status: int,
        *,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Answer every *method* request to *path* with *status*."""
        self._overrides[(method, path)] = (status, headers or {})

    def calls_to(self, method: str, path: str | None = None) -> list[RecordedCall]:
        """Return recorded calls filtered by method and optional path."""
        return [
            call
            for call in self.calls
            if call.method == method and (path is None or call.path == path)
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        """Serve a single request; used as the ``MockTransport`` handler."""
        path = request.url.path
        self.calls.append(
            RecordedCall(
                method=request.method,
                path=path,
                query=request.url.query.decode("ascii"),
                headers=dict(request.headers),
                body=request.content,
            )
        )
        override = self._overrides.get((request.method, path))
        if override is not None:
            status, headers = override
            return httpx.Response(
                status, headers=headers, json={"message": "injected failure"}
            )

        if path == "/user/repos" and request.method == "GET":
            return self._list_repositories(request)
        if (match := _HOOKS_PATH.match(path)) is not None:
            slug = f"{match['owner']}/{match['name']}"
            if request.method == "GET":
                return httpx.Response(200, json=self.hooks.get(slug, []))
            if request.method == "POST":
                return self._create_hook(slug, request)
        if (match := _HOOK_PATH.match(path)) is not None and request.method == "DELETE":
            slug = f"{match['owner']}/{match['name']}"
            return self._delete_hook(slug, int(match["id"]))
        return httpx.Response(404, json={"message": "Not Found"})

    def _list_repositories(self, request: httpx.Request) -> httpx.Response:
        page = int(request.url.params.get("page", "1"))
        entries = self.pages[page - 1] if page <= len(self.pages) else []
        headers: dict[str, str] = {}
        if page < len(self.pages):
            next_url = f"{API_BASE}/user/repos?type=owner&per_page=100&page={page + 1}"
            headers["Link"] = f'<{next_url}>; rel="next"'
        return httpx.Response(200, json=entries, headers=headers)

    def _create_hook(self, slug: str, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self._next_hook_id += 1
        created = hook(self._next_hook_id, payload["config"]["url"])
        self.hooks.setdefault(slug, []).append(created)
        return httpx.Response(201, json=created)

    def _delete_hook(self, slug: str, hook_id: int) -> httpx.Response:
        existing = self.hooks.get(slug, [])
        remaining = [entry for entry in existing if entry["id"] != hook_id]
        if len(remaining) == len(existing):
            return httpx.Response(404, json={"message": "Not Found"})
        self.hooks[slug] = remaining
        return httpx.Response(204)

    def make_http_client(self) -> httpx.AsyncClient:
        """Return an ``httpx.AsyncClient`` routed to this fake."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def make_client(
        self, http_client: httpx.AsyncClient, *, max_pages: int = 50
    ) -> GitHubRestClient:
        """Return a REST client bound to *http_client* and the fake base URL."""
        return GitHubRestClient(
            GitHubRestConfig(token="ghp_test", base_url=API_BASE, max_pages=max_pages),
            http_client=http_client,
        )
