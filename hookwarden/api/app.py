"""Application factory for the Hookwarden Falcon ASGI application.

This module provides ``create_app()`` which builds the Falcon ASGI
application with health endpoints and, when an administrative token and
sync service are available, the webhook reconciliation endpoint.

Usage
-----
Create a health-only app::

    app = create_app()

Create a full app with the reconciliation endpoint::

    from hookwarden.api.app import AppDependencies, create_app
    from hookwarden.sync import WebhookSyncService

    deps = AppDependencies(
        admin_token="change-me",
        sync_service=WebhookSyncService(),
    )
    app = create_app(deps)

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon.asgi
import httpx

from hookwarden.api.auth import AdminTokenMiddleware
from hookwarden.api.errors import handle_sync_config_error, handle_sync_failure
from hookwarden.api.health.resources import HealthResource, ReadyResource
from hookwarden.github.errors import GitHubAPIError, GitHubResponseShapeError
from hookwarden.sync.config import SyncConfig
from hookwarden.sync.errors import WebhookSyncConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from hookwarden.sync.service import WebhookSyncService

__all__ = ["SYNC_ROUTE", "AppDependencies", "create_app"]

SYNC_ROUTE = "/api/sync-webhooks"


@dc.dataclass(frozen=True, slots=True)
class AppDependencies:
    """Dependencies for the Falcon ASGI application.

    When ``admin_token`` and ``sync_service`` are both provided, the app
    registers ``POST /api/sync-webhooks`` behind bearer authentication.
    Otherwise only health endpoints are registered.

    Attributes
    ----------
    admin_token
        Bearer token required by administrative endpoints.
    sync_service
        Service that performs webhook reconciliation.
    config_loader
        Callable resolving the desired webhook configuration per request.

    """

    admin_token: str | None = dc.field(default=None, repr=False)
    sync_service: WebhookSyncService | None = None
    config_loader: cabc.Callable[[], SyncConfig] = SyncConfig.from_env


def _has_sync_deps(deps: AppDependencies | None) -> bool:
    """Return True when deps provide both an admin token and a service."""
    return deps is not None and bool(deps.admin_token) and deps.sync_service is not None


def create_app(
    dependencies: AppDependencies | None = None,
) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    Parameters
    ----------
    dependencies
        Optional application dependencies. When ``None`` or incomplete,
        only ``/health`` and ``/ready`` are available.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    middleware: list[object] = []
    if _has_sync_deps(dependencies) and dependencies is not None:
        token = typ.cast("str", dependencies.admin_token)
        middleware.append(AdminTokenMiddleware(token))

    app = falcon.asgi.App(middleware=middleware)  # type: ignore[no-matching-overload]  # Falcon stubs

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())

    if _has_sync_deps(dependencies) and dependencies is not None:
        from hookwarden.api.sync.resources import WebhookSyncResource

        service = typ.cast("WebhookSyncService", dependencies.sync_service)
        app.add_route(
            SYNC_ROUTE,
            WebhookSyncResource(
                sync_service=service,
                config_loader=dependencies.config_loader,
            ),
        )

    app.add_error_handler(WebhookSyncConfigError, handle_sync_config_error)
    app.add_error_handler(GitHubAPIError, handle_sync_failure)
    app.add_error_handler(GitHubResponseShapeError, handle_sync_failure)
    app.add_error_handler(httpx.HTTPError, handle_sync_failure)

    return app
