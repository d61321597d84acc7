"""Falcon error handlers for reconciliation failures.

A run that cannot list repositories has produced nothing to report, so it
surfaces as HTTP 500 with the failing status in the message. Missing sync
settings are a caller-side problem and map to HTTP 400. Per-repository
failures never reach these handlers; they are part of the normal result.

Usage
-----
Register error handlers on the Falcon app::

    app.add_error_handler(WebhookSyncConfigError, handle_sync_config_error)
    app.add_error_handler(GitHubAPIError, handle_sync_failure)

"""

from __future__ import annotations

import typing as typ

import falcon

from hookwarden.logging import get_logger, log_error

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from hookwarden.sync.errors import WebhookSyncConfigError

__all__ = ["handle_sync_config_error", "handle_sync_failure"]

logger = get_logger(__name__)


async def handle_sync_config_error(
    _req: Request,
    resp: Response,
    ex: WebhookSyncConfigError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``WebhookSyncConfigError`` to an HTTP 400 JSON response.

    Parameters
    ----------
    _req
        Falcon request (unused).
    resp
        Falcon response whose status and media are set.
    ex
        The configuration error describing the missing settings.
    _params
        URI template parameters (unused).

    """
    resp.status = falcon.HTTP_400
    resp.media = {"status": "error", "message": str(ex)}


async def handle_sync_failure(
    req: Request,
    resp: Response,
    ex: Exception,
    _params: dict[str, typ.Any],
) -> None:
    """Map a failed repository listing to an HTTP 500 JSON response.

    Parameters
    ----------
    req
        Falcon request, used for the log line.
    resp
        Falcon response whose status and media are set.
    ex
        The GitHub, response-shape, or transport error that aborted the run.
    _params
        URI template parameters (unused).

    """
    log_error(logger, "Webhook sync failed for %s: %s", req.path, ex, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"status": "error", "message": str(ex)}
