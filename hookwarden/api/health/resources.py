"""Health probe resources for liveness and readiness checks.

These resources are stateless and never touch GitHub. They are always
registered and never require the administrative token.

Usage
-----
Register health endpoints on the Falcon app::

    from hookwarden.api.health.resources import HealthResource, ReadyResource

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["SERVICE_NAME", "HealthResource", "ReadyResource"]

SERVICE_NAME = "hookwarden"


class HealthResource:
    """Liveness probe returning the service name and ``"ok"`` status."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /health requests."""
        resp.media = {"status": "ok", "service": SERVICE_NAME}
        resp.status = HTTPStatus.OK


class ReadyResource:
    """Readiness probe returning ``{"status": "ready"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /ready requests."""
        resp.media = {"status": "ready"}
        resp.status = HTTPStatus.OK
