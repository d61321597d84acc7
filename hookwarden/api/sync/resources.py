"""Administrative endpoint that triggers webhook reconciliation.

Usage
-----
Register the resource behind :class:`~hookwarden.api.auth.AdminTokenMiddleware`::

    app.add_route(
        "/api/sync-webhooks",
        WebhookSyncResource(sync_service=WebhookSyncService()),
    )

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

from hookwarden.sync.config import SyncConfig

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from falcon.asgi import Request, Response

    from hookwarden.sync.service import WebhookSyncService

__all__ = ["WebhookSyncResource"]


class WebhookSyncResource:
    """Run one reconciliation and return the result as JSON.

    Settings are resolved per request so rotated credentials take effect
    without a restart.
    """

    requires_admin_token = True

    def __init__(
        self,
        *,
        sync_service: WebhookSyncService,
        config_loader: cabc.Callable[[], SyncConfig] = SyncConfig.from_env,
    ) -> None:
        """Initialize with the sync service and a settings loader.

        Parameters
        ----------
        sync_service
            Service performing the reconciliation.
        config_loader
            Callable returning the desired configuration; raises
            ``WebhookSyncConfigError`` when settings are missing.

        """
        self._sync_service = sync_service
        self._config_loader = config_loader

    async def on_post(self, _req: Request, resp: Response) -> None:
        """Handle POST /api/sync-webhooks.

        Responds 200 with ``created``, ``deleted``, ``unchanged`` and
        ``errors`` even when some repositories failed or the run was cut
        short by rate limiting.
        """
        config = self._config_loader()
        result = await self._sync_service.synchronize(config)
        resp.media = {"status": "success", **result.to_builtins()}
        resp.status = HTTPStatus.OK
