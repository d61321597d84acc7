"""Hookwarden runtime entrypoint.

This module provides the ASGI application factory used by Granian. It
delegates to :func:`hookwarden.api.app.create_app` while keeping the
``hookwarden.runtime:create_app`` entrypoint stable.

When ``HOOKWARDEN_ADMIN_TOKEN`` is set, the runtime registers the
authenticated ``POST /api/sync-webhooks`` endpoint. Otherwise it starts in
health-only mode. GitHub credentials and the target URL are read per
request, see :class:`hookwarden.sync.config.SyncConfig`.

Configuration is driven by environment variables:

- ``HOOKWARDEN_HOST``: Bind address (default ``0.0.0.0``)
- ``HOOKWARDEN_PORT``: Listen port (default ``8080``)
- ``HOOKWARDEN_LOG_LEVEL``: Log level (default ``INFO``)
- ``HOOKWARDEN_ADMIN_TOKEN``: Bearer token for administrative endpoints
- ``HOOKWARDEN_GITHUB_API_URL``: Optional GitHub API base URL override

Run the service directly with ``python -m hookwarden.runtime``.
"""

from __future__ import annotations

import os
import typing as typ

from hookwarden.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["create_app", "main"]

logger = get_logger(__name__)

# TCP port number range limits
_MIN_PORT = 1
_MAX_PORT = 65535


def _parse_port(port_str: str) -> int:
    """Parse and validate a port number string.

    Raises
    ------
    SystemExit
        If port_str is not a valid integer in range 1-65535.

    """
    try:
        port = int(port_str)
        if not (_MIN_PORT <= port <= _MAX_PORT):
            msg = f"port {port} outside valid range {_MIN_PORT}-{_MAX_PORT}"
            raise ValueError(msg)  # noqa: TRY301 - unify conversion and range errors
    except ValueError as exc:
        log_error(
            logger,
            "Invalid HOOKWARDEN_PORT value: %r (must be %d-%d): %s",
            port_str,
            _MIN_PORT,
            _MAX_PORT,
            exc,
        )
        raise SystemExit(1) from exc
    return port


def create_app() -> falcon.asgi.App:
    """Create the Falcon ASGI application from the environment.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    from hookwarden.api.app import create_app as _create_api_app

    admin_token = os.environ.get("HOOKWARDEN_ADMIN_TOKEN", "").strip()
    if not admin_token:
        log_warning(
            logger,
            "HOOKWARDEN_ADMIN_TOKEN is unset; starting in health-only mode",
        )
        return _create_api_app()

    from hookwarden.api.app import AppDependencies
    from hookwarden.sync.service import WebhookSyncService

    base_url = os.environ.get("HOOKWARDEN_GITHUB_API_URL", "").strip() or None
    deps = AppDependencies(
        admin_token=admin_token,
        sync_service=WebhookSyncService(base_url=base_url),
    )
    return _create_api_app(deps)


def main() -> None:
    """Start the Hookwarden runtime server using Granian.

    Reads ``HOOKWARDEN_HOST``, ``HOOKWARDEN_PORT``, and
    ``HOOKWARDEN_LOG_LEVEL`` from the environment and starts the ASGI server.
    """
    from granian import Granian
    from granian.constants import Interfaces

    host = os.environ.get("HOOKWARDEN_HOST", "0.0.0.0")  # noqa: S104 - bind all interfaces for container
    port = _parse_port(os.environ.get("HOOKWARDEN_PORT", "8080"))
    log_level_str = os.environ.get("HOOKWARDEN_LOG_LEVEL", "INFO")

    normalized_level, invalid_level = configure_logging(log_level_str)
    if invalid_level:
        log_warning(
            logger,
            "Invalid HOOKWARDEN_LOG_LEVEL %r, falling back to %s",
            log_level_str,
            normalized_level,
        )

    log_info(
        logger,
        "Starting Hookwarden runtime on %s:%d (log_level=%s)",
        host,
        port,
        normalized_level,
    )

    server = Granian(
        "hookwarden.runtime:create_app",
        address=host,
        port=port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
