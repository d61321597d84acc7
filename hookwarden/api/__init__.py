"""Hookwarden HTTP API layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application exposing health probes and the administrative webhook
reconciliation endpoint.

Usage
-----
Create and run the application::

    from hookwarden.api import create_app

    app = create_app()              # health-only mode
    app = create_app(dependencies)  # with POST /api/sync-webhooks

"""

from hookwarden.api.app import create_app

__all__ = ["create_app"]
