"""Bearer-token authentication for administrative endpoints.

Tokens are compared as HMAC-SHA256 digests under a fixed key, so neither the
length nor the content of the expected token leaks through comparison time.

Usage
-----
Register the middleware and mark protected resources::

    from hookwarden.api.auth import AdminTokenMiddleware

    app = falcon.asgi.App(middleware=[AdminTokenMiddleware(admin_token)])

    class SyncResource:
        requires_admin_token = True

"""

from __future__ import annotations

import hashlib
import hmac
import typing as typ

import falcon

from hookwarden.logging import get_logger, log_warning

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["AdminTokenMiddleware", "verify_bearer_token"]

logger = get_logger(__name__)

_COMPARISON_KEY = b"hookwarden-admin-token-comparison"
_BEARER_PREFIX = "Bearer "


def _digest(value: str) -> bytes:
    return hmac.new(_COMPARISON_KEY, value.encode("utf-8"), hashlib.sha256).digest()


def verify_bearer_token(auth_header: str | None, expected_token: str) -> bool:
    """Return whether *auth_header* carries *expected_token* as a bearer token.

    Parameters
    ----------
    auth_header
        Raw ``Authorization`` header value, or ``None`` when absent.
    expected_token
        Configured administrative token. An empty token never matches.

    """
    if not auth_header or not auth_header.startswith(_BEARER_PREFIX):
        return False
    if not expected_token:
        return False

    token = auth_header[len(_BEARER_PREFIX) :]
    return hmac.compare_digest(_digest(token), _digest(expected_token))


class AdminTokenMiddleware:
    """Reject requests to protected resources without the admin token.

    Only resources that set ``requires_admin_token = True`` are guarded;
    health probes stay public.
    """

    def __init__(self, admin_token: str) -> None:
        """Initialize the middleware with the expected bearer token."""
        self._admin_token = admin_token

    async def process_resource(
        self,
        req: Request,
        _resp: Response,
        resource: object,
        _params: dict[str, typ.Any],
    ) -> None:
        """Raise HTTP 401 when a protected resource lacks valid credentials."""
        if not getattr(resource, "requires_admin_token", False):
            return
        if verify_bearer_token(req.get_header("Authorization"), self._admin_token):
            return

        log_warning(logger, "Rejected unauthenticated request to %s", req.path)
        raise falcon.HTTPUnauthorized(
            title="Unauthorized",
            description="A valid bearer token is required.",
            challenges=["Bearer"],
        )
