"""Detect GitHub rate limiting on REST responses.

GitHub answers an exhausted quota with either ``429`` or a ``403`` whose
``X-RateLimit-Remaining`` header reads ``"0"``. A ``403`` without that header
is an ordinary authorization failure and must not be treated as a rate limit.
"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

from .errors import GitHubRateLimitError

if typ.TYPE_CHECKING:
    import httpx

REMAINING_HEADER = "X-RateLimit-Remaining"
RETRY_AFTER_HEADER = "Retry-After"


def is_rate_limited(response: httpx.Response) -> bool:
    """Return whether *response* signals an exhausted request quota."""
    if response.status_code == HTTPStatus.TOO_MANY_REQUESTS:
        return True
    return (
        response.status_code == HTTPStatus.FORBIDDEN
        and response.headers.get(REMAINING_HEADER) == "0"
    )


def raise_if_rate_limited(response: httpx.Response) -> None:
    """Raise :class:`GitHubRateLimitError` when *response* is rate limited.

    Raises
    ------
    GitHubRateLimitError
        Carrying the ``Retry-After`` header value, which may be ``None``.

    """
    if is_rate_limited(response):
        raise GitHubRateLimitError(
            response.headers.get(RETRY_AFTER_HEADER),
            status_code=response.status_code,
        )
