"""GitHub REST API errors."""

from __future__ import annotations

RATE_LIMIT_MESSAGE = "GitHub API rate limit exceeded"


class GitHubAPIError(RuntimeError):
    """Raised when GitHub returns an error response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def list_repositories_failed(cls, status_code: int) -> GitHubAPIError:
        """Return an error for a failed repository listing page."""
        return cls(f"Failed to fetch repos: {status_code}", status_code=status_code)

    @classmethod
    def list_hooks_failed(cls, status_code: int) -> GitHubAPIError:
        """Return an error for a failed hook listing."""
        return cls(f"Failed to list hooks: {status_code}", status_code=status_code)

    @classmethod
    def create_hook_failed(cls, status_code: int, reason: str) -> GitHubAPIError:
        """Return an error for a rejected hook creation."""
        message = f"Failed to create hook: {status_code} {reason}".rstrip()
        return cls(message, status_code=status_code)

    @classmethod
    def delete_hook_failed(cls, status_code: int) -> GitHubAPIError:
        """Return an error for a rejected hook deletion."""
        return cls(f"Failed to delete hook: {status_code}", status_code=status_code)


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub signals that the request quota is exhausted.

    Unlike other API errors this aborts a whole reconciliation run rather
    than being recorded against a single repository.

    Attributes
    ----------
    retry_after
        Raw ``Retry-After`` header value, when GitHub supplied one.

    """

    def __init__(self, retry_after: str | None, *, status_code: int | None = None) -> None:
        """Initialise with the ``Retry-After`` hint and triggering status."""
        self.retry_after = retry_after
        super().__init__(RATE_LIMIT_MESSAGE, status_code=status_code)


class GitHubResponseShapeError(RuntimeError):
    """Raised when GitHub REST responses are missing expected fields."""

    @classmethod
    def missing(cls, field: str) -> GitHubResponseShapeError:
        """Return an error for a missing or malformed response field."""
        return cls(f"GitHub REST response missing expected field: {field}")


class GitHubConfigError(RuntimeError):
    """Raised when GitHub client configuration is invalid."""

    @classmethod
    def missing_token(cls) -> GitHubConfigError:
        """Return an error when no GitHub token is configured."""
        return cls("HOOKWARDEN_GITHUB_TOKEN is required for GitHub API")

    @classmethod
    def empty_token(cls) -> GitHubConfigError:
        """Return an error when the provided token is empty."""
        return cls("GitHub token must be non-empty")
