"""Structured exceptions for Vessel API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class APIError(Exception):
    """Base exception for API errors.

    Raised for any response outside the 2xx range, and for 2xx responses
    without a usable payload. The raw response body is kept in ``body`` so
    callers can re-parse error shapes this library does not know about.

    Attributes:
        status_code: HTTP status code
        message: Human-readable error message
        body: Raw response body
        response: The response the error was built from, if available
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: bytes = b"",
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.response = response

    def __str__(self) -> str:
        return f"{self.message} (status {self.status_code})"

    @property
    def is_not_found(self) -> bool:
        """True for 404 Not Found."""
        return self.status_code == 404

    @property
    def is_rate_limited(self) -> bool:
        """True for 429 Too Many Requests."""
        return self.status_code == 429

    @property
    def is_auth_error(self) -> bool:
        """True for 401 Unauthorized."""
        return self.status_code == 401


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, status_code: int = 429, retry_after: int | None = None, **kwargs):
        super().__init__(message, status_code, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass
