"""Error classification for Vessel API responses."""

from vesselapi.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from vesselapi.errors.handler import (
    decode_response,
    empty_response_error,
    error_from_status,
    raise_for_status,
    status_text,
)
from vesselapi.errors.models import ErrorMessage

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ErrorMessage",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "UnauthorizedError",
    "ValidationError",
    "decode_response",
    "empty_response_error",
    "error_from_status",
    "raise_for_status",
    "status_text",
]
