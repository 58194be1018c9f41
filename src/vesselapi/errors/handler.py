"""Error handling utilities for HTTP responses."""

import json
from http import HTTPStatus
from typing import Any

import httpx

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
from vesselapi.errors.models import ErrorMessage

EMPTY_RESPONSE_MESSAGE = "unexpected empty response"
INVALID_JSON_MESSAGE = "invalid JSON response"

_EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def status_text(status_code: int) -> str:
    """Return the standard reason phrase for a status code."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown Status"


def error_from_status(
    status_code: int,
    body: bytes,
    response: httpx.Response | None = None,
) -> APIError | None:
    """Build a structured error for a non-2xx status.

    The message defaults to the standard reason phrase and is replaced by the
    message found in the body, if any (see ``ErrorMessage``). The raw body is
    always kept on the error.

    Args:
        status_code: HTTP status code
        body: Raw response body
        response: Optional response to attach to the error

    Returns:
        APIError subclass based on status code, or None for 2xx statuses
    """
    if 200 <= status_code < 300:
        return None

    message = status_text(status_code)
    parsed = ErrorMessage.from_body(body)
    if parsed is not None:
        message = parsed.message

    # Determine exception class
    if status_code in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    if exc_class is RateLimitError:
        return RateLimitError(
            message,
            status_code,
            retry_after=_retry_after_seconds(response),
            body=body,
            response=response,
        )

    return exc_class(message, status_code, body=body, response=response)


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Args:
        response: HTTP response object (body already read)

    Raises:
        APIError subclass based on status code
    """
    error = error_from_status(response.status_code, response.content, response=response)
    if error is not None:
        raise error


def empty_response_error(status_code: int, body: bytes = b"", response: httpx.Response | None = None) -> APIError:
    """Error for a 2xx response that carries no usable payload."""
    return APIError(EMPTY_RESPONSE_MESSAGE, status_code, body=body, response=response)


def decode_response(response: httpx.Response) -> dict[str, Any]:
    """Turn a finished response into its decoded JSON object.

    Args:
        response: HTTP response object (body already read)

    Returns:
        The decoded JSON object of a 2xx response

    Raises:
        APIError: For non-2xx statuses, and for 2xx responses whose body is
            empty, ``null``, not a JSON object, or not valid JSON
    """
    raise_for_status(response)

    body = response.content
    if not body.strip():
        raise empty_response_error(response.status_code, body, response)

    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        raise APIError(INVALID_JSON_MESSAGE, response.status_code, body=body, response=response) from None

    if not isinstance(data, dict):
        raise empty_response_error(response.status_code, body, response)

    return data


def _retry_after_seconds(response: httpx.Response | None) -> int | None:
    if response is None or "retry-after" not in response.headers:
        return None
    try:
        return int(response.headers["retry-after"])
    except (ValueError, TypeError):
        # If parsing fails, leave as None
        return None
