"""Retry transport for resilient Vessel API calls.

``RetryTransport`` retries rate-limited requests, server errors and transient
network failures with exponential backoff and jitter. It never repeats a
request that the server may already have applied.

## Retry Rules

| Condition | Retried for | Wait |
|-----------|-------------|------|
| 429 Too Many Requests | All methods | `Retry-After`, else exponential backoff |
| 5xx Server Error | GET, HEAD, OPTIONS, PUT, DELETE | `Retry-After`, else exponential backoff |
| Transient network error | GET, HEAD, OPTIONS, PUT, DELETE | Exponential backoff |
| Task cancellation / caller deadline | Never | - |

A 429 means the server did not process the request, so it is safe to repeat
any method. On a 5xx a POST or PATCH may already have taken effect.

All waits are capped at 30 seconds. ``Retry-After`` accepts both delay-seconds
(``"120"``) and HTTP-date (``"Wed, 21 Oct 2015 07:28:00 GMT"``) values.

## Example

```python
import httpx

from vesselapi.transport.retry import RetryTransport

retry_transport = RetryTransport(
    wrapped_transport=httpx.AsyncHTTPTransport(),
    max_retries=3,
)

async with httpx.AsyncClient(transport=retry_transport) as client:
    response = await client.get("https://api.vesselapi.com/v1/port/NLRTM")
```
"""

import asyncio
import logging
import random
import ssl
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

from vesselapi.transport.base import WrappingTransport, clone_request

logger = logging.getLogger(__name__)

# Methods assumed safe to repeat after a server error or network failure
IDEMPOTENT_METHODS: frozenset[str] = frozenset(["GET", "HEAD", "OPTIONS", "PUT", "DELETE"])

DEFAULT_MAX_RETRIES = 3

# Upper bound for any single wait, in seconds
MAX_BACKOFF = 30.0

# Upper bound on bytes read from a discarded response before closing it
MAX_DRAIN_BYTES = 1 << 20


def is_idempotent(method: str) -> bool:
    """Return True if ``method`` may be repeated after a 5xx or network error."""
    return method.upper() in IDEMPOTENT_METHODS


def is_retryable_status(status_code: int) -> bool:
    """Return True for 429 and any 5xx status."""
    return status_code == 429 or status_code >= 500


def is_transient_error(exc: BaseException) -> bool:
    """Return True for network failures worth retrying.

    Timeouts and connection-level errors are transient. Certificate
    verification failures surface as connection errors too, but repeating
    the request cannot fix them.

    Args:
        exc: The exception raised by the transport

    Returns:
        True if the error is transient
    """
    if not isinstance(exc, (httpx.TimeoutException, httpx.NetworkError)):
        return False

    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, ssl.SSLCertVerificationError):
            return False
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return True


def parse_retry_after(value: str | None, max_backoff: float = MAX_BACKOFF) -> float | None:
    """Parse a ``Retry-After`` header value.

    Supports both formats:
    - Delay-seconds: "120" (integer seconds)
    - HTTP-date: "Wed, 21 Oct 2015 07:28:00 GMT"

    Negative delays and dates in the past yield 0. Delays longer than
    ``max_backoff`` are capped.

    Args:
        value: Raw header value
        max_backoff: Maximum delay in seconds

    Returns:
        Delay in seconds, or None if the value is missing or invalid
    """
    if not value:
        return None
    value = value.strip()

    # Try parsing as integer (delay-seconds format)
    try:
        delay = float(int(value))
    except ValueError:
        pass
    else:
        return _clamp(delay, max_backoff)

    # Try parsing as HTTP-date format
    try:
        retry_date = parsedate_to_datetime(value)
    except (ValueError, TypeError):
        return None

    if retry_date.tzinfo is None:
        retry_date = retry_date.replace(tzinfo=UTC)
    delay = (retry_date - datetime.now(UTC)).total_seconds()
    return _clamp(delay, max_backoff)


def exponential_backoff(attempt: int, max_backoff: float = MAX_BACKOFF) -> float:
    """Calculate exponential backoff delay with jitter.

    Uses formula: (2 ** attempt + jitter) * 0.5, where jitter is uniform in
    [0, 2 ** attempt). Attempt 0 waits 0.5-1s, attempt 1 waits 1-2s, and so on,
    capped at ``max_backoff``.

    Args:
        attempt: Zero-based index of the attempt that just failed
        max_backoff: Maximum delay in seconds

    Returns:
        Delay in seconds
    """
    # 2**32 seconds is already far beyond any cap
    base = 2.0 ** min(max(attempt, 0), 32)
    jitter = random.random() * base
    return min((base + jitter) * 0.5, max_backoff)


def calculate_backoff(
    attempt: int,
    response: httpx.Response | None = None,
    max_backoff: float = MAX_BACKOFF,
) -> float:
    """Return the wait before the next attempt.

    The response's ``Retry-After`` header wins when present and valid,
    otherwise exponential backoff applies.
    """
    if response is not None:
        delay = parse_retry_after(response.headers.get("Retry-After"), max_backoff)
        if delay is not None:
            return delay
    return exponential_backoff(attempt, max_backoff)


async def drain_response(response: httpx.Response, limit: int = MAX_DRAIN_BYTES) -> None:
    """Read and discard up to ``limit`` bytes of a response body, then close it.

    Releasing the body lets the connection return to the pool before the
    request is retried.
    """
    try:
        if not response.is_stream_consumed and not response.is_closed:
            drained = 0
            async for chunk in response.aiter_raw():
                drained += len(chunk)
                if drained >= limit:
                    break
    except httpx.TransportError as e:
        logger.debug(f"Discarding unreadable response body: {e}")
    finally:
        await response.aclose()


def _clamp(delay: float, max_backoff: float) -> float:
    return max(0.0, min(delay, max_backoff))


class RetryTransport(WrappingTransport):
    """Retry transport that handles rate limiting, server and network errors.

    Use this as the outermost layer of the transport stack so that every
    attempt passes through authentication and the base transport again.

    Args:
        wrapped_transport: The underlying transport to wrap
        max_retries: Maximum number of retry attempts (default: 3). Negative
            values are treated as 0.
        max_backoff: Maximum wait between attempts in seconds (default: 30)

    Example:
        ```python
        transport = RetryTransport(
            wrapped_transport=httpx.AsyncHTTPTransport(),
            max_retries=5,
        )
        ```
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        max_retries: int = DEFAULT_MAX_RETRIES,
        max_backoff: float = MAX_BACKOFF,
    ) -> None:
        super().__init__(wrapped_transport=wrapped_transport)
        self.max_retries = max(0, max_retries)
        self.max_backoff = max_backoff

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Handle request with retry logic.

        Each attempt sends a fresh copy of the request with its own body
        stream, so a partially consumed body from a failed attempt is never
        reused.

        Args:
            request: The HTTP request to send

        Returns:
            HTTP response (after retries if needed)

        Raises:
            httpx.TransportError: Non-retryable network error, or a transient
                one once retries are exhausted
        """
        body = await request.aread()
        attempt = 0

        while True:
            attempt_request = clone_request(request, stream=httpx.ByteStream(body))

            try:
                response = await self._wrapped_transport.handle_async_request(attempt_request)
            except httpx.TransportError as e:
                if not self._should_retry_error(request, e, attempt):
                    raise

                delay = exponential_backoff(attempt, self.max_backoff)
                attempt += 1
                logger.warning(
                    f"Request {request.method} {request.url} failed with {e!r}, "
                    f"retrying in {delay:.2f}s (attempt {attempt}/{self.max_retries})"
                )
                await asyncio.sleep(delay)
                continue

            if not self._should_retry(request, response, attempt):
                return response

            delay = calculate_backoff(attempt, response, self.max_backoff)
            await drain_response(response)
            attempt += 1
            logger.warning(
                f"Request {request.method} {request.url} failed with {response.status_code}, "
                f"retrying in {delay:.2f}s (attempt {attempt}/{self.max_retries})"
            )
            await asyncio.sleep(delay)

    def _should_retry(self, request: httpx.Request, response: httpx.Response, attempt: int) -> bool:
        """Determine if a response should be retried.

        Args:
            request: The HTTP request
            response: The HTTP response received
            attempt: Zero-based index of the attempt that produced the response

        Returns:
            True if should retry, False otherwise
        """
        if attempt >= self.max_retries or not is_retryable_status(response.status_code):
            return False

        # Rate limited requests were not processed, any method is safe
        if response.status_code == 429:
            return True

        return is_idempotent(request.method)

    def _should_retry_error(self, request: httpx.Request, error: httpx.TransportError, attempt: int) -> bool:
        return attempt < self.max_retries and is_idempotent(request.method) and is_transient_error(error)
