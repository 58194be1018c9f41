"""Transport layer components for composable HTTP middleware.

This module provides transport layers that are composed to build the Vessel
API client's HTTP stack. Each layer is an ``httpx.AsyncBaseTransport`` that
wraps the next one.

Modules:
    base: Base wrapping transport and request cloning
    auth: Bearer token and User-Agent headers
    retry: Retry logic with Retry-After support and exponential backoff

Example:
    ```python
    import httpx

    from vesselapi.transport import create_transport_stack

    transport = create_transport_stack(
        api_key="my-api-key",
        user_agent="my-app/1.0",
        max_retries=3,
    )

    async with httpx.AsyncClient(base_url="https://api.vesselapi.com/v1", transport=transport) as client:
        response = await client.get("/port/NLRTM")
    ```
"""

import httpx

from vesselapi.transport.auth import AuthTransport
from vesselapi.transport.base import WrappingTransport, clone_request
from vesselapi.transport.retry import DEFAULT_MAX_RETRIES, MAX_BACKOFF, RetryTransport


def create_transport_stack(
    *,
    api_key: str,
    user_agent: str,
    max_retries: int = DEFAULT_MAX_RETRIES,
    max_backoff: float = MAX_BACKOFF,
    base_transport: httpx.AsyncBaseTransport | None = None,
) -> RetryTransport:
    """Build the retry -> auth -> base transport stack.

    Retry is the outermost layer so every attempt is authenticated afresh.

    Args:
        api_key: API key sent as a bearer token
        user_agent: Value for the ``User-Agent`` header
        max_retries: Maximum number of retries (negative values mean none)
        max_backoff: Maximum wait between attempts in seconds
        base_transport: Transport performing the actual I/O. Defaults to a
            new ``httpx.AsyncHTTPTransport``.

    Returns:
        The outermost transport of the stack
    """
    if base_transport is None:
        base_transport = httpx.AsyncHTTPTransport()

    auth = AuthTransport(wrapped_transport=base_transport, api_key=api_key, user_agent=user_agent)
    return RetryTransport(wrapped_transport=auth, max_retries=max_retries, max_backoff=max_backoff)


__all__ = [
    "AuthTransport",
    "RetryTransport",
    "WrappingTransport",
    "clone_request",
    "create_transport_stack",
]
