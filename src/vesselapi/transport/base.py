"""Base class and helpers shared by the transport layers."""

import httpx


def clone_request(
    request: httpx.Request,
    stream: httpx.SyncByteStream | httpx.AsyncByteStream | None = None,
) -> httpx.Request:
    """Return an independent copy of ``request``.

    Headers and extensions are copied, so mutating the clone never affects the
    original. The body stream is shared unless a replacement ``stream`` is given.

    Args:
        request: The request to copy
        stream: Optional body stream for the clone

    Returns:
        A new request with the same method, URL, headers and body
    """
    return httpx.Request(
        request.method,
        request.url,
        headers=request.headers,
        stream=stream if stream is not None else request.stream,
        extensions=dict(request.extensions),
    )


class WrappingTransport(httpx.AsyncBaseTransport):
    """Transport that delegates to another transport.

    Subclasses override ``handle_async_request`` and call
    ``self._wrapped_transport`` for the actual round trip. Lifecycle calls
    (context management and closing) are forwarded to the wrapped transport
    so that connection pools are released when the client closes.

    Args:
        wrapped_transport: The underlying transport to wrap
    """

    def __init__(self, *, wrapped_transport: httpx.AsyncBaseTransport) -> None:
        self._wrapped_transport = wrapped_transport

    @property
    def wrapped_transport(self) -> httpx.AsyncBaseTransport:
        return self._wrapped_transport

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type=None, exc_val=None, exc_tb=None):
        """Exit async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self._wrapped_transport.handle_async_request(request)
