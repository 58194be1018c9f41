"""Authentication transport for the Vessel API.

Every request leaving the client passes through ``AuthTransport``, which sets
the bearer credential and the client identification header on a copy of the
request before handing it to the wrapped transport.

Example:
    ```python
    import httpx

    from vesselapi.transport.auth import AuthTransport

    transport = AuthTransport(
        wrapped_transport=httpx.AsyncHTTPTransport(),
        api_key="my-api-key",
        user_agent="my-app/1.0",
    )
    ```
"""

import logging

import httpx

from vesselapi.transport.base import WrappingTransport, clone_request

logger = logging.getLogger(__name__)


class AuthTransport(WrappingTransport):
    """Transport that adds ``Authorization`` and ``User-Agent`` headers.

    The caller's request is never modified; headers are set on a clone.

    Args:
        wrapped_transport: The underlying transport to wrap
        api_key: API key sent as a bearer token
        user_agent: Value for the ``User-Agent`` header
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        api_key: str,
        user_agent: str,
    ) -> None:
        super().__init__(wrapped_transport=wrapped_transport)
        self._api_key = api_key
        self.user_agent = user_agent

    def __repr__(self) -> str:
        return f"AuthTransport(user_agent={self.user_agent!r}, api_key='***')"

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        authed = clone_request(request)
        authed.headers["Authorization"] = f"Bearer {self._api_key}"
        authed.headers["User-Agent"] = self.user_agent

        logger.debug(f"Sending {authed.method} {authed.url}")
        return await self._wrapped_transport.handle_async_request(authed)
