"""Testing utilities for code built on the Vessel API client.

Factories for mock responses and handlers to use with ``httpx.MockTransport``.

Example:
    ```python
    import httpx

    from vesselapi import VesselClient
    from vesselapi.testing import create_error_response, create_paged_handler


    async def test_lists_all_vessels():
        handler = create_paged_handler([[{"name": "A"}], [{"name": "B"}]], items_key="vessels")
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = VesselClient("test-key", http_client=http_client, load_dotenv=False)

        vessels = await client.search.all_vessels().collect_all()

        assert [v["name"] for v in vessels] == ["A", "B"]
    ```
"""

from typing import Any

import httpx


def create_json_response(data: Any, status_code: int = 200, headers: dict[str, str] | None = None) -> httpx.Response:
    """Build a JSON response."""
    return httpx.Response(status_code, json=data, headers=headers)


def create_error_response(
    status_code: int,
    message: str | None = None,
    *,
    flat: bool = False,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build an error response in the shape the Vessel API uses.

    Args:
        status_code: HTTP status code
        message: Error message. Without one the body is empty.
        flat: Use ``{"message": ...}`` instead of ``{"error": {"message": ...}}``
        headers: Extra response headers (e.g. ``Retry-After``)
    """
    if message is None:
        return httpx.Response(status_code, headers=headers)
    body = {"message": message} if flat else {"error": {"message": message}}
    return httpx.Response(status_code, json=body, headers=headers)


class PagedHandler:
    """MockTransport handler serving a fixed list of pages.

    The first request (no cursor) gets page 1; page ``n`` links to the next
    one with the cursor ``"page-<n+1>"``. The last page carries no cursor.
    Every request received is kept in ``requests``.
    """

    def __init__(self, pages: list[list[Any]], items_key: str) -> None:
        self.pages = pages
        self.items_key = items_key
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        token = request.url.params.get("pagination.nextToken")
        index = int(token.removeprefix("page-")) - 1 if token else 0
        if index >= len(self.pages):
            return create_error_response(400, f"unknown page token {token!r}")

        next_token = f"page-{index + 2}" if index + 1 < len(self.pages) else None
        return create_json_response({self.items_key: self.pages[index], "nextToken": next_token})


def create_paged_handler(pages: list[list[Any]], items_key: str) -> PagedHandler:
    """Build a handler serving ``pages`` under ``items_key``."""
    return PagedHandler(pages, items_key)


__all__ = [
    "PagedHandler",
    "create_error_response",
    "create_json_response",
    "create_paged_handler",
]
