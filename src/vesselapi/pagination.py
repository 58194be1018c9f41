"""Lazy iteration over paginated API results.

List endpoints of the Vessel API return one page of items plus a
``nextToken`` cursor. ``PageIterator`` hides the page boundaries: it fetches
pages on demand and yields items one by one.

Example:
    ```python
    it = client.search.all_vessels(SearchVesselsParams(filter_name="EVER"))

    while await it.advance():
        print(it.current["name"])
    if it.error is not None:
        raise it.error

    # or
    async for vessel in client.search.all_vessels(SearchVesselsParams(filter_name="EVER")):
        print(vessel["name"])

    # or
    vessels = await client.search.all_vessels(SearchVesselsParams(filter_name="EVER")).collect_all()
    ```
"""

import dataclasses
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")

# Fetches one page and returns its items and the cursor of the next page
FetchPage = Callable[[], Awaitable[tuple[list[T], str | None]]]


class PageIterator(Generic[T]):
    """Sequential access to items spread over server pages.

    Use ``advance()`` to move to the next item, ``current`` to read it and
    ``error`` to check whether iteration stopped because a page failed.
    Once a page fetch fails the iterator stays failed: every later
    ``advance()`` returns False without fetching again.

    Args:
        fetch: Zero-argument coroutine function returning ``(items, next_cursor)``
            for the next page. A missing or empty cursor marks the last page.
            Exceptions it raises become the iterator's error.
    """

    def __init__(self, fetch: FetchPage[T]) -> None:
        self._fetch = fetch
        self._items: list[T] = []
        self._index = 0
        self._done = False
        self._error: Exception | None = None
        self._started = False
        self.pages_fetched = 0

    async def advance(self) -> bool:
        """Move to the next item, fetching the next page when needed.

        Returns:
            True if an item is available through ``current``, False when
            iteration is complete or an error occurred
        """
        if self._error is not None:
            return False

        if self._started:
            self._index += 1
        self._started = True

        # Items left on the current page
        if self._index < len(self._items):
            return True

        if self._done:
            return False

        try:
            items, next_cursor = await self._fetch()
        except Exception as e:
            logger.debug(f"Page fetch failed after {self.pages_fetched} page(s): {e!r}")
            self._error = e
            return False

        self._items = list(items or [])
        self._index = 0
        self.pages_fetched += 1
        logger.debug(f"Fetched page {self.pages_fetched} with {len(self._items)} item(s)")

        if not self._items:
            self._done = True
            return False

        # No cursor: this page is the last one, but its items are still yielded
        if not next_cursor:
            self._done = True

        return True

    @property
    def current(self) -> T | None:
        """The current item, or None before the first ``advance()`` or after exhaustion."""
        if self._index < len(self._items):
            return self._items[self._index]
        return None

    @property
    def error(self) -> Exception | None:
        """The first error encountered, if any."""
        return self._error

    async def collect_all(self) -> list[T]:
        """Consume the iterator and return all remaining items.

        Raises:
            Exception: The page error, if one occurred. Partial results are
                discarded.
        """
        items: list[T] = []
        while await self.advance():
            items.append(self._items[self._index])
        if self._error is not None:
            raise self._error
        return items

    def __aiter__(self) -> "PageIterator[T]":
        return self

    async def __anext__(self) -> T:
        if await self.advance():
            return self._items[self._index]
        if self._error is not None:
            raise self._error
        raise StopAsyncIteration


def paginate(
    fetch_page: Callable[[P], Awaitable[dict[str, Any]]],
    params: P,
    items_key: str,
    cursor_key: str = "nextToken",
) -> PageIterator[dict[str, Any]]:
    """Build an iterator over a paginated endpoint.

    The iterator works on its own copy of ``params``; the copy's
    ``pagination_next_token`` is replaced after every page, so the caller's
    object is never touched.

    Args:
        fetch_page: Coroutine function fetching one page for the given params
            and returning the decoded response object
        params: Dataclass of request parameters with a ``pagination_next_token`` field
        items_key: Response key holding the page's items
        cursor_key: Response key holding the next-page cursor

    Returns:
        PageIterator over the items of all pages
    """
    page_params = dataclasses.replace(params)

    async def fetch() -> tuple[list[dict[str, Any]], str | None]:
        nonlocal page_params
        data = await fetch_page(page_params)
        items = data.get(items_key) or []
        next_cursor = data.get(cursor_key)
        page_params = dataclasses.replace(page_params, pagination_next_token=next_cursor)
        return items, next_cursor

    return PageIterator(fetch)
