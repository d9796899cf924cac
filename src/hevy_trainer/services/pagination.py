"""Merge every page of a paginated Hevy resource into one list."""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Generic, List, Optional, TypeVar

from ..models.hevy import Page
from ..utils.validation import MAX_PAGE_SIZE

T = TypeVar("T")

PageFetch = Callable[[int, int], Awaitable[Page[T]]]


class PagedFetcher(Generic[T]):
    """
    Fetch all pages of one resource.

    Page 1 is fetched first to learn ``page_count``; pages 2..N are then
    requested concurrently and stitched back together in page order, so the
    result does not depend on which request finishes first. Items are not
    de-duplicated.

    Any failing page fails the whole call: a partial history would silently
    corrupt frequency and record computations downstream.
    """

    def __init__(
        self,
        resource: str,
        page_fetch: PageFetch,
        page_size: int = MAX_PAGE_SIZE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if page_size < 1 or page_size > MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")
        self.resource = resource
        self._page_fetch = page_fetch
        self._page_size = page_size
        self._logger = logger or logging.getLogger(__name__)

    async def fetch_all(self) -> List[T]:
        """Return the concatenated items of every page."""
        started = time.perf_counter()

        first_page = await self._page_fetch(1, self._page_size)
        total_pages = first_page.page_count

        if total_pages <= 1:
            items = list(first_page.items)
        else:
            remaining = await asyncio.gather(
                *(
                    self._page_fetch(page, self._page_size)
                    for page in range(2, total_pages + 1)
                )
            )
            items = list(first_page.items)
            for page in remaining:
                items.extend(page.items)

        elapsed_ms = (time.perf_counter() - started) * 1000
        self._logger.info(
            f"Fetched {len(items)} {self.resource} from {max(total_pages, 1)} page(s) "
            f"in {elapsed_ms:.0f}ms"
        )
        return items


async def fetch_all_pages(resource: str, page_fetch: PageFetch) -> List[T]:
    """Shorthand for ``PagedFetcher(resource, page_fetch).fetch_all()``."""
    return await PagedFetcher(resource, page_fetch).fetch_all()
