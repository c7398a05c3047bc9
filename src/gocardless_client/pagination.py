from __future__ import annotations

import asyncio
import copy
import inspect
import threading
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class Page(Generic[T]):
    """One batch of items from a list endpoint.

    `after` is the opaque cursor for the next page, or None when the server
    has nothing more to return.
    """

    items: Sequence[T] = field(default_factory=list)
    after: str | None = None


PageFetcher = Callable[[R], "Page[T] | Awaitable[Page[T]]"]


def _fresh_request(request: R) -> R:
    # pydantic models copy via model_copy; anything else is shallow-copied.
    model_copy = getattr(request, "model_copy", None)
    if callable(model_copy):
        return model_copy()
    return copy.copy(request)


class _PageLoop:
    """One event loop on one worker thread, shared by every page of an iteration.

    Async transports keep pooled connections bound to the loop they were
    opened on, so every page must be awaited on the same loop. The caller may
    itself be inside a running event loop, so that loop is never used.
    """

    def __init__(self) -> None:
        self.loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self.loop.run_forever, name="gocardless-page", daemon=True
        )
        self._thread.start()

    def run(self, awaitable: Awaitable[Page[T]]) -> Page[T]:
        async def _await() -> Page[T]:
            return await awaitable

        return asyncio.run_coroutine_threadsafe(_await(), self.loop).result()

    def close(self) -> None:
        try:
            asyncio.run_coroutine_threadsafe(self.loop.shutdown_asyncgens(), self.loop).result()
        finally:
            self.loop.call_soon_threadsafe(self.loop.stop)
            self._thread.join()
            self.loop.close()


def iterate_all(request: R, fetch_page: Callable[[R], Any]) -> Iterator[T]:
    """Generic cursor-based pagination, blocking form.

    `fetch_page(request)` must return a `Page` (or an awaitable of one). The
    request's `after` attribute is overwritten before every fetch; the caller's
    own object is never touched. Awaitable pages are all driven on a single
    worker loop, which is shut down when the generator finishes or is closed.
    """

    request = _fresh_request(request)
    page_loop: _PageLoop | None = None
    cursor: str | None = None
    try:
        while True:
            request.after = cursor
            page = fetch_page(request)
            if inspect.isawaitable(page):
                if page_loop is None:
                    page_loop = _PageLoop()
                page = page_loop.run(page)
            for item in page.items:
                yield item
            cursor = page.after
            if cursor is None:
                return
    finally:
        if page_loop is not None:
            page_loop.close()


async def iterate_all_paged(
    request: R, fetch_page: Callable[[R], Awaitable[Page[T]]]
) -> AsyncIterator[list[T]]:
    """Generic cursor-based pagination, one page per element.

    Pages must be consumed in order; the cursor for the next fetch is only
    known once the previous one has completed.
    """

    request = _fresh_request(request)
    cursor: str | None = None
    while True:
        request.after = cursor
        page = await fetch_page(request)
        yield list(page.items)
        cursor = page.after
        if cursor is None:
            return


async def aiterate_all(
    request: R, fetch_page: Callable[[R], Awaitable[Page[T]]]
) -> AsyncIterator[T]:
    async for items in iterate_all_paged(request, fetch_page):
        for item in items:
            yield item
