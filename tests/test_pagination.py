"""Tests for the cursor paginator.

Tests cover:
- Termination on a missing cursor and cursor threading between fetches
- Item order and laziness of the blocking iterator
- Independent iterations and error short-circuit
- The async page-per-element and flattened forms
- Awaitable fetchers driven from the blocking form
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
_SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

import asyncio
from dataclasses import dataclass

import pytest

from gocardless_client.pagination import Page, aiterate_all, iterate_all, iterate_all_paged


@dataclass
class FakeListRequest:
    after: str | None = None
    limit: int | None = None


class ScriptedPages:
    """Serves pages keyed by the cursor they are requested with."""

    def __init__(self, pages: dict[str | None, Page[int]]) -> None:
        self.pages = pages
        self.calls: list[str | None] = []

    def __call__(self, request: FakeListRequest) -> Page[int]:
        self.calls.append(request.after)
        return self.pages[request.after]


class AsyncScriptedPages(ScriptedPages):
    async def __call__(self, request: FakeListRequest) -> Page[int]:  # type: ignore[override]
        await asyncio.sleep(0)
        return super().__call__(request)


def _three_pages() -> dict[str | None, Page[int]]:
    return {
        None: Page(items=[1, 2], after="c1"),
        "c1": Page(items=[3, 4], after="c2"),
        "c2": Page(items=[5], after=None),
    }


class TestIterateAll:
    """Blocking form of the paginator."""

    def test_yields_every_item_in_order(self) -> None:
        fetch = ScriptedPages(_three_pages())
        assert list(iterate_all(FakeListRequest(), fetch)) == [1, 2, 3, 4, 5]

    def test_threads_cursor_and_stops_when_after_is_none(self) -> None:
        fetch = ScriptedPages(_three_pages())
        list(iterate_all(FakeListRequest(), fetch))
        assert fetch.calls == [None, "c1", "c2"]

    def test_empty_first_page_yields_nothing(self) -> None:
        fetch = ScriptedPages({None: Page(items=[], after=None)})
        assert list(iterate_all(FakeListRequest(), fetch)) == []
        assert fetch.calls == [None]

    def test_empty_page_with_cursor_keeps_going(self) -> None:
        fetch = ScriptedPages(
            {
                None: Page(items=[], after="c1"),
                "c1": Page(items=[7], after=None),
            }
        )
        assert list(iterate_all(FakeListRequest(), fetch)) == [7]

    def test_empty_string_cursor_is_still_a_cursor(self) -> None:
        fetch = ScriptedPages(
            {
                None: Page(items=[1], after=""),
                "": Page(items=[2], after=None),
            }
        )
        assert list(iterate_all(FakeListRequest(), fetch)) == [1, 2]

    def test_is_lazy(self) -> None:
        fetch = ScriptedPages(_three_pages())
        it = iterate_all(FakeListRequest(), fetch)
        assert fetch.calls == []

        assert next(it) == 1
        assert next(it) == 2
        assert fetch.calls == [None]

        assert next(it) == 3
        assert fetch.calls == [None, "c1"]

    def test_stopping_early_fetches_no_further_pages(self) -> None:
        fetch = ScriptedPages(_three_pages())
        for item in iterate_all(FakeListRequest(), fetch):
            if item == 2:
                break
        assert fetch.calls == [None]

    def test_each_iteration_starts_from_the_first_page(self) -> None:
        fetch = ScriptedPages(_three_pages())
        request = FakeListRequest()
        assert list(iterate_all(request, fetch)) == [1, 2, 3, 4, 5]
        assert list(iterate_all(request, fetch)) == [1, 2, 3, 4, 5]
        assert fetch.calls == [None, "c1", "c2", None, "c1", "c2"]

    def test_caller_request_is_not_mutated(self) -> None:
        fetch = ScriptedPages(_three_pages())
        request = FakeListRequest(after="ignored", limit=2)
        list(iterate_all(request, fetch))
        assert request.after == "ignored"
        assert request.limit == 2

    def test_other_request_fields_are_kept(self) -> None:
        seen: list[int | None] = []

        def fetch(request: FakeListRequest) -> Page[int]:
            seen.append(request.limit)
            return Page(items=[1], after=None)

        list(iterate_all(FakeListRequest(limit=25), fetch))
        assert seen == [25]

    def test_fetch_error_propagates_after_yielded_items(self) -> None:
        calls: list[str | None] = []

        def fetch(request: FakeListRequest) -> Page[int]:
            calls.append(request.after)
            if request.after == "c1":
                raise RuntimeError("boom")
            return Page(items=[1, 2], after="c1")

        got: list[int] = []
        with pytest.raises(RuntimeError, match="boom"):
            for item in iterate_all(FakeListRequest(), fetch):
                got.append(item)
        assert got == [1, 2]
        assert calls == [None, "c1"]

    def test_accepts_awaitable_fetcher(self) -> None:
        fetch = AsyncScriptedPages(_three_pages())
        assert list(iterate_all(FakeListRequest(), fetch)) == [1, 2, 3, 4, 5]
        assert fetch.calls == [None, "c1", "c2"]

    def test_awaitable_pages_share_one_loop(self) -> None:
        loops: list[asyncio.AbstractEventLoop] = []
        pages = _three_pages()

        async def fetch(request: FakeListRequest) -> Page[int]:
            loops.append(asyncio.get_running_loop())
            return pages[request.after]

        assert list(iterate_all(FakeListRequest(), fetch)) == [1, 2, 3, 4, 5]
        assert len(loops) == 3
        assert loops[0] is loops[1] is loops[2]
        assert loops[0].is_closed()

    def test_breaking_early_shuts_the_worker_loop_down(self) -> None:
        loops: list[asyncio.AbstractEventLoop] = []
        pages = _three_pages()

        async def fetch(request: FakeListRequest) -> Page[int]:
            loops.append(asyncio.get_running_loop())
            return pages[request.after]

        it = iterate_all(FakeListRequest(), fetch)
        assert next(it) == 1
        assert not loops[0].is_closed()
        it.close()
        assert loops[0].is_closed()

    def test_interleaved_iterations_keep_their_own_cursors(self) -> None:
        first = ScriptedPages(_three_pages())
        second = ScriptedPages(
            {
                None: Page(items=[10], after="x1"),
                "x1": Page(items=[20], after="x2"),
                "x2": Page(items=[30], after=None),
            }
        )
        request = FakeListRequest()
        a = iterate_all(request, first)
        b = iterate_all(request, second)

        got_a: list[int] = []
        got_b: list[int] = []
        for _ in range(3):
            got_a.append(next(a))
            got_b.append(next(b))
        got_a.extend(a)
        got_b.extend(b)

        assert got_a == [1, 2, 3, 4, 5]
        assert got_b == [10, 20, 30]
        assert first.calls == [None, "c1", "c2"]
        assert second.calls == [None, "x1", "x2"]
        assert request.after is None

    @pytest.mark.asyncio
    async def test_awaitable_fetcher_inside_running_loop(self) -> None:
        fetch = AsyncScriptedPages(_three_pages())
        assert list(iterate_all(FakeListRequest(), fetch)) == [1, 2, 3, 4, 5]


class TestIterateAllPaged:
    """Async form yielding one list per page."""

    @pytest.mark.asyncio
    async def test_yields_one_list_per_page(self) -> None:
        fetch = AsyncScriptedPages(_three_pages())
        pages = [items async for items in iterate_all_paged(FakeListRequest(), fetch)]
        assert pages == [[1, 2], [3, 4], [5]]
        assert fetch.calls == [None, "c1", "c2"]

    @pytest.mark.asyncio
    async def test_empty_first_page_is_still_yielded(self) -> None:
        fetch = AsyncScriptedPages({None: Page(items=[], after=None)})
        pages = [items async for items in iterate_all_paged(FakeListRequest(), fetch)]
        assert pages == [[]]

    @pytest.mark.asyncio
    async def test_is_lazy(self) -> None:
        fetch = AsyncScriptedPages(_three_pages())
        pages = iterate_all_paged(FakeListRequest(), fetch)
        assert fetch.calls == []
        assert await pages.__anext__() == [1, 2]
        assert fetch.calls == [None]
        await pages.aclose()

    @pytest.mark.asyncio
    async def test_error_short_circuits(self) -> None:
        async def fetch(request: FakeListRequest) -> Page[int]:
            if request.after is None:
                return Page(items=[1], after="c1")
            raise RuntimeError("boom")

        got: list[list[int]] = []
        with pytest.raises(RuntimeError, match="boom"):
            async for items in iterate_all_paged(FakeListRequest(), fetch):
                got.append(items)
        assert got == [[1]]

    @pytest.mark.asyncio
    async def test_caller_request_is_not_mutated(self) -> None:
        fetch = AsyncScriptedPages(_three_pages())
        request = FakeListRequest()
        async for _ in iterate_all_paged(request, fetch):
            pass
        assert request.after is None


class TestAiterateAll:
    @pytest.mark.asyncio
    async def test_flattens_pages(self) -> None:
        fetch = AsyncScriptedPages(_three_pages())
        items = [item async for item in aiterate_all(FakeListRequest(), fetch)]
        assert items == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_interleaved_iterations_keep_their_own_cursors(self) -> None:
        first = AsyncScriptedPages(_three_pages())
        second = AsyncScriptedPages(
            {
                None: Page(items=[10, 20], after="x1"),
                "x1": Page(items=[30], after=None),
            }
        )
        request = FakeListRequest()
        a = aiterate_all(request, first)
        b = aiterate_all(request, second)

        got_a = [await a.__anext__(), await a.__anext__(), await a.__anext__()]
        got_b = [await b.__anext__()]
        got_a.append(await a.__anext__())
        got_b.extend([item async for item in b])
        got_a.extend([item async for item in a])

        assert got_a == [1, 2, 3, 4, 5]
        assert got_b == [10, 20, 30]
        assert first.calls == [None, "c1", "c2"]
        assert second.calls == [None, "x1"]
