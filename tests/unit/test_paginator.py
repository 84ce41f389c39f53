from __future__ import annotations

import asyncio

import pytest

from tokenspan_api.pagination import (
    Cursor,
    FetchWindow,
    InvalidPageSize,
    PageRequest,
    StaleCursorError,
    StaleCursorPolicy,
    paginate,
)
from tests.conftest import make_provider, window_rows


@pytest.fixture
def rows():
    # canonical order is newest first: minute 4, 3, 2, 1, 0
    return [make_provider(minute=m) for m in range(5)]


def _source(rows, calls: list[str] | None = None):
    async def fetch(window: FetchWindow):
        if calls is not None:
            calls.append("fetch:start")
            await asyncio.sleep(0)
            calls.append("fetch:end")
        return window_rows(rows, window)

    async def count() -> int:
        if calls is not None:
            calls.append("count")
        return len(rows)

    return fetch, count


def _minutes(connection) -> list[int]:
    return [p.created_at.minute for p in connection.items]


@pytest.mark.asyncio
async def test_forward_walk_visits_every_row_once(rows):
    fetch, count = _source(rows)
    seen: list[int] = []
    after: Cursor | None = None
    pages = 0

    while True:
        connection = await paginate(PageRequest(first=2, after=after), fetch, count)
        seen.extend(_minutes(connection))
        pages += 1
        assert connection.total_count == 5
        assert connection.has_previous is (after is not None)
        if not connection.has_next:
            break
        after = connection.end_cursor

    assert seen == [4, 3, 2, 1, 0]
    assert pages == 3


@pytest.mark.asyncio
async def test_backward_walk_visits_every_row_once(rows):
    fetch, count = _source(rows)

    last_page = await paginate(PageRequest(last=2), fetch, count)
    assert _minutes(last_page) == [1, 0]
    assert (last_page.has_previous, last_page.has_next) == (True, False)

    middle = await paginate(PageRequest(last=2, before=last_page.start_cursor), fetch, count)
    assert _minutes(middle) == [3, 2]
    assert (middle.has_previous, middle.has_next) == (True, True)

    first_page = await paginate(PageRequest(last=2, before=middle.start_cursor), fetch, count)
    assert _minutes(first_page) == [4]
    assert (first_page.has_previous, first_page.has_next) == (False, True)


@pytest.mark.asyncio
async def test_edges_carry_item_cursors(rows):
    fetch, count = _source(rows)
    connection = await paginate(PageRequest(first=3), fetch, count)

    assert [e.cursor for e in connection.edges] == [p.cursor() for p in connection.items]
    assert connection.start_cursor == connection.items[0].cursor()
    assert connection.end_cursor == connection.items[-1].cursor()


@pytest.mark.asyncio
async def test_empty_source():
    fetch, count = _source([])
    connection = await paginate(PageRequest(first=3), fetch, count)

    assert connection.items == []
    assert connection.start_cursor is None
    assert connection.end_cursor is None
    assert (connection.has_previous, connection.has_next) == (False, False)
    assert connection.total_count == 0


@pytest.mark.asyncio
async def test_stale_cursor_degrades_to_empty_page(rows):
    fetch, count = _source(rows)
    gone = make_provider(minute=30).cursor()

    connection = await paginate(PageRequest(first=2, after=gone), fetch, count)

    assert connection.items == []
    assert (connection.has_previous, connection.has_next) == (False, False)
    assert connection.total_count == 5


@pytest.mark.asyncio
async def test_stale_cursor_raises_under_strict_policy(rows):
    fetch, count = _source(rows)
    gone = make_provider(minute=30).cursor()

    with pytest.raises(StaleCursorError) as exc_info:
        await paginate(
            PageRequest(last=2, before=gone),
            fetch,
            count,
            stale_cursor=StaleCursorPolicy.STRICT,
        )
    assert exc_info.value.code == "stale_cursor"


@pytest.mark.asyncio
async def test_invalid_request_never_reaches_the_source(rows):
    calls: list[str] = []
    fetch, count = _source(rows, calls)

    with pytest.raises(InvalidPageSize):
        await paginate(PageRequest(first=0), fetch, count)
    assert calls == []


@pytest.mark.asyncio
async def test_max_take_is_enforced(rows):
    fetch, count = _source(rows)
    with pytest.raises(InvalidPageSize):
        await paginate(PageRequest(last=11), fetch, count, max_take=10)


@pytest.mark.asyncio
async def test_sequential_reads_do_not_overlap(rows):
    calls: list[str] = []
    fetch, count = _source(rows, calls)

    await paginate(PageRequest(first=2), fetch, count, concurrent=False)

    assert calls == ["fetch:start", "fetch:end", "count"]


@pytest.mark.asyncio
async def test_concurrent_reads_overlap(rows):
    calls: list[str] = []
    fetch, count = _source(rows, calls)

    connection = await paginate(PageRequest(first=2), fetch, count, concurrent=True)

    assert calls == ["fetch:start", "count", "fetch:end"]
    assert _minutes(connection) == [4, 3]


@pytest.fixture
def tied_rows():
    # one row at minute 1, then three rows created in the same instant
    return [make_provider(minute=1, slug="a")] + [make_provider(minute=0, slug=s) for s in "bcd"]


def _canonical(rows) -> list[str]:
    return [p.slug for p in sorted(rows, key=lambda p: (p.created_at, p.id), reverse=True)]


@pytest.mark.asyncio
async def test_forward_walk_through_tied_timestamps(tied_rows):
    fetch, count = _source(tied_rows)
    seen: list[str] = []
    after: Cursor | None = None

    for _ in range(len(tied_rows) + 1):
        connection = await paginate(PageRequest(first=1, after=after), fetch, count)
        seen.extend(p.slug for p in connection.items)
        if not connection.has_next:
            break
        after = connection.end_cursor

    assert connection.has_next is False
    assert seen == _canonical(tied_rows)


@pytest.mark.asyncio
async def test_backward_walk_through_tied_timestamps(tied_rows):
    fetch, count = _source(tied_rows)
    seen: list[str] = []
    before: Cursor | None = None

    for _ in range(len(tied_rows) + 1):
        connection = await paginate(PageRequest(last=1, before=before), fetch, count)
        seen[:0] = [p.slug for p in connection.items]
        if not connection.has_previous:
            break
        before = connection.start_cursor

    assert connection.has_previous is False
    assert seen == _canonical(tied_rows)


@pytest.mark.asyncio
async def test_deleted_anchor_with_tied_neighbours_is_stale(tied_rows):
    ordered = sorted(tied_rows, key=lambda p: (p.created_at, p.id), reverse=True)
    anchor = ordered[2]
    fetch, count = _source([p for p in tied_rows if p is not anchor])

    connection = await paginate(PageRequest(first=1, after=anchor.cursor()), fetch, count)

    assert connection.items == []
    assert (connection.has_previous, connection.has_next) == (False, False)
