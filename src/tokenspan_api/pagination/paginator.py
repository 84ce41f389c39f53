from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from enum import StrEnum
from typing import TypeVar

from tokenspan_api.pagination.assembler import assemble
from tokenspan_api.pagination.connection import Connection
from tokenspan_api.pagination.cursor import Cursored
from tokenspan_api.pagination.errors import StaleCursorError
from tokenspan_api.pagination.planner import FetchWindow, plan
from tokenspan_api.pagination.request import PageRequest

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Cursored)

FetchRows = Callable[[FetchWindow], Awaitable[Sequence[T]]]
CountRows = Callable[[], Awaitable[int]]


class StaleCursorPolicy(StrEnum):
    DEGRADE = "degrade"
    STRICT = "strict"


async def paginate(
    request: PageRequest,
    fetch: FetchRows[T],
    count: CountRows,
    *,
    max_take: int | None = None,
    stale_cursor: StaleCursorPolicy = StaleCursorPolicy.DEGRADE,
    concurrent: bool = True,
) -> Connection[T]:
    """Run one paginated list query end to end.

    ``fetch`` receives the planned window and must return rows in canonical
    order; ``count`` returns the total for the same filter. The two reads are
    independent and run concurrently unless the caller's data source cannot
    serve overlapping statements.
    """
    window = plan(request, max_take=max_take)

    if concurrent:
        rows, total = await asyncio.gather(fetch(window), count())
    else:
        rows = await fetch(window)
        total = await count()

    page = assemble(rows, request)
    if page.stale:
        if stale_cursor is StaleCursorPolicy.STRICT:
            raise StaleCursorError(f"Cursor {request.anchor} no longer points at an existing row")
        logger.info("Stale cursor %s, returning empty page", request.anchor)

    return Connection.from_page(page, total)
