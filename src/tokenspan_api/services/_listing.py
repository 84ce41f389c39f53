from __future__ import annotations

from typing import TypeVar

from tokenspan_api.application.uow import UnitOfWork
from tokenspan_api.config import settings
from tokenspan_api.pagination import (
    Connection,
    Cursored,
    PageRequest,
    StaleCursorPolicy,
    paginate,
)
from tokenspan_api.pagination.paginator import CountRows, FetchRows

T = TypeVar("T", bound=Cursored)


async def list_page(
    request: PageRequest,
    fetch: FetchRows[T],
    count: CountRows,
    uow: UnitOfWork,
) -> Connection[T]:
    """Paginate one list query with the service-wide limits and stale-cursor policy."""
    return await paginate(
        request,
        fetch,
        count,
        max_take=settings.PAGINATION_MAX_TAKE,
        stale_cursor=StaleCursorPolicy(settings.PAGINATION_STALE_CURSOR),
        concurrent=uow.concurrent_reads,
    )
