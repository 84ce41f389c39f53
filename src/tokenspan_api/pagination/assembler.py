"""Turn an over-fetched, canonically ordered row list into one page.

Rows arrive in canonical (descending key) order. Depending on the request
they may carry two sentinel rows that are never returned to the caller:

    after=A:   [A](anchor) -> B -> C -> D -> [E](lookahead)
    before=E:  [A](lookahead) <- B <- C <- D <- [E](anchor)
    first:     A -> B -> C -> D -> [E](lookahead)
    last:      [A](lookahead) <- B <- C <- D <- E
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from tokenspan_api.pagination.cursor import Cursored
from tokenspan_api.pagination.request import Direction, PageRequest

T = TypeVar("T", bound=Cursored)


@dataclass(frozen=True, slots=True)
class AssembledPage(Generic[T]):
    items: list[T]
    has_previous: bool
    has_next: bool
    stale: bool = False


def _stale() -> AssembledPage[Any]:
    return AssembledPage(items=[], has_previous=False, has_next=False, stale=True)


def _after_flags(n: int, take: int) -> tuple[bool, bool]:
    if n == 0:
        return False, False
    if n - 1 <= take:
        return True, False
    if n > 2:
        return True, True
    return True, False


def _before_flags(n: int, take: int) -> tuple[bool, bool]:
    has_next, has_previous = _after_flags(n, take)
    return has_previous, has_next


def assemble(rows: Sequence[T], request: PageRequest) -> AssembledPage[T]:
    """Compute page flags and strip the anchor and lookahead rows.

    Never raises: a request that made it past the planner always yields a
    page. A missing anchor row marks the page as stale and empties it.
    """
    n = len(rows)
    take = request.take

    if request.after is not None:
        if n == 0 or rows[0].cursor() != request.after:
            return _stale()
        has_previous, has_next = _after_flags(n, take)
        if take == 0:
            return AssembledPage(items=[], has_previous=has_previous, has_next=has_next)
        # drop the anchor, then the lookahead if it materialized
        end = n - 1 if n > take + 1 else n
        return AssembledPage(items=list(rows[1:end]), has_previous=has_previous, has_next=has_next)

    if request.before is not None:
        if n == 0 or rows[-1].cursor() != request.before:
            return _stale()
        has_previous, has_next = _before_flags(n, take)
        if take == 0:
            return AssembledPage(items=[], has_previous=has_previous, has_next=has_next)
        start = 1 if n > take + 1 else 0
        return AssembledPage(items=list(rows[start:n - 1]), has_previous=has_previous, has_next=has_next)

    overflow = n > take
    if request.direction is Direction.BACKWARD:
        items = list(rows[n - take:]) if take and overflow else list(rows[:take])
        return AssembledPage(items=items, has_previous=overflow, has_next=False)
    return AssembledPage(items=list(rows[:take]), has_previous=False, has_next=overflow)
