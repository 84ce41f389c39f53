"""Translate a page request into an over-fetch instruction for a data source.

The data source must return rows in canonical order (descending sort key)
and seek inclusively, so the anchor row itself comes back:

    after=X   ->  (key, row id) <= X, descending, anchor first
    before=X  ->  (key, row id) >= X, fetched ascending and reversed, anchor last

One extra row past the page (the lookahead) proves another page exists.
"""
from __future__ import annotations

from dataclasses import dataclass

from tokenspan_api.pagination.cursor import Cursor
from tokenspan_api.pagination.errors import InvalidCursorPair, InvalidPageSize
from tokenspan_api.pagination.request import Direction, PageRequest


@dataclass(frozen=True, slots=True)
class FetchWindow:
    limit: int
    direction: Direction
    seek: Cursor | None = None


def validate(request: PageRequest, *, max_take: int | None = None) -> None:
    if request.after is not None and request.before is not None:
        raise InvalidCursorPair("Cannot combine 'after' and 'before'")
    if request.is_forward_bounded and request.is_backward_bounded:
        raise InvalidCursorPair(
            "Cannot mix forward ('first'/'after') and backward ('last'/'before') arguments"
        )

    for name, size in (("first", request.first), ("last", request.last)):
        if size is None:
            continue
        if size <= 0:
            raise InvalidPageSize(f"'{name}' must be a positive integer, got {size}")
        if max_take is not None and size > max_take:
            raise InvalidPageSize(f"'{name}' must not exceed {max_take}, got {size}")

    if request.default_take < 0:
        raise InvalidPageSize(f"Default page size must not be negative, got {request.default_take}")


def plan(request: PageRequest, *, max_take: int | None = None) -> FetchWindow:
    validate(request, max_take=max_take)

    take = request.take
    anchor = request.anchor
    if anchor is None:
        return FetchWindow(limit=take + 1, direction=request.direction)
    return FetchWindow(limit=take + 2, direction=request.direction, seek=anchor)
