"""Execute planned pagination windows against SQLAlchemy selects.

Canonical order is ``created_at DESC, id DESC``. Seeks are inclusive so the
anchor row is returned; backward windows are read ascending from the anchor
and reversed before they leave this module.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, Select, func, select, tuple_
from sqlalchemy.ext.asyncio import AsyncSession

from tokenspan_api.pagination import Cursor, Direction, FetchWindow

E = TypeVar("E")


def _seek(model: Any, cursor: Cursor, direction: Direction) -> ColumnElement[bool]:
    ts = cursor.to_datetime()
    if cursor.row_id is None:
        column, bound = model.created_at, ts
    else:
        # row-value comparison keeps rows sharing a timestamp in id order
        column, bound = tuple_(model.created_at, model.id), (ts, cursor.row_id)
    if direction is Direction.FORWARD:
        return column <= bound
    return column >= bound


def apply_window(stmt: Select[Any], model: Any, window: FetchWindow) -> Select[Any]:
    if window.direction is Direction.FORWARD:
        stmt = stmt.order_by(model.created_at.desc(), model.id.desc())
    else:
        stmt = stmt.order_by(model.created_at.asc(), model.id.asc())
    if window.seek is not None:
        stmt = stmt.where(_seek(model, window.seek, window.direction))
    return stmt.limit(window.limit)


async def fetch_window(
    session: AsyncSession,
    stmt: Select[Any],
    model: Any,
    window: FetchWindow,
    to_entity: Callable[[Any], E],
) -> list[E]:
    result = await session.execute(apply_window(stmt, model, window))
    rows = [to_entity(m) for m in result.scalars().all()]
    if window.direction is Direction.BACKWARD:
        rows.reverse()
    return rows


async def count_rows(session: AsyncSession, stmt: Select[Any]) -> int:
    result = await session.execute(select(func.count()).select_from(stmt.subquery()))
    return int(result.scalar_one())
