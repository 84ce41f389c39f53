from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import Select, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tokenspan_api.application.dto.filters import ThreadFilterDTO
from tokenspan_api.domain.entities.thread import Thread
from tokenspan_api.infrastructure.db.mappers import thread as mapper
from tokenspan_api.infrastructure.db.models.thread import ThreadModel
from tokenspan_api.infrastructure.db.repositories._window import count_rows, fetch_window
from tokenspan_api.pagination import FetchWindow


def _filtered(stmt: Select[Any], filters: ThreadFilterDTO) -> Select[Any]:
    if filters.owner_id is not None:
        stmt = stmt.where(ThreadModel.owner_id == filters.owner_id)
    if filters.name:
        stmt = stmt.where(ThreadModel.name.icontains(filters.name, autoescape=True))
    return stmt


class ThreadReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, thread_id: UUID) -> Thread | None:
        result = await self._session.get(ThreadModel, thread_id)
        return mapper.model_to_entity(result) if result else None

    async def fetch_window(self, filters: ThreadFilterDTO, window: FetchWindow) -> list[Thread]:
        stmt = _filtered(select(ThreadModel), filters)
        return await fetch_window(self._session, stmt, ThreadModel, window, mapper.model_to_entity)

    async def count(self, filters: ThreadFilterDTO) -> int:
        return await count_rows(self._session, _filtered(select(ThreadModel.id), filters))


class ThreadWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, thread: Thread) -> Thread:
        model = mapper.entity_to_model(thread)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)

    async def update(self, thread_id: UUID, values: dict[str, Any]) -> Thread | None:
        stmt = (
            update(ThreadModel)
            .where(ThreadModel.id == thread_id)
            .values(**values)
            .returning(ThreadModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def delete(self, thread_id: UUID) -> Thread | None:
        stmt = delete(ThreadModel).where(ThreadModel.id == thread_id).returning(ThreadModel)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None
