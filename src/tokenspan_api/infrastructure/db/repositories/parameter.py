from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import Select, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tokenspan_api.application.dto.filters import ParameterFilterDTO
from tokenspan_api.domain.entities.parameter import Parameter
from tokenspan_api.infrastructure.db.mappers import parameter as mapper
from tokenspan_api.infrastructure.db.models.parameter import ParameterModel
from tokenspan_api.infrastructure.db.repositories._window import count_rows, fetch_window
from tokenspan_api.pagination import FetchWindow


def _filtered(stmt: Select[Any], filters: ParameterFilterDTO) -> Select[Any]:
    if filters.thread_id is not None:
        stmt = stmt.where(ParameterModel.thread_id == filters.thread_id)
    return stmt


class ParameterReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, parameter_id: UUID) -> Parameter | None:
        result = await self._session.get(ParameterModel, parameter_id)
        return mapper.model_to_entity(result) if result else None

    async def fetch_window(
        self, filters: ParameterFilterDTO, window: FetchWindow
    ) -> list[Parameter]:
        stmt = _filtered(select(ParameterModel), filters)
        return await fetch_window(
            self._session, stmt, ParameterModel, window, mapper.model_to_entity,
        )

    async def count(self, filters: ParameterFilterDTO) -> int:
        return await count_rows(self._session, _filtered(select(ParameterModel.id), filters))


class ParameterWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, parameter: Parameter) -> Parameter:
        model = mapper.entity_to_model(parameter)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)

    async def update(self, parameter_id: UUID, values: dict[str, Any]) -> Parameter | None:
        stmt = (
            update(ParameterModel)
            .where(ParameterModel.id == parameter_id)
            .values(**values)
            .returning(ParameterModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def delete(self, parameter_id: UUID) -> Parameter | None:
        stmt = (
            delete(ParameterModel)
            .where(ParameterModel.id == parameter_id)
            .returning(ParameterModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def clear_default(self, thread_id: UUID) -> None:
        stmt = (
            update(ParameterModel)
            .where(ParameterModel.thread_id == thread_id, ParameterModel.is_default.is_(True))
            .values(is_default=False)
        )
        await self._session.execute(stmt)
