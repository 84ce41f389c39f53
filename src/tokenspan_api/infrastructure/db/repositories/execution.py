from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from tokenspan_api.application.dto.filters import ExecutionFilterDTO
from tokenspan_api.domain.entities.execution import Execution
from tokenspan_api.infrastructure.db.mappers import execution as mapper
from tokenspan_api.infrastructure.db.models.execution import ExecutionModel
from tokenspan_api.infrastructure.db.repositories._window import count_rows, fetch_window
from tokenspan_api.pagination import FetchWindow


def _filtered(stmt: Select[Any], filters: ExecutionFilterDTO) -> Select[Any]:
    if filters.thread_id is not None:
        stmt = stmt.where(ExecutionModel.thread_id == filters.thread_id)
    if filters.status is not None:
        stmt = stmt.where(ExecutionModel.status == filters.status.value)
    if filters.executed_by_id is not None:
        stmt = stmt.where(ExecutionModel.executed_by_id == filters.executed_by_id)
    return stmt


class ExecutionReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, execution_id: UUID) -> Execution | None:
        result = await self._session.get(ExecutionModel, execution_id)
        return mapper.model_to_entity(result) if result else None

    async def fetch_window(
        self, filters: ExecutionFilterDTO, window: FetchWindow
    ) -> list[Execution]:
        stmt = _filtered(select(ExecutionModel), filters)
        return await fetch_window(
            self._session, stmt, ExecutionModel, window, mapper.model_to_entity,
        )

    async def count(self, filters: ExecutionFilterDTO) -> int:
        return await count_rows(self._session, _filtered(select(ExecutionModel.id), filters))
