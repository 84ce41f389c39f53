from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import Select, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tokenspan_api.application.dto.filters import ApiKeyFilterDTO
from tokenspan_api.domain.entities.api_key import ApiKey
from tokenspan_api.infrastructure.db.mappers import api_key as mapper
from tokenspan_api.infrastructure.db.models.api_key import ApiKeyModel
from tokenspan_api.infrastructure.db.repositories._window import count_rows, fetch_window
from tokenspan_api.pagination import FetchWindow


def _filtered(stmt: Select[Any], filters: ApiKeyFilterDTO) -> Select[Any]:
    if filters.provider_id is not None:
        stmt = stmt.where(ApiKeyModel.provider_id == filters.provider_id)
    if filters.owner_id is not None:
        stmt = stmt.where(ApiKeyModel.owner_id == filters.owner_id)
    return stmt


class ApiKeyReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, api_key_id: UUID) -> ApiKey | None:
        result = await self._session.get(ApiKeyModel, api_key_id)
        return mapper.model_to_entity(result) if result else None

    async def fetch_window(self, filters: ApiKeyFilterDTO, window: FetchWindow) -> list[ApiKey]:
        stmt = _filtered(select(ApiKeyModel), filters)
        return await fetch_window(self._session, stmt, ApiKeyModel, window, mapper.model_to_entity)

    async def count(self, filters: ApiKeyFilterDTO) -> int:
        return await count_rows(self._session, _filtered(select(ApiKeyModel.id), filters))


class ApiKeyWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, api_key: ApiKey) -> ApiKey:
        model = mapper.entity_to_model(api_key)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)

    async def update(self, api_key_id: UUID, values: dict[str, Any]) -> ApiKey | None:
        stmt = (
            update(ApiKeyModel)
            .where(ApiKeyModel.id == api_key_id)
            .values(**values)
            .returning(ApiKeyModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def delete(self, api_key_id: UUID) -> ApiKey | None:
        stmt = delete(ApiKeyModel).where(ApiKeyModel.id == api_key_id).returning(ApiKeyModel)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None
