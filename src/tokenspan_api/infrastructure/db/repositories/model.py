from __future__ import annotations

from dataclasses import asdict
from typing import Any
from uuid import UUID

from sqlalchemy import Select, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tokenspan_api.application.dto.filters import ModelFilterDTO
from tokenspan_api.domain.entities.model import Model, Pricing
from tokenspan_api.infrastructure.db.mappers import model as mapper
from tokenspan_api.infrastructure.db.models.model import ModelModel
from tokenspan_api.infrastructure.db.repositories._window import count_rows, fetch_window
from tokenspan_api.pagination import FetchWindow


def _filtered(stmt: Select[Any], filters: ModelFilterDTO) -> Select[Any]:
    if filters.provider_id is not None:
        stmt = stmt.where(ModelModel.provider_id == filters.provider_id)
    return stmt


class ModelReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, model_id: UUID) -> Model | None:
        result = await self._session.get(ModelModel, model_id)
        return mapper.model_to_entity(result) if result else None

    async def get_by_slug(self, slug: str) -> Model | None:
        stmt = select(ModelModel).where(ModelModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def fetch_window(self, filters: ModelFilterDTO, window: FetchWindow) -> list[Model]:
        stmt = _filtered(select(ModelModel), filters)
        return await fetch_window(self._session, stmt, ModelModel, window, mapper.model_to_entity)

    async def count(self, filters: ModelFilterDTO) -> int:
        return await count_rows(self._session, _filtered(select(ModelModel.id), filters))


class ModelWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, model: Model) -> Model:
        row = mapper.entity_to_model(model)
        self._session.add(row)
        await self._session.flush()
        return mapper.model_to_entity(row)

    async def update(self, model_id: UUID, values: dict[str, Any]) -> Model | None:
        # Pricing is stored as JSONB
        values = {k: asdict(v) if isinstance(v, Pricing) else v for k, v in values.items()}
        stmt = (
            update(ModelModel)
            .where(ModelModel.id == model_id)
            .values(**values)
            .returning(ModelModel)
        )
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return mapper.model_to_entity(row) if row else None

    async def delete(self, model_id: UUID) -> Model | None:
        stmt = delete(ModelModel).where(ModelModel.id == model_id).returning(ModelModel)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return mapper.model_to_entity(row) if row else None
