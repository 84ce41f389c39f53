from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tokenspan_api.domain.entities.provider import Provider
from tokenspan_api.infrastructure.db.mappers import provider as mapper
from tokenspan_api.infrastructure.db.models.provider import ProviderModel
from tokenspan_api.infrastructure.db.repositories._window import count_rows, fetch_window
from tokenspan_api.pagination import FetchWindow


class ProviderReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, provider_id: UUID) -> Provider | None:
        result = await self._session.get(ProviderModel, provider_id)
        return mapper.model_to_entity(result) if result else None

    async def get_by_slug(self, slug: str) -> Provider | None:
        stmt = select(ProviderModel).where(ProviderModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def fetch_window(self, window: FetchWindow) -> list[Provider]:
        return await fetch_window(
            self._session, select(ProviderModel), ProviderModel, window, mapper.model_to_entity,
        )

    async def count(self) -> int:
        return await count_rows(self._session, select(ProviderModel.id))


class ProviderWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, provider: Provider) -> Provider:
        model = mapper.entity_to_model(provider)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)

    async def update(self, provider_id: UUID, values: dict[str, Any]) -> Provider | None:
        stmt = (
            update(ProviderModel)
            .where(ProviderModel.id == provider_id)
            .values(**values)
            .returning(ProviderModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None

    async def delete(self, provider_id: UUID) -> Provider | None:
        stmt = delete(ProviderModel).where(ProviderModel.id == provider_id).returning(ProviderModel)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None
