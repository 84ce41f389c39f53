from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tokenspan_api.domain.entities.user import User
from tokenspan_api.infrastructure.db.mappers import user as mapper
from tokenspan_api.infrastructure.db.models.user import UserModel
from tokenspan_api.infrastructure.db.repositories._window import count_rows, fetch_window
from tokenspan_api.pagination import FetchWindow


class UserReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return mapper.model_to_entity(result) if result else None

    async def fetch_window(self, window: FetchWindow) -> list[User]:
        return await fetch_window(
            self._session, select(UserModel), UserModel, window, mapper.model_to_entity,
        )

    async def count(self) -> int:
        return await count_rows(self._session, select(UserModel.id))
