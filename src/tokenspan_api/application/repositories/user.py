from __future__ import annotations

from typing import Protocol
from uuid import UUID

from tokenspan_api.domain.entities.user import User
from tokenspan_api.pagination import FetchWindow


class UserReader(Protocol):
    async def get_by_id(self, user_id: UUID) -> User | None: ...

    async def fetch_window(self, window: FetchWindow) -> list[User]: ...

    async def count(self) -> int: ...
