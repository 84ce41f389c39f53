from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from tokenspan_api.application.dto.filters import ThreadFilterDTO
from tokenspan_api.domain.entities.thread import Thread
from tokenspan_api.pagination import FetchWindow


class ThreadReader(Protocol):
    async def get_by_id(self, thread_id: UUID) -> Thread | None: ...

    async def fetch_window(self, filters: ThreadFilterDTO, window: FetchWindow) -> list[Thread]: ...

    async def count(self, filters: ThreadFilterDTO) -> int: ...


class ThreadWriter(Protocol):
    async def create(self, thread: Thread) -> Thread: ...

    async def update(self, thread_id: UUID, values: dict[str, Any]) -> Thread | None: ...

    async def delete(self, thread_id: UUID) -> Thread | None: ...
