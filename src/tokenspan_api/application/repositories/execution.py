from __future__ import annotations

from typing import Protocol
from uuid import UUID

from tokenspan_api.application.dto.filters import ExecutionFilterDTO
from tokenspan_api.domain.entities.execution import Execution
from tokenspan_api.pagination import FetchWindow


class ExecutionReader(Protocol):
    async def get_by_id(self, execution_id: UUID) -> Execution | None: ...

    async def fetch_window(
        self, filters: ExecutionFilterDTO, window: FetchWindow
    ) -> list[Execution]: ...

    async def count(self, filters: ExecutionFilterDTO) -> int: ...
