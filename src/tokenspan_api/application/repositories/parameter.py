from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from tokenspan_api.application.dto.filters import ParameterFilterDTO
from tokenspan_api.domain.entities.parameter import Parameter
from tokenspan_api.pagination import FetchWindow


class ParameterReader(Protocol):
    async def get_by_id(self, parameter_id: UUID) -> Parameter | None: ...

    async def fetch_window(
        self, filters: ParameterFilterDTO, window: FetchWindow
    ) -> list[Parameter]: ...

    async def count(self, filters: ParameterFilterDTO) -> int: ...


class ParameterWriter(Protocol):
    async def create(self, parameter: Parameter) -> Parameter: ...

    async def update(self, parameter_id: UUID, values: dict[str, Any]) -> Parameter | None: ...

    async def delete(self, parameter_id: UUID) -> Parameter | None: ...

    async def clear_default(self, thread_id: UUID) -> None:
        """Unset ``is_default`` on every parameter of the thread."""
        ...
