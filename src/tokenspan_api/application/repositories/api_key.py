from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from tokenspan_api.application.dto.filters import ApiKeyFilterDTO
from tokenspan_api.domain.entities.api_key import ApiKey
from tokenspan_api.pagination import FetchWindow


class ApiKeyReader(Protocol):
    async def get_by_id(self, api_key_id: UUID) -> ApiKey | None: ...

    async def fetch_window(self, filters: ApiKeyFilterDTO, window: FetchWindow) -> list[ApiKey]: ...

    async def count(self, filters: ApiKeyFilterDTO) -> int: ...


class ApiKeyWriter(Protocol):
    async def create(self, api_key: ApiKey) -> ApiKey: ...

    async def update(self, api_key_id: UUID, values: dict[str, Any]) -> ApiKey | None: ...

    async def delete(self, api_key_id: UUID) -> ApiKey | None: ...
