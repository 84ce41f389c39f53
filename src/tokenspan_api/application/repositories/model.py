from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from tokenspan_api.application.dto.filters import ModelFilterDTO
from tokenspan_api.domain.entities.model import Model
from tokenspan_api.pagination import FetchWindow


class ModelReader(Protocol):
    async def get_by_id(self, model_id: UUID) -> Model | None: ...

    async def get_by_slug(self, slug: str) -> Model | None: ...

    async def fetch_window(self, filters: ModelFilterDTO, window: FetchWindow) -> list[Model]: ...

    async def count(self, filters: ModelFilterDTO) -> int: ...


class ModelWriter(Protocol):
    async def create(self, model: Model) -> Model: ...

    async def update(self, model_id: UUID, values: dict[str, Any]) -> Model | None: ...

    async def delete(self, model_id: UUID) -> Model | None: ...
