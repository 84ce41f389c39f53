from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from tokenspan_api.domain.entities.provider import Provider
from tokenspan_api.pagination import FetchWindow


class ProviderReader(Protocol):
    async def get_by_id(self, provider_id: UUID) -> Provider | None: ...

    async def get_by_slug(self, slug: str) -> Provider | None: ...

    async def fetch_window(self, window: FetchWindow) -> list[Provider]:
        """Return rows for a planned window in canonical (newest first) order."""
        ...

    async def count(self) -> int: ...


class ProviderWriter(Protocol):
    async def create(self, provider: Provider) -> Provider: ...

    async def update(self, provider_id: UUID, values: dict[str, Any]) -> Provider | None: ...

    async def delete(self, provider_id: UUID) -> Provider | None: ...
