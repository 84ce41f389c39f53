from __future__ import annotations

from typing import Protocol, TypeVar
from uuid import UUID

V = TypeVar("V")


class Cache(Protocol[V]):
    """Read-through cache keyed by entity id.

    Services fill it after a repository read and drop the key on every
    update or delete of the entity.
    """

    async def get(self, key: UUID) -> V | None: ...

    async def set(self, key: UUID, value: V) -> None: ...

    async def delete(self, key: UUID) -> None: ...
