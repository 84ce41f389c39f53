from __future__ import annotations

import logging
from typing import Generic, TypeVar
from uuid import UUID

import redis.asyncio as aioredis
from pydantic import TypeAdapter

logger = logging.getLogger(__name__)

V = TypeVar("V")


class RedisCache(Generic[V]):
    """Read-through entity cache stored as JSON strings in Redis."""

    def __init__(
        self,
        redis: aioredis.Redis,
        namespace: str,
        value_type: type[V],
        ttl_seconds: int = 300,
    ) -> None:
        self._redis = redis
        self._namespace = namespace
        self._adapter: TypeAdapter[V] = TypeAdapter(value_type)
        self._ttl = ttl_seconds

    def _key(self, key: UUID) -> str:
        return f"tokenspan:{self._namespace}:{key}"

    async def get(self, key: UUID) -> V | None:
        raw = await self._redis.get(self._key(key))
        if raw is None:
            return None
        return self._adapter.validate_json(raw)

    async def set(self, key: UUID, value: V) -> None:
        await self._redis.set(self._key(key), self._adapter.dump_json(value), ex=self._ttl)

    async def delete(self, key: UUID) -> None:
        await self._redis.delete(self._key(key))
        logger.debug("Invalidated %s", self._key(key))
