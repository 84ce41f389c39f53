from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone

from tokenspan_api.application.dto.api_key import ApiKeyCreateDTO, ApiKeyUpdateDTO
from tokenspan_api.application.dto.changes import changed_fields
from tokenspan_api.application.dto.filters import ApiKeyFilterDTO
from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.application.exceptions import NotFoundError
from tokenspan_api.application.policies.permissions import assert_owner_access, scope_owner
from tokenspan_api.application.ports.cache import Cache
from tokenspan_api.application.uow import UnitOfWork
from tokenspan_api.domain.entities.api_key import ApiKey
from tokenspan_api.pagination import Connection, FetchWindow, PageRequest
from tokenspan_api.services._listing import list_page

logger = logging.getLogger(__name__)


async def list_api_keys(
    filters: ApiKeyFilterDTO,
    request: PageRequest,
    principal: Principal,
    uow: UnitOfWork,
) -> Connection[ApiKey]:
    filters = replace(filters, owner_id=scope_owner(principal, filters.owner_id))

    async def fetch(window: FetchWindow) -> list[ApiKey]:
        return await uow.api_keys.fetch_window(filters, window)

    async def count() -> int:
        return await uow.api_keys.count(filters)

    return await list_page(request, fetch, count, uow)


async def get_api_key(
    api_key_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
    cache: Cache[ApiKey],
) -> ApiKey:
    api_key = await cache.get(api_key_id)
    if api_key is None:
        api_key = await uow.api_keys.get_by_id(api_key_id)
        if api_key is not None:
            await cache.set(api_key_id, api_key)
    return assert_owner_access(
        principal, api_key, api_key.owner_id if api_key else None, label="API key",
    )


async def create_api_key(
    data: ApiKeyCreateDTO,
    principal: Principal,
    uow: UnitOfWork,
) -> ApiKey:
    if await uow.providers.get_by_id(data.provider_id) is None:
        raise NotFoundError("Provider not found")

    now = datetime.now(timezone.utc)
    api_key = ApiKey(
        id=uuid.uuid4(),
        name=data.name,
        key=data.key,
        owner_id=principal.user_id,
        provider_id=data.provider_id,
        created_at=now,
        updated_at=now,
    )
    api_key = await uow.api_keys_w.create(api_key)
    await uow.commit()
    logger.info("Created API key %s for user %s", api_key.id, principal.user_id)
    return api_key


async def update_api_key(
    api_key_id: uuid.UUID,
    data: ApiKeyUpdateDTO,
    principal: Principal,
    uow: UnitOfWork,
    cache: Cache[ApiKey],
) -> ApiKey:
    current = await uow.api_keys.get_by_id(api_key_id)
    assert_owner_access(principal, current, current.owner_id if current else None, label="API key")

    values = changed_fields(data)
    if not values:
        return current  # type: ignore[return-value]

    values["updated_at"] = datetime.now(timezone.utc)
    api_key = await uow.api_keys_w.update(api_key_id, values)
    if api_key is None:
        raise NotFoundError("API key not found")
    await uow.commit()
    await cache.delete(api_key_id)
    return api_key


async def delete_api_key(
    api_key_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
    cache: Cache[ApiKey],
) -> ApiKey:
    current = await uow.api_keys.get_by_id(api_key_id)
    assert_owner_access(principal, current, current.owner_id if current else None, label="API key")

    api_key = await uow.api_keys_w.delete(api_key_id)
    if api_key is None:
        raise NotFoundError("API key not found")
    await uow.commit()
    await cache.delete(api_key_id)
    logger.info("Deleted API key %s", api_key_id)
    return api_key
