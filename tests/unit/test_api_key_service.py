from __future__ import annotations

import uuid

import pytest

from tokenspan_api.application.dto.api_key import ApiKeyCreateDTO, ApiKeyUpdateDTO
from tokenspan_api.application.dto.filters import ApiKeyFilterDTO
from tokenspan_api.application.exceptions import ForbiddenError, NotFoundError
from tokenspan_api.pagination import PageRequest
from tokenspan_api.services import api_key_service
from tests.conftest import (
    OTHER_USER_ID,
    USER_ID,
    FakeCache,
    FakeUoW,
    make_api_key,
    make_provider,
)


@pytest.mark.asyncio
async def test_create_api_key_is_owned_by_caller(user_principal):
    uow = FakeUoW()
    provider = make_provider()
    uow.providers.add(provider)

    api_key = await api_key_service.create_api_key(
        ApiKeyCreateDTO(name="prod", key="sk-live", provider_id=provider.id), user_principal, uow,
    )

    assert api_key.owner_id == USER_ID
    assert uow._committed is True


@pytest.mark.asyncio
async def test_create_api_key_requires_provider(user_principal):
    with pytest.raises(NotFoundError):
        await api_key_service.create_api_key(
            ApiKeyCreateDTO(name="prod", key="sk-live", provider_id=uuid.uuid4()),
            user_principal,
            FakeUoW(),
        )


@pytest.mark.asyncio
async def test_list_api_keys_is_pinned_to_caller(user_principal):
    uow = FakeUoW()
    mine = make_api_key(minute=1)
    uow.api_keys.add(mine, make_api_key(owner_id=OTHER_USER_ID, minute=2))

    connection = await api_key_service.list_api_keys(
        ApiKeyFilterDTO(), PageRequest(first=10), user_principal, uow,
    )

    assert connection.items == [mine]
    assert connection.total_count == 1


@pytest.mark.asyncio
async def test_list_api_keys_of_another_user_is_forbidden(user_principal):
    with pytest.raises(ForbiddenError):
        await api_key_service.list_api_keys(
            ApiKeyFilterDTO(owner_id=OTHER_USER_ID), PageRequest(), user_principal, FakeUoW(),
        )


@pytest.mark.asyncio
async def test_admin_lists_every_owner(admin_principal):
    uow = FakeUoW()
    uow.api_keys.add(make_api_key(minute=1), make_api_key(owner_id=OTHER_USER_ID, minute=2))

    connection = await api_key_service.list_api_keys(
        ApiKeyFilterDTO(), PageRequest(), admin_principal, uow,
    )

    assert connection.total_count == 2


@pytest.mark.asyncio
async def test_get_api_key_of_another_user_is_forbidden(other_principal):
    uow = FakeUoW()
    api_key = make_api_key()
    uow.api_keys.add(api_key)

    with pytest.raises(ForbiddenError):
        await api_key_service.get_api_key(api_key.id, other_principal, uow, FakeCache())


@pytest.mark.asyncio
async def test_cached_api_key_still_checks_owner(user_principal, other_principal):
    uow = FakeUoW()
    cache = FakeCache()
    api_key = make_api_key()
    uow.api_keys.add(api_key)

    assert await api_key_service.get_api_key(api_key.id, user_principal, uow, cache) == api_key
    with pytest.raises(ForbiddenError):
        await api_key_service.get_api_key(api_key.id, other_principal, uow, cache)
    assert cache.hits == 1


@pytest.mark.asyncio
async def test_rename_api_key_invalidates_cache(user_principal):
    uow = FakeUoW()
    cache = FakeCache()
    api_key = make_api_key()
    uow.api_keys.add(api_key)

    renamed = await api_key_service.update_api_key(
        api_key.id, ApiKeyUpdateDTO(name="renamed"), user_principal, uow, cache,
    )

    assert renamed.name == "renamed"
    assert renamed.key == api_key.key
    assert cache.deleted == [api_key.id]


@pytest.mark.asyncio
async def test_delete_api_key_of_another_user_is_forbidden(other_principal):
    uow = FakeUoW()
    api_key = make_api_key()
    uow.api_keys.add(api_key)

    with pytest.raises(ForbiddenError):
        await api_key_service.delete_api_key(api_key.id, other_principal, uow, FakeCache())
    assert await uow.api_keys.get_by_id(api_key.id) == api_key
