from __future__ import annotations

import uuid

import pytest

from tokenspan_api.application.dto.provider import ProviderCreateDTO, ProviderUpdateDTO
from tokenspan_api.application.exceptions import ConflictError, ForbiddenError, NotFoundError
from tokenspan_api.pagination import InvalidPageSize, PageRequest
from tokenspan_api.services import provider_service
from tests.conftest import FakeUoW, make_provider


@pytest.mark.asyncio
async def test_create_provider(admin_principal):
    uow = FakeUoW()

    provider = await provider_service.create_provider(
        ProviderCreateDTO(name="Anthropic", slug="anthropic"), admin_principal, uow,
    )

    assert provider.slug == "anthropic"
    assert provider.created_at == provider.updated_at
    assert uow._committed is True
    assert await uow.providers.get_by_id(provider.id) == provider


@pytest.mark.asyncio
async def test_create_provider_requires_admin(user_principal):
    uow = FakeUoW()

    with pytest.raises(ForbiddenError):
        await provider_service.create_provider(
            ProviderCreateDTO(name="Anthropic", slug="anthropic"), user_principal, uow,
        )
    assert uow._committed is False


@pytest.mark.asyncio
async def test_create_provider_slug_conflict(admin_principal):
    uow = FakeUoW()
    uow.providers.add(make_provider(slug="openai"))

    with pytest.raises(ConflictError):
        await provider_service.create_provider(
            ProviderCreateDTO(name="OpenAI 2", slug="openai"), admin_principal, uow,
        )


@pytest.mark.asyncio
async def test_update_provider_keeps_own_slug(admin_principal):
    uow = FakeUoW()
    existing = make_provider(slug="openai")
    uow.providers.add(existing)

    updated = await provider_service.update_provider(
        existing.id, ProviderUpdateDTO(name="OpenAI Inc", slug="openai"), admin_principal, uow,
    )

    assert updated.name == "OpenAI Inc"
    assert updated.updated_at > existing.updated_at


@pytest.mark.asyncio
async def test_update_provider_without_changes_is_noop(admin_principal):
    uow = FakeUoW()
    existing = make_provider()
    uow.providers.add(existing)

    result = await provider_service.update_provider(
        existing.id, ProviderUpdateDTO(), admin_principal, uow,
    )

    assert result == existing
    assert uow._committed is False


@pytest.mark.asyncio
async def test_delete_missing_provider(admin_principal):
    with pytest.raises(NotFoundError):
        await provider_service.delete_provider(uuid.uuid4(), admin_principal, FakeUoW())


@pytest.mark.asyncio
async def test_list_providers_pages_newest_first():
    uow = FakeUoW()
    uow.providers.add(*(make_provider(minute=m) for m in range(3)))

    connection = await provider_service.list_providers(PageRequest(first=2), uow)

    assert [p.slug for p in connection.items] == ["provider-2", "provider-1"]
    assert connection.has_next is True
    assert connection.total_count == 3


@pytest.mark.asyncio
async def test_list_providers_enforces_configured_maximum():
    with pytest.raises(InvalidPageSize):
        await provider_service.list_providers(PageRequest(first=1000), FakeUoW())
