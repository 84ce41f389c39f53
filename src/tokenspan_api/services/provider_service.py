from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from tokenspan_api.application.dto.changes import changed_fields
from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.application.dto.provider import ProviderCreateDTO, ProviderUpdateDTO
from tokenspan_api.application.exceptions import ConflictError, NotFoundError
from tokenspan_api.application.policies.permissions import assert_admin
from tokenspan_api.application.uow import UnitOfWork
from tokenspan_api.domain.entities.provider import Provider
from tokenspan_api.pagination import Connection, PageRequest
from tokenspan_api.services._listing import list_page

logger = logging.getLogger(__name__)


async def list_providers(request: PageRequest, uow: UnitOfWork) -> Connection[Provider]:
    return await list_page(request, uow.providers.fetch_window, uow.providers.count, uow)


async def get_provider(provider_id: uuid.UUID, uow: UnitOfWork) -> Provider:
    provider = await uow.providers.get_by_id(provider_id)
    if provider is None:
        raise NotFoundError("Provider not found")
    return provider


async def _assert_slug_free(slug: str, uow: UnitOfWork, *, owner: uuid.UUID | None = None) -> None:
    existing = await uow.providers.get_by_slug(slug)
    if existing is not None and existing.id != owner:
        raise ConflictError(f"Provider slug '{slug}' is already taken")


async def create_provider(
    data: ProviderCreateDTO,
    principal: Principal,
    uow: UnitOfWork,
) -> Provider:
    assert_admin(principal)
    await _assert_slug_free(data.slug, uow)

    now = datetime.now(timezone.utc)
    provider = Provider(
        id=uuid.uuid4(),
        name=data.name,
        slug=data.slug,
        created_at=now,
        updated_at=now,
    )
    provider = await uow.providers_w.create(provider)
    await uow.commit()
    logger.info("Created provider %s (%s)", provider.id, provider.slug)
    return provider


async def update_provider(
    provider_id: uuid.UUID,
    data: ProviderUpdateDTO,
    principal: Principal,
    uow: UnitOfWork,
) -> Provider:
    assert_admin(principal)
    values = changed_fields(data)
    if not values:
        return await get_provider(provider_id, uow)
    if data.slug is not None:
        await _assert_slug_free(data.slug, uow, owner=provider_id)

    values["updated_at"] = datetime.now(timezone.utc)
    provider = await uow.providers_w.update(provider_id, values)
    if provider is None:
        raise NotFoundError("Provider not found")
    await uow.commit()
    return provider


async def delete_provider(
    provider_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
) -> Provider:
    assert_admin(principal)
    provider = await uow.providers_w.delete(provider_id)
    if provider is None:
        raise NotFoundError("Provider not found")
    await uow.commit()
    logger.info("Deleted provider %s", provider_id)
    return provider
