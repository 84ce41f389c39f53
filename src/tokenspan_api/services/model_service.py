from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from tokenspan_api.application.dto.changes import changed_fields
from tokenspan_api.application.dto.filters import ModelFilterDTO
from tokenspan_api.application.dto.model import ModelCreateDTO, ModelUpdateDTO
from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.application.exceptions import ConflictError, NotFoundError
from tokenspan_api.application.policies.permissions import assert_admin
from tokenspan_api.application.ports.cache import Cache
from tokenspan_api.application.uow import UnitOfWork
from tokenspan_api.domain.entities.model import Model
from tokenspan_api.pagination import Connection, FetchWindow, PageRequest
from tokenspan_api.services._listing import list_page

logger = logging.getLogger(__name__)


async def list_models(
    filters: ModelFilterDTO,
    request: PageRequest,
    uow: UnitOfWork,
) -> Connection[Model]:
    async def fetch(window: FetchWindow) -> list[Model]:
        return await uow.models.fetch_window(filters, window)

    async def count() -> int:
        return await uow.models.count(filters)

    return await list_page(request, fetch, count, uow)


async def get_model(model_id: uuid.UUID, uow: UnitOfWork, cache: Cache[Model]) -> Model:
    """Read-through: cache first, repository on a miss, then fill the cache."""
    cached = await cache.get(model_id)
    if cached is not None:
        return cached

    model = await uow.models.get_by_id(model_id)
    if model is None:
        raise NotFoundError("Model not found")
    await cache.set(model_id, model)
    return model


async def _assert_slug_free(slug: str, uow: UnitOfWork, *, owner: uuid.UUID | None = None) -> None:
    existing = await uow.models.get_by_slug(slug)
    if existing is not None and existing.id != owner:
        raise ConflictError(f"Model slug '{slug}' is already taken")


async def create_model(
    data: ModelCreateDTO,
    principal: Principal,
    uow: UnitOfWork,
) -> Model:
    assert_admin(principal)
    if await uow.providers.get_by_id(data.provider_id) is None:
        raise NotFoundError("Provider not found")
    await _assert_slug_free(data.slug, uow)

    now = datetime.now(timezone.utc)
    model = Model(
        id=uuid.uuid4(),
        name=data.name,
        description=data.description,
        slug=data.slug,
        context=data.context,
        input_pricing=data.input_pricing,
        output_pricing=data.output_pricing,
        training_at=data.training_at,
        provider_id=data.provider_id,
        created_at=now,
        updated_at=now,
    )
    model = await uow.models_w.create(model)
    await uow.commit()
    logger.info("Created model %s (%s)", model.id, model.slug)
    return model


async def update_model(
    model_id: uuid.UUID,
    data: ModelUpdateDTO,
    principal: Principal,
    uow: UnitOfWork,
    cache: Cache[Model],
) -> Model:
    assert_admin(principal)
    values = changed_fields(data)
    if not values:
        return await get_model(model_id, uow, cache)
    if data.slug is not None:
        await _assert_slug_free(data.slug, uow, owner=model_id)

    values["updated_at"] = datetime.now(timezone.utc)
    model = await uow.models_w.update(model_id, values)
    if model is None:
        raise NotFoundError("Model not found")
    await uow.commit()
    await cache.delete(model_id)
    return model


async def delete_model(
    model_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
    cache: Cache[Model],
) -> Model:
    assert_admin(principal)
    model = await uow.models_w.delete(model_id)
    if model is None:
        raise NotFoundError("Model not found")
    await uow.commit()
    await cache.delete(model_id)
    logger.info("Deleted model %s", model_id)
    return model
