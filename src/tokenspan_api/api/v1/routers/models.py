from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, status

from tokenspan_api.api.deps import (
    CurrentAdmin,
    CurrentPrincipal,
    ModelCacheDep,
    PageRequestDep,
    UoWDep,
)
from tokenspan_api.api.v1.schemas.common import ConnectionResponse
from tokenspan_api.api.v1.schemas.model import CreateModelRequest, ModelResponse, UpdateModelRequest
from tokenspan_api.application.dto.filters import ModelFilterDTO
from tokenspan_api.application.dto.model import ModelCreateDTO, ModelUpdateDTO
from tokenspan_api.services import model_service

router = APIRouter(prefix="/api/v1/models", tags=["models"])


@router.get("", response_model=ConnectionResponse[ModelResponse])
async def list_models(
    principal: CurrentPrincipal,
    uow: UoWDep,
    page: PageRequestDep,
    provider_id: UUID | None = Query(None),
) -> ConnectionResponse[ModelResponse]:
    connection = await model_service.list_models(ModelFilterDTO(provider_id=provider_id), page, uow)
    return ConnectionResponse[ModelResponse].from_connection(connection, ModelResponse)


@router.get("/{model_id}", response_model=ModelResponse)
async def get_model(
    model_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
    cache: ModelCacheDep,
) -> ModelResponse:
    model = await model_service.get_model(model_id, uow, cache)
    return ModelResponse.model_validate(model, from_attributes=True)


@router.post("", response_model=ModelResponse, status_code=status.HTTP_201_CREATED)
async def create_model(
    body: CreateModelRequest,
    admin: CurrentAdmin,
    uow: UoWDep,
) -> ModelResponse:
    data = ModelCreateDTO(
        name=body.name,
        description=body.description,
        slug=body.slug,
        context=body.context,
        input_pricing=body.input_pricing.to_entity(),
        output_pricing=body.output_pricing.to_entity(),
        training_at=body.training_at,
        provider_id=body.provider_id,
    )
    model = await model_service.create_model(data, admin, uow)
    return ModelResponse.model_validate(model, from_attributes=True)


@router.patch("/{model_id}", response_model=ModelResponse)
async def update_model(
    model_id: UUID,
    body: UpdateModelRequest,
    admin: CurrentAdmin,
    uow: UoWDep,
    cache: ModelCacheDep,
) -> ModelResponse:
    data = ModelUpdateDTO(
        name=body.name,
        description=body.description,
        slug=body.slug,
        context=body.context,
        input_pricing=body.input_pricing.to_entity() if body.input_pricing else None,
        output_pricing=body.output_pricing.to_entity() if body.output_pricing else None,
        training_at=body.training_at,
    )
    model = await model_service.update_model(model_id, data, admin, uow, cache)
    return ModelResponse.model_validate(model, from_attributes=True)


@router.delete("/{model_id}", response_model=ModelResponse)
async def delete_model(
    model_id: UUID,
    admin: CurrentAdmin,
    uow: UoWDep,
    cache: ModelCacheDep,
) -> ModelResponse:
    model = await model_service.delete_model(model_id, admin, uow, cache)
    return ModelResponse.model_validate(model, from_attributes=True)
