from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, status

from tokenspan_api.api.deps import CurrentAdmin, CurrentPrincipal, PageRequestDep, UoWDep
from tokenspan_api.api.v1.schemas.common import ConnectionResponse
from tokenspan_api.api.v1.schemas.provider import (
    CreateProviderRequest,
    ProviderResponse,
    UpdateProviderRequest,
)
from tokenspan_api.application.dto.provider import ProviderCreateDTO, ProviderUpdateDTO
from tokenspan_api.services import provider_service

router = APIRouter(prefix="/api/v1/providers", tags=["providers"])


@router.get("", response_model=ConnectionResponse[ProviderResponse])
async def list_providers(
    principal: CurrentPrincipal,
    uow: UoWDep,
    page: PageRequestDep,
) -> ConnectionResponse[ProviderResponse]:
    connection = await provider_service.list_providers(page, uow)
    return ConnectionResponse[ProviderResponse].from_connection(connection, ProviderResponse)


@router.get("/{provider_id}", response_model=ProviderResponse)
async def get_provider(
    provider_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ProviderResponse:
    provider = await provider_service.get_provider(provider_id, uow)
    return ProviderResponse.model_validate(provider, from_attributes=True)


@router.post("", response_model=ProviderResponse, status_code=status.HTTP_201_CREATED)
async def create_provider(
    body: CreateProviderRequest,
    admin: CurrentAdmin,
    uow: UoWDep,
) -> ProviderResponse:
    provider = await provider_service.create_provider(
        ProviderCreateDTO(name=body.name, slug=body.slug), admin, uow,
    )
    return ProviderResponse.model_validate(provider, from_attributes=True)


@router.patch("/{provider_id}", response_model=ProviderResponse)
async def update_provider(
    provider_id: UUID,
    body: UpdateProviderRequest,
    admin: CurrentAdmin,
    uow: UoWDep,
) -> ProviderResponse:
    provider = await provider_service.update_provider(
        provider_id, ProviderUpdateDTO(name=body.name, slug=body.slug), admin, uow,
    )
    return ProviderResponse.model_validate(provider, from_attributes=True)


@router.delete("/{provider_id}", response_model=ProviderResponse)
async def delete_provider(
    provider_id: UUID,
    admin: CurrentAdmin,
    uow: UoWDep,
) -> ProviderResponse:
    provider = await provider_service.delete_provider(provider_id, admin, uow)
    return ProviderResponse.model_validate(provider, from_attributes=True)
