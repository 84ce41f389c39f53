from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, status

from tokenspan_api.api.deps import ApiKeyCacheDep, CurrentPrincipal, PageRequestDep, UoWDep
from tokenspan_api.api.v1.schemas.api_key import (
    ApiKeyResponse,
    CreateApiKeyRequest,
    UpdateApiKeyRequest,
)
from tokenspan_api.api.v1.schemas.common import ConnectionResponse
from tokenspan_api.application.dto.api_key import ApiKeyCreateDTO, ApiKeyUpdateDTO
from tokenspan_api.application.dto.filters import ApiKeyFilterDTO
from tokenspan_api.services import api_key_service

router = APIRouter(prefix="/api/v1/api-keys", tags=["api-keys"])


@router.get("", response_model=ConnectionResponse[ApiKeyResponse])
async def list_api_keys(
    principal: CurrentPrincipal,
    uow: UoWDep,
    page: PageRequestDep,
    provider_id: UUID | None = Query(None),
    owner_id: UUID | None = Query(None),
) -> ConnectionResponse[ApiKeyResponse]:
    filters = ApiKeyFilterDTO(provider_id=provider_id, owner_id=owner_id)
    connection = await api_key_service.list_api_keys(filters, page, principal, uow)
    return ConnectionResponse[ApiKeyResponse].from_connection(connection, ApiKeyResponse)


@router.get("/{api_key_id}", response_model=ApiKeyResponse)
async def get_api_key(
    api_key_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
    cache: ApiKeyCacheDep,
) -> ApiKeyResponse:
    api_key = await api_key_service.get_api_key(api_key_id, principal, uow, cache)
    return ApiKeyResponse.model_validate(api_key, from_attributes=True)


@router.post("", response_model=ApiKeyResponse, status_code=status.HTTP_201_CREATED)
async def create_api_key(
    body: CreateApiKeyRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ApiKeyResponse:
    data = ApiKeyCreateDTO(name=body.name, key=body.key, provider_id=body.provider_id)
    api_key = await api_key_service.create_api_key(data, principal, uow)
    return ApiKeyResponse.model_validate(api_key, from_attributes=True)


@router.patch("/{api_key_id}", response_model=ApiKeyResponse)
async def update_api_key(
    api_key_id: UUID,
    body: UpdateApiKeyRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    cache: ApiKeyCacheDep,
) -> ApiKeyResponse:
    api_key = await api_key_service.update_api_key(
        api_key_id, ApiKeyUpdateDTO(name=body.name), principal, uow, cache,
    )
    return ApiKeyResponse.model_validate(api_key, from_attributes=True)


@router.delete("/{api_key_id}", response_model=ApiKeyResponse)
async def delete_api_key(
    api_key_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
    cache: ApiKeyCacheDep,
) -> ApiKeyResponse:
    api_key = await api_key_service.delete_api_key(api_key_id, principal, uow, cache)
    return ApiKeyResponse.model_validate(api_key, from_attributes=True)
