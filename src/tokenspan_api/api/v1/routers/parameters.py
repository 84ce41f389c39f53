from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, status

from tokenspan_api.api.deps import CurrentPrincipal, PageRequestDep, UoWDep
from tokenspan_api.api.v1.schemas.common import ConnectionResponse
from tokenspan_api.api.v1.schemas.parameter import (
    CreateParameterRequest,
    ParameterResponse,
    UpdateParameterRequest,
)
from tokenspan_api.application.dto.filters import ParameterFilterDTO
from tokenspan_api.application.dto.parameter import ParameterCreateDTO, ParameterUpdateDTO
from tokenspan_api.services import parameter_service

router = APIRouter(prefix="/api/v1/parameters", tags=["parameters"])


@router.get("", response_model=ConnectionResponse[ParameterResponse])
async def list_parameters(
    principal: CurrentPrincipal,
    uow: UoWDep,
    page: PageRequestDep,
    thread_id: UUID | None = Query(None),
) -> ConnectionResponse[ParameterResponse]:
    connection = await parameter_service.list_parameters(
        ParameterFilterDTO(thread_id=thread_id), page, principal, uow,
    )
    return ConnectionResponse[ParameterResponse].from_connection(connection, ParameterResponse)


@router.get("/{parameter_id}", response_model=ParameterResponse)
async def get_parameter(
    parameter_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ParameterResponse:
    parameter = await parameter_service.get_parameter(parameter_id, principal, uow)
    return ParameterResponse.model_validate(parameter, from_attributes=True)


@router.post("", response_model=ParameterResponse, status_code=status.HTTP_201_CREATED)
async def create_parameter(
    body: CreateParameterRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ParameterResponse:
    parameter = await parameter_service.create_parameter(
        ParameterCreateDTO(**body.model_dump()), principal, uow,
    )
    return ParameterResponse.model_validate(parameter, from_attributes=True)


@router.patch("/{parameter_id}", response_model=ParameterResponse)
async def update_parameter(
    parameter_id: UUID,
    body: UpdateParameterRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ParameterResponse:
    parameter = await parameter_service.update_parameter(
        parameter_id, ParameterUpdateDTO(**body.model_dump()), principal, uow,
    )
    return ParameterResponse.model_validate(parameter, from_attributes=True)


@router.delete("/{parameter_id}", response_model=ParameterResponse)
async def delete_parameter(
    parameter_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ParameterResponse:
    parameter = await parameter_service.delete_parameter(parameter_id, principal, uow)
    return ParameterResponse.model_validate(parameter, from_attributes=True)
