from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, status

from tokenspan_api.api.deps import CurrentPrincipal, PageRequestDep, UoWDep
from tokenspan_api.api.v1.schemas.common import ConnectionResponse
from tokenspan_api.api.v1.schemas.thread import (
    CreateThreadRequest,
    ThreadResponse,
    UpdateThreadRequest,
)
from tokenspan_api.application.dto.filters import ThreadFilterDTO
from tokenspan_api.application.dto.thread import ThreadCreateDTO, ThreadUpdateDTO
from tokenspan_api.services import thread_service

router = APIRouter(prefix="/api/v1/threads", tags=["threads"])


@router.get("", response_model=ConnectionResponse[ThreadResponse])
async def list_threads(
    principal: CurrentPrincipal,
    uow: UoWDep,
    page: PageRequestDep,
    owner_id: UUID | None = Query(None),
    name: str | None = Query(None, description="Case-insensitive substring match"),
) -> ConnectionResponse[ThreadResponse]:
    filters = ThreadFilterDTO(owner_id=owner_id, name=name)
    connection = await thread_service.list_threads(filters, page, principal, uow)
    return ConnectionResponse[ThreadResponse].from_connection(connection, ThreadResponse)


@router.get("/{thread_id}", response_model=ThreadResponse)
async def get_thread(
    thread_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ThreadResponse:
    thread = await thread_service.get_thread(thread_id, principal, uow)
    return ThreadResponse.model_validate(thread, from_attributes=True)


@router.post("", response_model=ThreadResponse, status_code=status.HTTP_201_CREATED)
async def create_thread(
    body: CreateThreadRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ThreadResponse:
    thread = await thread_service.create_thread(
        ThreadCreateDTO(name=body.name, slug=body.slug), principal, uow,
    )
    return ThreadResponse.model_validate(thread, from_attributes=True)


@router.patch("/{thread_id}", response_model=ThreadResponse)
async def update_thread(
    thread_id: UUID,
    body: UpdateThreadRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ThreadResponse:
    thread = await thread_service.update_thread(
        thread_id, ThreadUpdateDTO(name=body.name, slug=body.slug), principal, uow,
    )
    return ThreadResponse.model_validate(thread, from_attributes=True)


@router.delete("/{thread_id}", response_model=ThreadResponse)
async def delete_thread(
    thread_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ThreadResponse:
    thread = await thread_service.delete_thread(thread_id, principal, uow)
    return ThreadResponse.model_validate(thread, from_attributes=True)
