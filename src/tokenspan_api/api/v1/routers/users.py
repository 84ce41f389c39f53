from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter

from tokenspan_api.api.deps import CurrentAdmin, CurrentPrincipal, PageRequestDep, UoWDep
from tokenspan_api.api.v1.schemas.common import ConnectionResponse
from tokenspan_api.api.v1.schemas.user import UserResponse
from tokenspan_api.services import user_service

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=ConnectionResponse[UserResponse])
async def list_users(
    admin: CurrentAdmin,
    uow: UoWDep,
    page: PageRequestDep,
) -> ConnectionResponse[UserResponse]:
    connection = await user_service.list_users(page, admin, uow)
    return ConnectionResponse[UserResponse].from_connection(connection, UserResponse)


@router.get("/me", response_model=UserResponse)
async def get_me(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> UserResponse:
    user = await user_service.get_user(principal.user_id, principal, uow)
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> UserResponse:
    user = await user_service.get_user(user_id, principal, uow)
    return UserResponse.model_validate(user, from_attributes=True)
