from __future__ import annotations

import uuid

from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.application.exceptions import ForbiddenError, NotFoundError
from tokenspan_api.application.policies.permissions import assert_admin
from tokenspan_api.application.uow import UnitOfWork
from tokenspan_api.domain.entities.user import User
from tokenspan_api.pagination import Connection, PageRequest
from tokenspan_api.services._listing import list_page


async def list_users(
    request: PageRequest,
    principal: Principal,
    uow: UnitOfWork,
) -> Connection[User]:
    assert_admin(principal)
    return await list_page(request, uow.users.fetch_window, uow.users.count, uow)


async def get_user(
    user_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
) -> User:
    if not principal.is_admin and user_id != principal.user_id:
        raise ForbiddenError("Cannot read another user's profile")
    user = await uow.users.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
