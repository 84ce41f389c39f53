from __future__ import annotations

from typing import TypeVar
from uuid import UUID

from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.application.exceptions import ForbiddenError, NotFoundError

E = TypeVar("E")


def assert_admin(principal: Principal) -> None:
    if not principal.is_admin:
        raise ForbiddenError("Admin access required")


def assert_owner_access(
    principal: Principal,
    entity: E | None,
    owner_id: UUID | None,
    *,
    label: str,
) -> E:
    """Raise if the entity doesn't exist or belongs to someone else."""
    if entity is None:
        raise NotFoundError(f"{label} not found")

    # Admins have global access
    if principal.is_admin:
        return entity

    if owner_id != principal.user_id:
        raise ForbiddenError(f"Not the owner of this {label.lower()}")

    return entity


def scope_owner(principal: Principal, requested: UUID | None) -> UUID | None:
    """Owner filter to apply to a list query made by ``principal``.

    Admins see everything (or the owner they asked for); everyone else is
    pinned to their own rows.
    """
    if principal.is_admin:
        return requested
    if requested is not None and requested != principal.user_id:
        raise ForbiddenError("Cannot list resources owned by another user")
    return principal.user_id
