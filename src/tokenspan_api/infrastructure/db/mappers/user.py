from __future__ import annotations

from tokenspan_api.domain.entities.user import User
from tokenspan_api.domain.value_objects.enums import UserRole
from tokenspan_api.infrastructure.db.models.user import UserModel


def model_to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        email=model.email,
        username=model.username,
        role=UserRole(model.role),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
