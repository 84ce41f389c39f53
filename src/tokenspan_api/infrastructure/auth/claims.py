from __future__ import annotations

from typing import Any
from uuid import UUID

import jwt

from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.domain.value_objects.enums import UserRole

REQUIRED_CLAIMS = ["sub"]


def principal_from_claims(payload: dict[str, Any]) -> Principal:
    """Map verified JWT claims onto a Principal. Unknown roles fall back to user."""
    try:
        user_id = UUID(str(payload["sub"]))
    except (KeyError, ValueError) as exc:
        raise jwt.InvalidTokenError("Token subject must be a user UUID") from exc

    role_raw = payload.get("role", UserRole.USER)
    role = UserRole(role_raw) if role_raw in UserRole.__members__.values() else UserRole.USER
    return Principal(user_id=user_id, role=role)
