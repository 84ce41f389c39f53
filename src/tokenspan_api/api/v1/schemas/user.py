from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from tokenspan_api.domain.value_objects.enums import UserRole


class UserResponse(BaseModel):
    id: UUID
    email: str
    username: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
