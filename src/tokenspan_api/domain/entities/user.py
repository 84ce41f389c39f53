from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from tokenspan_api.domain.value_objects.enums import UserRole
from tokenspan_api.pagination import Cursor


@dataclass(frozen=True, slots=True)
class User:
    id: UUID
    email: str
    username: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    def cursor(self) -> Cursor:
        return Cursor.from_datetime(self.created_at, self.id)
