from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from tokenspan_api.pagination import Cursor


@dataclass(frozen=True, slots=True)
class Thread:
    id: UUID
    name: str
    slug: str
    owner_id: UUID
    created_at: datetime
    updated_at: datetime

    def cursor(self) -> Cursor:
        return Cursor.from_datetime(self.created_at, self.id)
