from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from tokenspan_api.domain.value_objects.enums import ExecutionStatus
from tokenspan_api.pagination import Cursor


@dataclass(frozen=True, slots=True)
class Usage:
    input_tokens: int
    output_tokens: int
    total_tokens: int


@dataclass(frozen=True, slots=True)
class Execution:
    id: UUID
    thread_id: UUID
    parameter_id: UUID
    executed_by_id: UUID
    status: ExecutionStatus
    usage: Usage | None
    response: dict[str, Any] | None
    error: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime

    def cursor(self) -> Cursor:
        return Cursor.from_datetime(self.created_at, self.id)
