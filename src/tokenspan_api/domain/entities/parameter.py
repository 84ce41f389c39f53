from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from tokenspan_api.pagination import Cursor


@dataclass(frozen=True, slots=True)
class Parameter:
    """Sampling settings used when a thread is executed against a model."""

    id: UUID
    name: str
    temperature: float
    max_tokens: int
    top_p: float
    frequency_penalty: float
    presence_penalty: float
    model_id: UUID
    thread_id: UUID
    created_at: datetime
    updated_at: datetime
    stop_sequences: list[str] = field(default_factory=list)
    extra: dict[str, Any] | None = None
    is_default: bool = False

    def cursor(self) -> Cursor:
        return Cursor.from_datetime(self.created_at, self.id)
