from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from tokenspan_api.domain.value_objects.enums import ExecutionStatus


class UsageSchema(BaseModel):
    input_tokens: int
    output_tokens: int
    total_tokens: int

    model_config = {"from_attributes": True}


class ExecutionResponse(BaseModel):
    id: UUID
    thread_id: UUID
    parameter_id: UUID
    executed_by_id: UUID
    status: ExecutionStatus
    usage: UsageSchema | None
    response: dict[str, Any] | None
    error: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
