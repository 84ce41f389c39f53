from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class ParameterResponse(BaseModel):
    id: UUID
    name: str
    temperature: float
    max_tokens: int
    top_p: float
    frequency_penalty: float
    presence_penalty: float
    stop_sequences: list[str]
    extra: dict[str, Any] | None
    is_default: bool
    model_id: UUID
    thread_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CreateParameterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    model_id: UUID
    thread_id: UUID
    temperature: float = Field(1.0, ge=0, le=2)
    max_tokens: int = Field(256, gt=0)
    top_p: float = Field(1.0, ge=0, le=1)
    frequency_penalty: float = Field(0.0, ge=-2, le=2)
    presence_penalty: float = Field(0.0, ge=-2, le=2)
    stop_sequences: list[str] = Field(default_factory=list, max_length=4)
    extra: dict[str, Any] | None = None
    is_default: bool = False


class UpdateParameterRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    model_id: UUID | None = None
    temperature: float | None = Field(None, ge=0, le=2)
    max_tokens: int | None = Field(None, gt=0)
    top_p: float | None = Field(None, ge=0, le=1)
    frequency_penalty: float | None = Field(None, ge=-2, le=2)
    presence_penalty: float | None = Field(None, ge=-2, le=2)
    stop_sequences: list[str] | None = Field(None, max_length=4)
    extra: dict[str, Any] | None = None
    is_default: bool | None = None
