from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class ApiKeyResponse(BaseModel):
    """The secret itself is write-only and never serialized back."""

    id: UUID
    name: str
    owner_id: UUID
    provider_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CreateApiKeyRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    key: str = Field(..., min_length=1)
    provider_id: UUID


class UpdateApiKeyRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
