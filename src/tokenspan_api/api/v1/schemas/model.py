from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from tokenspan_api.domain.entities.model import Pricing


class PricingSchema(BaseModel):
    price: float = Field(..., ge=0)
    tokens: int = Field(..., gt=0)
    currency: str = "USD"

    model_config = {"from_attributes": True}

    def to_entity(self) -> Pricing:
        return Pricing(price=self.price, tokens=self.tokens, currency=self.currency)


class ModelResponse(BaseModel):
    id: UUID
    name: str
    description: str
    slug: str
    context: int
    input_pricing: PricingSchema
    output_pricing: PricingSchema
    training_at: datetime
    provider_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CreateModelRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    slug: str = Field(..., min_length=1, max_length=200)
    context: int = Field(..., gt=0)
    input_pricing: PricingSchema
    output_pricing: PricingSchema
    training_at: datetime
    provider_id: UUID


class UpdateModelRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    slug: str | None = Field(None, min_length=1, max_length=200)
    context: int | None = Field(None, gt=0)
    input_pricing: PricingSchema | None = None
    output_pricing: PricingSchema | None = None
    training_at: datetime | None = None
