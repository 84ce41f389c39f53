from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from tokenspan_api.domain.entities.model import Pricing


@dataclass(frozen=True, slots=True)
class ModelCreateDTO:
    name: str
    slug: str
    context: int
    input_pricing: Pricing
    output_pricing: Pricing
    training_at: datetime
    provider_id: UUID
    description: str = ""


@dataclass(frozen=True, slots=True)
class ModelUpdateDTO:
    name: str | None = None
    description: str | None = None
    slug: str | None = None
    context: int | None = None
    input_pricing: Pricing | None = None
    output_pricing: Pricing | None = None
    training_at: datetime | None = None
