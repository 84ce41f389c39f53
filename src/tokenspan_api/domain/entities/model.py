from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from tokenspan_api.pagination import Cursor


@dataclass(frozen=True, slots=True)
class Pricing:
    price: float
    tokens: int
    currency: str = "USD"


@dataclass(frozen=True, slots=True)
class Model:
    id: UUID
    name: str
    description: str
    slug: str
    context: int
    input_pricing: Pricing
    output_pricing: Pricing
    training_at: datetime
    provider_id: UUID
    created_at: datetime
    updated_at: datetime

    def cursor(self) -> Cursor:
        return Cursor.from_datetime(self.created_at, self.id)
