from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from tokenspan_api.infrastructure.db.base import Base, TimestampedMixin


class ModelModel(TimestampedMixin, Base):
    __tablename__ = "models"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    context: Mapped[int] = mapped_column(Integer, nullable=False)
    input_pricing: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False)
    output_pricing: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False)
    training_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)
    provider_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("providers.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_models_provider_timeline", "provider_id", "created_at", "id"),
    )
