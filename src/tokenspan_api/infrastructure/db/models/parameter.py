from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import Boolean, Float, ForeignKey, Index, Integer, String
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from tokenspan_api.infrastructure.db.base import Base, TimestampedMixin


class ParameterModel(TimestampedMixin, Base):
    __tablename__ = "parameters"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    temperature: Mapped[float] = mapped_column(Float, nullable=False)
    max_tokens: Mapped[int] = mapped_column(Integer, nullable=False)
    stop_sequences: Mapped[list[str]] = mapped_column(ARRAY(String), nullable=False, default=list)
    top_p: Mapped[float] = mapped_column(Float, nullable=False)
    frequency_penalty: Mapped[float] = mapped_column(Float, nullable=False)
    presence_penalty: Mapped[float] = mapped_column(Float, nullable=False)
    extra: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    model_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("models.id", ondelete="CASCADE"),
        nullable=False,
    )
    thread_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_parameters_thread_timeline", "thread_id", "created_at", "id"),
    )
