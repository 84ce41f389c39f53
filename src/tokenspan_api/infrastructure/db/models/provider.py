from __future__ import annotations

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from tokenspan_api.infrastructure.db.base import Base, TimestampedMixin


class ProviderModel(TimestampedMixin, Base):
    __tablename__ = "providers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    __table_args__ = (
        Index("ix_providers_created_at", "created_at", "id"),
    )
