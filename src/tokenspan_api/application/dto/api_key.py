from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class ApiKeyCreateDTO:
    name: str
    key: str
    provider_id: UUID


@dataclass(frozen=True, slots=True)
class ApiKeyUpdateDTO:
    name: str | None = None
