from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProviderCreateDTO:
    name: str
    slug: str


@dataclass(frozen=True, slots=True)
class ProviderUpdateDTO:
    name: str | None = None
    slug: str | None = None
