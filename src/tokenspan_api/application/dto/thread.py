from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ThreadCreateDTO:
    name: str
    slug: str


@dataclass(frozen=True, slots=True)
class ThreadUpdateDTO:
    name: str | None = None
    slug: str | None = None
