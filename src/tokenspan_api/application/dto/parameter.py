from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID


@dataclass(frozen=True, slots=True)
class ParameterCreateDTO:
    name: str
    model_id: UUID
    thread_id: UUID
    temperature: float = 1.0
    max_tokens: int = 256
    top_p: float = 1.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0
    stop_sequences: list[str] = field(default_factory=list)
    extra: dict[str, Any] | None = None
    is_default: bool = False


@dataclass(frozen=True, slots=True)
class ParameterUpdateDTO:
    name: str | None = None
    model_id: UUID | None = None
    temperature: float | None = None
    max_tokens: int | None = None
    top_p: float | None = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None
    stop_sequences: list[str] | None = None
    extra: dict[str, Any] | None = None
    is_default: bool | None = None
