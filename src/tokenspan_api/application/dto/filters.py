"""Filter predicates for list queries, minus the pagination bounds."""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from tokenspan_api.domain.value_objects.enums import ExecutionStatus


@dataclass(frozen=True, slots=True)
class ModelFilterDTO:
    provider_id: UUID | None = None


@dataclass(frozen=True, slots=True)
class ApiKeyFilterDTO:
    provider_id: UUID | None = None
    owner_id: UUID | None = None


@dataclass(frozen=True, slots=True)
class ThreadFilterDTO:
    owner_id: UUID | None = None
    name: str | None = None


@dataclass(frozen=True, slots=True)
class ParameterFilterDTO:
    thread_id: UUID | None = None


@dataclass(frozen=True, slots=True)
class ExecutionFilterDTO:
    thread_id: UUID | None = None
    status: ExecutionStatus | None = None
    executed_by_id: UUID | None = None
