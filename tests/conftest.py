"""Shared test fixtures."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Generic, TypeVar
from uuid import UUID

import pytest

from tokenspan_api.application.dto.filters import (
    ApiKeyFilterDTO,
    ExecutionFilterDTO,
    ModelFilterDTO,
    ParameterFilterDTO,
    ThreadFilterDTO,
)
from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.domain.entities.api_key import ApiKey
from tokenspan_api.domain.entities.execution import Execution, Usage
from tokenspan_api.domain.entities.model import Model, Pricing
from tokenspan_api.domain.entities.parameter import Parameter
from tokenspan_api.domain.entities.provider import Provider
from tokenspan_api.domain.entities.thread import Thread
from tokenspan_api.domain.entities.user import User
from tokenspan_api.domain.value_objects.enums import ExecutionStatus, UserRole
from tokenspan_api.pagination import Cursor, Direction, FetchWindow

E = TypeVar("E")

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """A deterministic timestamp ``minutes`` after BASE_TIME."""
    return BASE_TIME + timedelta(minutes=minutes)


USER_ID = UUID("00000000-0000-0000-0000-00000000002a")
OTHER_USER_ID = UUID("00000000-0000-0000-0000-00000000002b")
ADMIN_ID = UUID("00000000-0000-0000-0000-000000000001")


@pytest.fixture
def user_principal() -> Principal:
    return Principal(user_id=USER_ID, role=UserRole.USER)


@pytest.fixture
def other_principal() -> Principal:
    return Principal(user_id=OTHER_USER_ID, role=UserRole.USER)


@pytest.fixture
def admin_principal() -> Principal:
    return Principal(user_id=ADMIN_ID, role=UserRole.ADMIN)


# -- factories ---------------------------------------------------------------


def make_provider(*, minute: int = 0, slug: str | None = None, name: str = "OpenAI") -> Provider:
    created = at(minute)
    return Provider(
        id=uuid.uuid4(),
        name=name,
        slug=slug or f"provider-{minute}",
        created_at=created,
        updated_at=created,
    )


def make_model(*, provider_id: UUID | None = None, minute: int = 0, slug: str | None = None) -> Model:
    created = at(minute)
    return Model(
        id=uuid.uuid4(),
        name=f"model {minute}",
        description="",
        slug=slug or f"model-{minute}",
        context=128_000,
        input_pricing=Pricing(price=2.5, tokens=1_000_000),
        output_pricing=Pricing(price=10.0, tokens=1_000_000),
        training_at=BASE_TIME,
        provider_id=provider_id or uuid.uuid4(),
        created_at=created,
        updated_at=created,
    )


def make_api_key(*, owner_id: UUID = USER_ID, provider_id: UUID | None = None, minute: int = 0) -> ApiKey:
    created = at(minute)
    return ApiKey(
        id=uuid.uuid4(),
        name=f"key {minute}",
        key="sk-test-secret",
        owner_id=owner_id,
        provider_id=provider_id or uuid.uuid4(),
        created_at=created,
        updated_at=created,
    )


def make_thread(*, owner_id: UUID = USER_ID, minute: int = 0, name: str | None = None) -> Thread:
    created = at(minute)
    return Thread(
        id=uuid.uuid4(),
        name=name or f"thread {minute}",
        slug=f"thread-{minute}",
        owner_id=owner_id,
        created_at=created,
        updated_at=created,
    )


def make_parameter(
    *,
    thread_id: UUID,
    model_id: UUID | None = None,
    minute: int = 0,
    is_default: bool = False,
) -> Parameter:
    created = at(minute)
    return Parameter(
        id=uuid.uuid4(),
        name=f"param {minute}",
        temperature=1.0,
        max_tokens=256,
        top_p=1.0,
        frequency_penalty=0.0,
        presence_penalty=0.0,
        model_id=model_id or uuid.uuid4(),
        thread_id=thread_id,
        created_at=created,
        updated_at=created,
        is_default=is_default,
    )


def make_execution(
    *,
    executed_by_id: UUID = USER_ID,
    thread_id: UUID | None = None,
    status: ExecutionStatus = ExecutionStatus.SUCCESS,
    minute: int = 0,
) -> Execution:
    created = at(minute)
    return Execution(
        id=uuid.uuid4(),
        thread_id=thread_id or uuid.uuid4(),
        parameter_id=uuid.uuid4(),
        executed_by_id=executed_by_id,
        status=status,
        usage=Usage(input_tokens=10, output_tokens=5, total_tokens=15),
        response={"text": "hi"},
        error=None,
        created_at=created,
        updated_at=created,
    )


def make_user(*, user_id: UUID | None = None, role: UserRole = UserRole.USER, minute: int = 0) -> User:
    created = at(minute)
    uid = user_id or uuid.uuid4()
    return User(
        id=uid,
        email=f"{uid.hex[:8]}@example.com",
        username=uid.hex[:8],
        role=role,
        created_at=created,
        updated_at=created,
    )


# -- in-memory repositories ---------------------------------------------------


def _sort_key(row: Any) -> tuple[datetime, UUID]:
    return row.created_at, row.id


def _seek(cursor: Cursor) -> tuple[Callable[[Any], Any], Any]:
    """What the SQL seek compares for ``cursor``: a row projection and its bound."""
    if cursor.row_id is None:
        return (lambda r: r.created_at), cursor.to_datetime()
    return _sort_key, (cursor.to_datetime(), cursor.row_id)


def window_rows(rows: list[Any], window: FetchWindow) -> list[Any]:
    """Serve a planned window the way the SQL repositories do."""
    forward = window.direction is Direction.FORWARD
    ordered = sorted(rows, key=_sort_key, reverse=forward)
    if window.seek is not None:
        project, bound = _seek(window.seek)
        if forward:
            ordered = [r for r in ordered if project(r) <= bound]
        else:
            ordered = [r for r in ordered if project(r) >= bound]
    page = ordered[: window.limit]
    if not forward:
        page.reverse()
    return page


@dataclass
class FakeTable(Generic[E]):
    _store: dict[UUID, E] = field(default_factory=dict)
    fetch_calls: list[FetchWindow] = field(default_factory=list)

    def add(self, *entities: E) -> None:
        for entity in entities:
            self._store[entity.id] = entity  # type: ignore[attr-defined]

    async def get_by_id(self, entity_id: UUID) -> E | None:
        return self._store.get(entity_id)

    def _matching(self, predicate: Callable[[E], bool] | None = None) -> list[E]:
        return [e for e in self._store.values() if predicate is None or predicate(e)]

    def _window(self, window: FetchWindow, predicate: Callable[[E], bool] | None = None) -> list[E]:
        self.fetch_calls.append(window)
        return window_rows(self._matching(predicate), window)


@dataclass
class FakeWriter(Generic[E]):
    _table: FakeTable[E]

    async def create(self, entity: E) -> E:
        self._table.add(entity)
        return entity

    async def update(self, entity_id: UUID, values: dict[str, Any]) -> E | None:
        current = self._table._store.get(entity_id)
        if current is None:
            return None
        updated = replace(current, **values)  # type: ignore[type-var]
        self._table._store[entity_id] = updated
        return updated

    async def delete(self, entity_id: UUID) -> E | None:
        return self._table._store.pop(entity_id, None)


@dataclass
class FakeProviderReader(FakeTable[Provider]):
    async def get_by_slug(self, slug: str) -> Provider | None:
        return next((p for p in self._store.values() if p.slug == slug), None)

    async def fetch_window(self, window: FetchWindow) -> list[Provider]:
        return self._window(window)

    async def count(self) -> int:
        return len(self._store)


@dataclass
class FakeModelReader(FakeTable[Model]):
    async def get_by_slug(self, slug: str) -> Model | None:
        return next((m for m in self._store.values() if m.slug == slug), None)

    @staticmethod
    def _predicate(filters: ModelFilterDTO) -> Callable[[Model], bool]:
        return lambda m: filters.provider_id is None or m.provider_id == filters.provider_id

    async def fetch_window(self, filters: ModelFilterDTO, window: FetchWindow) -> list[Model]:
        return self._window(window, self._predicate(filters))

    async def count(self, filters: ModelFilterDTO) -> int:
        return len(self._matching(self._predicate(filters)))


@dataclass
class FakeApiKeyReader(FakeTable[ApiKey]):
    @staticmethod
    def _predicate(filters: ApiKeyFilterDTO) -> Callable[[ApiKey], bool]:
        return lambda k: (
            (filters.provider_id is None or k.provider_id == filters.provider_id)
            and (filters.owner_id is None or k.owner_id == filters.owner_id)
        )

    async def fetch_window(self, filters: ApiKeyFilterDTO, window: FetchWindow) -> list[ApiKey]:
        return self._window(window, self._predicate(filters))

    async def count(self, filters: ApiKeyFilterDTO) -> int:
        return len(self._matching(self._predicate(filters)))


@dataclass
class FakeThreadReader(FakeTable[Thread]):
    @staticmethod
    def _predicate(filters: ThreadFilterDTO) -> Callable[[Thread], bool]:
        return lambda t: (
            (filters.owner_id is None or t.owner_id == filters.owner_id)
            and (filters.name is None or filters.name.lower() in t.name.lower())
        )

    async def fetch_window(self, filters: ThreadFilterDTO, window: FetchWindow) -> list[Thread]:
        return self._window(window, self._predicate(filters))

    async def count(self, filters: ThreadFilterDTO) -> int:
        return len(self._matching(self._predicate(filters)))


@dataclass
class FakeParameterReader(FakeTable[Parameter]):
    @staticmethod
    def _predicate(filters: ParameterFilterDTO) -> Callable[[Parameter], bool]:
        return lambda p: filters.thread_id is None or p.thread_id == filters.thread_id

    async def fetch_window(self, filters: ParameterFilterDTO, window: FetchWindow) -> list[Parameter]:
        return self._window(window, self._predicate(filters))

    async def count(self, filters: ParameterFilterDTO) -> int:
        return len(self._matching(self._predicate(filters)))


@dataclass
class FakeParameterWriter(FakeWriter[Parameter]):
    async def clear_default(self, thread_id: UUID) -> None:
        for pid, p in list(self._table._store.items()):
            if p.thread_id == thread_id and p.is_default:
                self._table._store[pid] = replace(p, is_default=False)


@dataclass
class FakeExecutionReader(FakeTable[Execution]):
    @staticmethod
    def _predicate(filters: ExecutionFilterDTO) -> Callable[[Execution], bool]:
        return lambda e: (
            (filters.thread_id is None or e.thread_id == filters.thread_id)
            and (filters.status is None or e.status == filters.status)
            and (filters.executed_by_id is None or e.executed_by_id == filters.executed_by_id)
        )

    async def fetch_window(self, filters: ExecutionFilterDTO, window: FetchWindow) -> list[Execution]:
        return self._window(window, self._predicate(filters))

    async def count(self, filters: ExecutionFilterDTO) -> int:
        return len(self._matching(self._predicate(filters)))


@dataclass
class FakeUserReader(FakeTable[User]):
    async def fetch_window(self, window: FetchWindow) -> list[User]:
        return self._window(window)

    async def count(self) -> int:
        return len(self._store)


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    providers: FakeProviderReader = field(default_factory=FakeProviderReader)
    models: FakeModelReader = field(default_factory=FakeModelReader)
    api_keys: FakeApiKeyReader = field(default_factory=FakeApiKeyReader)
    threads: FakeThreadReader = field(default_factory=FakeThreadReader)
    parameters: FakeParameterReader = field(default_factory=FakeParameterReader)
    executions: FakeExecutionReader = field(default_factory=FakeExecutionReader)
    users: FakeUserReader = field(default_factory=FakeUserReader)
    concurrent_reads: bool = True
    _committed: bool = False

    def __post_init__(self) -> None:
        self.providers_w = FakeWriter(self.providers)
        self.models_w = FakeWriter(self.models)
        self.api_keys_w = FakeWriter(self.api_keys)
        self.threads_w = FakeWriter(self.threads)
        self.parameters_w = FakeParameterWriter(self.parameters)

    async def flush(self) -> None:
        pass

    async def commit(self) -> None:
        self._committed = True

    async def rollback(self) -> None:
        pass


@dataclass
class FakeCache(Generic[E]):
    _store: dict[UUID, E] = field(default_factory=dict)
    hits: int = 0
    deleted: list[UUID] = field(default_factory=list)

    async def get(self, key: UUID) -> E | None:
        value = self._store.get(key)
        if value is not None:
            self.hits += 1
        return value

    async def set(self, key: UUID, value: E) -> None:
        self._store[key] = value

    async def delete(self, key: UUID) -> None:
        self._store.pop(key, None)
        self.deleted.append(key)
