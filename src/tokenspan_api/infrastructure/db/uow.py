from __future__ import annotations

from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from tokenspan_api.infrastructure.db.repositories.api_key import (
    ApiKeyReaderRepo,
    ApiKeyWriterRepo,
)
from tokenspan_api.infrastructure.db.repositories.execution import ExecutionReaderRepo
from tokenspan_api.infrastructure.db.repositories.model import ModelReaderRepo, ModelWriterRepo
from tokenspan_api.infrastructure.db.repositories.parameter import (
    ParameterReaderRepo,
    ParameterWriterRepo,
)
from tokenspan_api.infrastructure.db.repositories.provider import (
    ProviderReaderRepo,
    ProviderWriterRepo,
)
from tokenspan_api.infrastructure.db.repositories.thread import (
    ThreadReaderRepo,
    ThreadWriterRepo,
)
from tokenspan_api.infrastructure.db.repositories.user import UserReaderRepo


class SqlAlchemyUoW:
    """Concrete Unit-of-Work backed by a single AsyncSession."""

    # An AsyncSession cannot run two statements at once
    concurrent_reads = False

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.providers = ProviderReaderRepo(session)
        self.providers_w = ProviderWriterRepo(session)
        self.models = ModelReaderRepo(session)
        self.models_w = ModelWriterRepo(session)
        self.api_keys = ApiKeyReaderRepo(session)
        self.api_keys_w = ApiKeyWriterRepo(session)
        self.threads = ThreadReaderRepo(session)
        self.threads_w = ThreadWriterRepo(session)
        self.parameters = ParameterReaderRepo(session)
        self.parameters_w = ParameterWriterRepo(session)
        self.executions = ExecutionReaderRepo(session)
        self.users = UserReaderRepo(session)

    async def flush(self) -> None:
        await self._session.flush()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            await self.rollback()
