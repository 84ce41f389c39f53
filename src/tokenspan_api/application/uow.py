from __future__ import annotations

from typing import Protocol

from tokenspan_api.application.repositories.api_key import ApiKeyReader, ApiKeyWriter
from tokenspan_api.application.repositories.execution import ExecutionReader
from tokenspan_api.application.repositories.model import ModelReader, ModelWriter
from tokenspan_api.application.repositories.parameter import ParameterReader, ParameterWriter
from tokenspan_api.application.repositories.provider import ProviderReader, ProviderWriter
from tokenspan_api.application.repositories.thread import ThreadReader, ThreadWriter
from tokenspan_api.application.repositories.user import UserReader


class UnitOfWork(Protocol):
    providers: ProviderReader
    providers_w: ProviderWriter
    models: ModelReader
    models_w: ModelWriter
    api_keys: ApiKeyReader
    api_keys_w: ApiKeyWriter
    threads: ThreadReader
    threads_w: ThreadWriter
    parameters: ParameterReader
    parameters_w: ParameterWriter
    executions: ExecutionReader
    users: UserReader

    # False when reads share one connection and must not overlap
    concurrent_reads: bool

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
    async def flush(self) -> None: ...
