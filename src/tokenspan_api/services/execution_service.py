from __future__ import annotations

import uuid
from dataclasses import replace

from tokenspan_api.application.dto.filters import ExecutionFilterDTO
from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.application.policies.permissions import assert_owner_access, scope_owner
from tokenspan_api.application.uow import UnitOfWork
from tokenspan_api.domain.entities.execution import Execution
from tokenspan_api.pagination import Connection, FetchWindow, PageRequest
from tokenspan_api.services._listing import list_page


async def list_executions(
    filters: ExecutionFilterDTO,
    request: PageRequest,
    principal: Principal,
    uow: UnitOfWork,
) -> Connection[Execution]:
    filters = replace(filters, executed_by_id=scope_owner(principal, filters.executed_by_id))

    async def fetch(window: FetchWindow) -> list[Execution]:
        return await uow.executions.fetch_window(filters, window)

    async def count() -> int:
        return await uow.executions.count(filters)

    return await list_page(request, fetch, count, uow)


async def get_execution(
    execution_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
) -> Execution:
    execution = await uow.executions.get_by_id(execution_id)
    return assert_owner_access(
        principal,
        execution,
        execution.executed_by_id if execution else None,
        label="Execution",
    )
