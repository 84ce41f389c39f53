from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query

from tokenspan_api.api.deps import CurrentPrincipal, PageRequestDep, UoWDep
from tokenspan_api.api.v1.schemas.common import ConnectionResponse
from tokenspan_api.api.v1.schemas.execution import ExecutionResponse
from tokenspan_api.application.dto.filters import ExecutionFilterDTO
from tokenspan_api.domain.value_objects.enums import ExecutionStatus
from tokenspan_api.services import execution_service

router = APIRouter(prefix="/api/v1/executions", tags=["executions"])


@router.get("", response_model=ConnectionResponse[ExecutionResponse])
async def list_executions(
    principal: CurrentPrincipal,
    uow: UoWDep,
    page: PageRequestDep,
    thread_id: UUID | None = Query(None),
    status: ExecutionStatus | None = Query(None),
    executed_by_id: UUID | None = Query(None),
) -> ConnectionResponse[ExecutionResponse]:
    filters = ExecutionFilterDTO(thread_id=thread_id, status=status, executed_by_id=executed_by_id)
    connection = await execution_service.list_executions(filters, page, principal, uow)
    return ConnectionResponse[ExecutionResponse].from_connection(connection, ExecutionResponse)


@router.get("/{execution_id}", response_model=ExecutionResponse)
async def get_execution(
    execution_id: UUID,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> ExecutionResponse:
    execution = await execution_service.get_execution(execution_id, principal, uow)
    return ExecutionResponse.model_validate(execution, from_attributes=True)
