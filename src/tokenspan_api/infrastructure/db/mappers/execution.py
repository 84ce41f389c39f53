from __future__ import annotations

from tokenspan_api.domain.entities.execution import Execution, Usage
from tokenspan_api.domain.value_objects.enums import ExecutionStatus
from tokenspan_api.infrastructure.db.models.execution import ExecutionModel


def model_to_entity(model: ExecutionModel) -> Execution:
    usage = None
    if model.usage:
        usage = Usage(
            input_tokens=model.usage.get("input_tokens", 0),
            output_tokens=model.usage.get("output_tokens", 0),
            total_tokens=model.usage.get("total_tokens", 0),
        )
    return Execution(
        id=model.id,
        thread_id=model.thread_id,
        parameter_id=model.parameter_id,
        executed_by_id=model.executed_by_id,
        status=ExecutionStatus(model.status),
        usage=usage,
        response=model.response,
        error=model.error,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
