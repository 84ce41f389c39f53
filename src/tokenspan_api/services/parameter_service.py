from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from tokenspan_api.application.dto.changes import changed_fields
from tokenspan_api.application.dto.filters import ParameterFilterDTO
from tokenspan_api.application.dto.parameter import ParameterCreateDTO, ParameterUpdateDTO
from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.application.exceptions import NotFoundError, ValidationError
from tokenspan_api.application.uow import UnitOfWork
from tokenspan_api.domain.entities.parameter import Parameter
from tokenspan_api.pagination import Connection, FetchWindow, PageRequest
from tokenspan_api.services._listing import list_page
from tokenspan_api.services.thread_service import get_thread

logger = logging.getLogger(__name__)


async def list_parameters(
    filters: ParameterFilterDTO,
    request: PageRequest,
    principal: Principal,
    uow: UnitOfWork,
) -> Connection[Parameter]:
    if filters.thread_id is not None:
        await get_thread(filters.thread_id, principal, uow)
    elif not principal.is_admin:
        raise ValidationError("'thread_id' is required")

    async def fetch(window: FetchWindow) -> list[Parameter]:
        return await uow.parameters.fetch_window(filters, window)

    async def count() -> int:
        return await uow.parameters.count(filters)

    return await list_page(request, fetch, count, uow)


async def get_parameter(
    parameter_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
) -> Parameter:
    parameter = await uow.parameters.get_by_id(parameter_id)
    if parameter is None:
        raise NotFoundError("Parameter not found")
    await get_thread(parameter.thread_id, principal, uow)
    return parameter


async def create_parameter(
    data: ParameterCreateDTO,
    principal: Principal,
    uow: UnitOfWork,
) -> Parameter:
    await get_thread(data.thread_id, principal, uow)
    if await uow.models.get_by_id(data.model_id) is None:
        raise NotFoundError("Model not found")

    if data.is_default:
        await uow.parameters_w.clear_default(data.thread_id)

    now = datetime.now(timezone.utc)
    parameter = Parameter(
        id=uuid.uuid4(),
        name=data.name,
        temperature=data.temperature,
        max_tokens=data.max_tokens,
        top_p=data.top_p,
        frequency_penalty=data.frequency_penalty,
        presence_penalty=data.presence_penalty,
        model_id=data.model_id,
        thread_id=data.thread_id,
        created_at=now,
        updated_at=now,
        stop_sequences=list(data.stop_sequences),
        extra=data.extra,
        is_default=data.is_default,
    )
    parameter = await uow.parameters_w.create(parameter)
    await uow.commit()
    logger.info("Created parameter %s on thread %s", parameter.id, parameter.thread_id)
    return parameter


async def update_parameter(
    parameter_id: uuid.UUID,
    data: ParameterUpdateDTO,
    principal: Principal,
    uow: UnitOfWork,
) -> Parameter:
    current = await get_parameter(parameter_id, principal, uow)
    values = changed_fields(data)
    if not values:
        return current
    if data.model_id is not None and await uow.models.get_by_id(data.model_id) is None:
        raise NotFoundError("Model not found")
    if data.is_default:
        await uow.parameters_w.clear_default(current.thread_id)

    values["updated_at"] = datetime.now(timezone.utc)
    parameter = await uow.parameters_w.update(parameter_id, values)
    if parameter is None:
        raise NotFoundError("Parameter not found")
    await uow.commit()
    return parameter


async def delete_parameter(
    parameter_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
) -> Parameter:
    await get_parameter(parameter_id, principal, uow)
    parameter = await uow.parameters_w.delete(parameter_id)
    if parameter is None:
        raise NotFoundError("Parameter not found")
    await uow.commit()
    logger.info("Deleted parameter %s", parameter_id)
    return parameter
