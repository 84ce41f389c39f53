from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone

from tokenspan_api.application.dto.changes import changed_fields
from tokenspan_api.application.dto.filters import ThreadFilterDTO
from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.application.dto.thread import ThreadCreateDTO, ThreadUpdateDTO
from tokenspan_api.application.exceptions import NotFoundError
from tokenspan_api.application.policies.permissions import assert_owner_access, scope_owner
from tokenspan_api.application.uow import UnitOfWork
from tokenspan_api.domain.entities.thread import Thread
from tokenspan_api.pagination import Connection, FetchWindow, PageRequest
from tokenspan_api.services._listing import list_page

logger = logging.getLogger(__name__)


async def list_threads(
    filters: ThreadFilterDTO,
    request: PageRequest,
    principal: Principal,
    uow: UnitOfWork,
) -> Connection[Thread]:
    filters = replace(filters, owner_id=scope_owner(principal, filters.owner_id))

    async def fetch(window: FetchWindow) -> list[Thread]:
        return await uow.threads.fetch_window(filters, window)

    async def count() -> int:
        return await uow.threads.count(filters)

    return await list_page(request, fetch, count, uow)


async def get_thread(
    thread_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
) -> Thread:
    thread = await uow.threads.get_by_id(thread_id)
    return assert_owner_access(principal, thread, thread.owner_id if thread else None, label="Thread")


async def create_thread(
    data: ThreadCreateDTO,
    principal: Principal,
    uow: UnitOfWork,
) -> Thread:
    now = datetime.now(timezone.utc)
    thread = Thread(
        id=uuid.uuid4(),
        name=data.name,
        slug=data.slug,
        owner_id=principal.user_id,
        created_at=now,
        updated_at=now,
    )
    thread = await uow.threads_w.create(thread)
    await uow.commit()
    logger.info("Created thread %s for user %s", thread.id, principal.user_id)
    return thread


async def update_thread(
    thread_id: uuid.UUID,
    data: ThreadUpdateDTO,
    principal: Principal,
    uow: UnitOfWork,
) -> Thread:
    current = await get_thread(thread_id, principal, uow)
    values = changed_fields(data)
    if not values:
        return current

    values["updated_at"] = datetime.now(timezone.utc)
    thread = await uow.threads_w.update(thread_id, values)
    if thread is None:
        raise NotFoundError("Thread not found")
    await uow.commit()
    return thread


async def delete_thread(
    thread_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
) -> Thread:
    await get_thread(thread_id, principal, uow)
    thread = await uow.threads_w.delete(thread_id)
    if thread is None:
        raise NotFoundError("Thread not found")
    await uow.commit()
    logger.info("Deleted thread %s", thread_id)
    return thread
