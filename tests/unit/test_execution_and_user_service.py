from __future__ import annotations

import pytest

from tokenspan_api.application.dto.filters import ExecutionFilterDTO
from tokenspan_api.application.exceptions import ForbiddenError, NotFoundError
from tokenspan_api.domain.value_objects.enums import ExecutionStatus, UserRole
from tokenspan_api.pagination import PageRequest
from tokenspan_api.services import execution_service, user_service
from tests.conftest import OTHER_USER_ID, USER_ID, FakeUoW, make_execution, make_user


@pytest.mark.asyncio
async def test_list_executions_only_shows_callers_runs(user_principal):
    uow = FakeUoW()
    mine = make_execution(minute=1)
    uow.executions.add(mine, make_execution(executed_by_id=OTHER_USER_ID, minute=2))

    connection = await execution_service.list_executions(
        ExecutionFilterDTO(), PageRequest(), user_principal, uow,
    )

    assert connection.items == [mine]


@pytest.mark.asyncio
async def test_list_executions_by_status(admin_principal):
    uow = FakeUoW()
    failed = make_execution(status=ExecutionStatus.FAILED, minute=1)
    uow.executions.add(failed, make_execution(minute=2), make_execution(executed_by_id=OTHER_USER_ID, minute=3))

    connection = await execution_service.list_executions(
        ExecutionFilterDTO(status=ExecutionStatus.FAILED), PageRequest(), admin_principal, uow,
    )

    assert connection.items == [failed]
    assert connection.total_count == 1


@pytest.mark.asyncio
async def test_get_foreign_execution_is_forbidden(other_principal):
    uow = FakeUoW()
    execution = make_execution()
    uow.executions.add(execution)

    with pytest.raises(ForbiddenError):
        await execution_service.get_execution(execution.id, other_principal, uow)


@pytest.mark.asyncio
async def test_list_users_requires_admin(user_principal):
    with pytest.raises(ForbiddenError):
        await user_service.list_users(PageRequest(), user_principal, FakeUoW())


@pytest.mark.asyncio
async def test_admin_lists_users(admin_principal):
    uow = FakeUoW()
    uow.users.add(*(make_user(minute=m) for m in range(3)))

    connection = await user_service.list_users(PageRequest(first=2), admin_principal, uow)

    assert len(connection.items) == 2
    assert connection.has_next is True
    assert connection.total_count == 3


@pytest.mark.asyncio
async def test_user_reads_own_profile(user_principal):
    uow = FakeUoW()
    me = make_user(user_id=USER_ID)
    uow.users.add(me)

    assert await user_service.get_user(USER_ID, user_principal, uow) == me


@pytest.mark.asyncio
async def test_user_cannot_read_other_profile(user_principal):
    uow = FakeUoW()
    uow.users.add(make_user(user_id=OTHER_USER_ID))

    with pytest.raises(ForbiddenError):
        await user_service.get_user(OTHER_USER_ID, user_principal, uow)


@pytest.mark.asyncio
async def test_admin_reads_missing_user(admin_principal):
    uow = FakeUoW()
    uow.users.add(make_user(role=UserRole.ADMIN))

    with pytest.raises(NotFoundError):
        await user_service.get_user(OTHER_USER_ID, admin_principal, uow)
