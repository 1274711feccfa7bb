"""Tests for the assignment management script."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from coachportal.core.store import SqlRecordStore
from coachportal.domains.trainers.service import AssignmentService
from coachportal.scripts.manage_assignments import build_parser, run_command
from tests.helpers import CLIENT_A, TRAINER_1


async def run(db_session: AsyncSession, *argv: str) -> int:
    return await run_command(db_session, build_parser().parse_args(list(argv)))


async def test_assign_then_revoke(db_session: AsyncSession):
    service = AssignmentService(SqlRecordStore(db_session))

    assert await run(db_session, "assign", TRAINER_1, CLIENT_A, "--notes", "manual") == 0
    assert await service.is_assigned(TRAINER_1, CLIENT_A)

    assert await run(db_session, "revoke", TRAINER_1, CLIENT_A) == 0
    assert not await service.is_assigned(TRAINER_1, CLIENT_A)


async def test_revoke_without_active_assignment_fails(db_session: AsyncSession):
    assert await run(db_session, "revoke", TRAINER_1, CLIENT_A) == 1


async def test_list(db_session: AsyncSession, trainer_1_assigned_to_a):
    assert await run(db_session, "list", TRAINER_1, "--all") == 0


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
