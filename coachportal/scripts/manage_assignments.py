"""
Operator script for trainer-client assignment bookkeeping.

Run with:
    DATABASE_URL="postgresql+asyncpg://..." python -m coachportal.scripts.manage_assignments assign TRAINER CLIENT
    python -m coachportal.scripts.manage_assignments revoke TRAINER CLIENT
    python -m coachportal.scripts.manage_assignments list TRAINER [--all]
"""
import argparse
import asyncio

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from coachportal.config.database import AsyncSessionLocal, init_db
from coachportal.core.store import SqlRecordStore
from coachportal.domains.trainers.service import AssignmentService

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage trainer-client assignments")
    subparsers = parser.add_subparsers(dest="command", required=True)

    assign = subparsers.add_parser("assign", help="Assign a client to a trainer (idempotent)")
    assign.add_argument("trainer_id")
    assign.add_argument("client_id")
    assign.add_argument("--notes", default=None)

    revoke = subparsers.add_parser("revoke", help="Deactivate a trainer's access to a client")
    revoke.add_argument("trainer_id")
    revoke.add_argument("client_id")

    list_cmd = subparsers.add_parser("list", help="List a trainer's assignments")
    list_cmd.add_argument("trainer_id")
    list_cmd.add_argument("--all", action="store_true", help="Include inactive assignments")

    return parser


async def run_command(session: AsyncSession, args: argparse.Namespace) -> int:
    """Execute one parsed command against the session. Returns an exit code."""
    service = AssignmentService(SqlRecordStore(session))

    if args.command == "assign":
        assignment = await service.assign_client(args.trainer_id, args.client_id, notes=args.notes)
        logger.info("assign_command_completed", assignment_id=assignment.id)
        return 0

    if args.command == "revoke":
        revoked = await service.deactivate_assignment(args.trainer_id, args.client_id)
        if revoked == 0:
            logger.warning("revoke_command_nothing_active", trainer_id=args.trainer_id, client_id=args.client_id)
            return 1
        return 0

    assignments = await service.list_assignments(args.trainer_id, active_only=not args.all)
    for a in assignments:
        logger.info("assignment", client_id=a.client_id, status=a.status, assignment_id=a.id)
    logger.info("list_command_completed", trainer_id=args.trainer_id, total=len(assignments))
    return 0


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    await init_db()
    async with AsyncSessionLocal() as session:
        return await run_command(session, args)


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
