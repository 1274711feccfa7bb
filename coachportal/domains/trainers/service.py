"""Trainer-client assignment service.

Answers "which clients may this trainer touch, right now?". Assignments are
re-read from the store on every call; nothing is cached between requests, so
deactivating an assignment takes effect on the next call.
"""
import structlog

from coachportal.core.store import RecordStore
from coachportal.domains.trainers.models import (
    ASSIGNMENTS_COLLECTION,
    AssignmentStatus,
    TrainerClientAssignment,
)

logger = structlog.get_logger(__name__)


class AssignmentService:
    """Service for resolving and maintaining trainer-client assignments."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def _assignments_for(self, trainer_id: str) -> list[TrainerClientAssignment]:
        assignments = await self.store.fetch_all(ASSIGNMENTS_COLLECTION)
        return [a for a in assignments if a.trainer_id == trainer_id]

    async def active_clients_of(self, trainer_id: str) -> set[str]:
        """Get the ids of clients the trainer actively manages.

        Args:
            trainer_id: The trainer's member id

        Returns:
            Set of client ids, empty when the trainer has no active assignment
        """
        if not trainer_id:
            return set()

        assignments = await self._assignments_for(trainer_id)
        return {
            a.client_id
            for a in assignments
            if a.status == AssignmentStatus.ACTIVE.value and a.client_id
        }

    async def is_assigned(self, trainer_id: str, client_id: str) -> bool:
        """Check whether the trainer has an active assignment to the client."""
        if not client_id:
            return False
        return client_id in await self.active_clients_of(trainer_id)

    async def list_assignments(
        self,
        trainer_id: str,
        active_only: bool = True,
    ) -> list[TrainerClientAssignment]:
        """List the trainer's own assignment rows."""
        assignments = await self._assignments_for(trainer_id)
        if active_only:
            assignments = [a for a in assignments if a.is_active]
        return assignments

    async def assign_client(
        self,
        trainer_id: str,
        client_id: str,
        notes: str | None = None,
    ) -> TrainerClientAssignment:
        """Assign a client to a trainer.

        Idempotent: an existing active assignment for the pair is returned
        unchanged instead of creating a duplicate row.
        """
        if not trainer_id or not client_id:
            raise ValueError("Both trainer_id and client_id are required")

        for assignment in await self._assignments_for(trainer_id):
            if assignment.client_id == client_id and assignment.is_active:
                logger.info("assignment_exists", trainer_id=trainer_id, client_id=client_id)
                return assignment

        assignment = await self.store.create(
            ASSIGNMENTS_COLLECTION,
            {
                "trainer_id": trainer_id,
                "client_id": client_id,
                "status": AssignmentStatus.ACTIVE.value,
                "notes": notes,
            },
        )
        logger.info(
            "assignment_created",
            assignment_id=assignment.id,
            trainer_id=trainer_id,
            client_id=client_id,
        )
        return assignment

    async def deactivate_assignment(self, trainer_id: str, client_id: str) -> int:
        """Revoke the trainer's access to the client.

        Returns:
            Number of assignments moved to inactive (0 if none were active)
        """
        revoked = 0
        for assignment in await self._assignments_for(trainer_id):
            if assignment.client_id == client_id and assignment.is_active:
                await self.store.update_by_id(
                    ASSIGNMENTS_COLLECTION,
                    assignment.id,
                    {"status": AssignmentStatus.INACTIVE.value},
                )
                revoked += 1

        logger.info(
            "assignment_deactivated",
            trainer_id=trainer_id,
            client_id=client_id,
            revoked=revoked,
        )
        return revoked
