"""Trainer endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from coachportal.config.database import get_db
from coachportal.core.store import SqlRecordStore
from coachportal.domains.auth.dependencies import CurrentTrainer
from coachportal.domains.trainers.schemas import AssignmentResponse, ManagedClientsResponse
from coachportal.domains.trainers.service import AssignmentService

router = APIRouter()


def get_assignment_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AssignmentService:
    return AssignmentService(SqlRecordStore(db))


Assignments = Annotated[AssignmentService, Depends(get_assignment_service)]


@router.get("/me/clients", response_model=ManagedClientsResponse)
async def list_my_clients(
    current_trainer: CurrentTrainer,
    service: Assignments,
) -> ManagedClientsResponse:
    """List the clients the current trainer is actively assigned to."""
    client_ids = sorted(await service.active_clients_of(current_trainer.member_id))
    return ManagedClientsResponse(
        trainer_id=current_trainer.member_id,
        client_ids=client_ids,
        total=len(client_ids),
    )


@router.get("/me/assignments", response_model=list[AssignmentResponse])
async def list_my_assignments(
    current_trainer: CurrentTrainer,
    service: Assignments,
    active_only: Annotated[bool, Query()] = True,
) -> list[AssignmentResponse]:
    """List the current trainer's assignment rows."""
    assignments = await service.list_assignments(current_trainer.member_id, active_only=active_only)
    return [AssignmentResponse.model_validate(a) for a in assignments]
