"""Client assigned workout endpoints."""
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from coachportal.config.database import get_db
from coachportal.core.store import SqlRecordStore
from coachportal.domains.auth.dependencies import CurrentActor
from coachportal.domains.workouts.exceptions import UnauthorizedError, WorkoutNotFoundError
from coachportal.domains.workouts.models import WorkoutStatus
from coachportal.domains.workouts.schemas import WorkoutFilters, WorkoutPatch, WorkoutResponse
from coachportal.domains.workouts.service import WorkoutAccessService

logger = structlog.get_logger(__name__)

router = APIRouter()

WORKOUT_NOT_FOUND = "Workout not found"


def get_workout_access_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WorkoutAccessService:
    return WorkoutAccessService(SqlRecordStore(db))


WorkoutAccess = Annotated[WorkoutAccessService, Depends(get_workout_access_service)]


def content_filters(
    status_filter: Annotated[WorkoutStatus | None, Query(alias="status")] = None,
    week_number: Annotated[int | None, Query(ge=1)] = None,
) -> WorkoutFilters:
    return WorkoutFilters(status=status_filter, week_number=week_number)


Filters = Annotated[WorkoutFilters, Depends(content_filters)]


@router.get("", response_model=list[WorkoutResponse])
async def list_my_workouts(
    current_actor: CurrentActor,
    service: WorkoutAccess,
    filters: Filters,
) -> list[WorkoutResponse]:
    """List every workout visible to the current member."""
    workouts = await service.list_authorized_workouts(
        current_actor.member_id,
        current_actor.role,
        filters,
    )
    return [WorkoutResponse.model_validate(w) for w in workouts]


@router.get("/clients/{client_id}", response_model=list[WorkoutResponse])
async def list_client_workouts(
    client_id: str,
    current_actor: CurrentActor,
    service: WorkoutAccess,
    filters: Filters,
) -> list[WorkoutResponse]:
    """List one client's workouts."""
    try:
        workouts = await service.list_workouts(
            client_id,
            current_actor.member_id,
            current_actor.role,
            filters,
        )
    except UnauthorizedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    return [WorkoutResponse.model_validate(w) for w in workouts]


@router.get("/{workout_id}", response_model=WorkoutResponse)
async def get_workout(
    workout_id: str,
    current_actor: CurrentActor,
    service: WorkoutAccess,
) -> WorkoutResponse:
    """Get a workout by ID."""
    workout = await service.get_workout(workout_id, current_actor.member_id, current_actor.role)
    if workout is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=WORKOUT_NOT_FOUND)
    return WorkoutResponse.model_validate(workout)


@router.patch("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: str,
    request: WorkoutPatch,
    current_actor: CurrentActor,
    service: WorkoutAccess,
) -> WorkoutResponse:
    """Update a workout (completion by the client, comments by the trainer)."""
    try:
        workout = await service.update_workout(
            workout_id,
            request,
            current_actor.member_id,
            current_actor.role,
        )
    except WorkoutNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=WORKOUT_NOT_FOUND) from e
    except UnauthorizedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except SQLAlchemyError as e:
        logger.error("workout_update_failed", workout_id=workout_id, error=str(e), type=type(e).__name__, exc_info=True)
        raise

    return WorkoutResponse.model_validate(workout)
