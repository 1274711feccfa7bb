"""Workout access service.

Enforces who may read or change a client's assigned workouts:
- Clients can only read and update their own workouts
- Trainers can only read and update workouts of clients they are actively
  assigned to (the bulk listing also includes records they authored)

Every operation fetches the full collection from the store and filters here,
ownership first and content filters second. No tenant predicate is pushed
into the store, so a missing or forged query parameter cannot widen a result.
"""
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from coachportal.core.store import RecordStore
from coachportal.domains.auth.models import ActorRole, coerce_role
from coachportal.domains.trainers.service import AssignmentService
from coachportal.domains.workouts.exceptions import (
    CLIENT_READ_DENIED,
    CLIENT_WRITE_DENIED,
    TRAINER_NOT_ASSIGNED,
    UnauthorizedError,
    WorkoutNotFoundError,
)
from coachportal.domains.workouts.models import WORKOUTS_COLLECTION, ClientAssignedWorkout
from coachportal.domains.workouts.schemas import WorkoutFilters, WorkoutPatch

logger = structlog.get_logger(__name__)


def _owned_by(workout: ClientAssignedWorkout, client_id: str) -> bool:
    # Records without an owner never match, whatever the caller passes
    return bool(workout.client_id) and workout.client_id == client_id


def apply_content_filters(
    workouts: Iterable[ClientAssignedWorkout],
    filters: WorkoutFilters | None,
) -> list[ClientAssignedWorkout]:
    """Narrow an already ownership-filtered list by status, then week number."""
    result = list(workouts)
    if filters is None:
        return result
    if filters.status is not None:
        result = [w for w in result if w.status == filters.status.value]
    if filters.week_number is not None:
        result = [w for w in result if w.week_number == filters.week_number]
    return result


class WorkoutAccessService:
    """Service for access-controlled reads and writes of client workouts."""

    def __init__(self, store: RecordStore, assignments: AssignmentService | None = None):
        self.store = store
        self.assignments = assignments or AssignmentService(store)

    def _deny(self, message: str, **context: Any) -> UnauthorizedError:
        logger.warning("workout_access_denied", reason=message, **context)
        return UnauthorizedError(message)

    async def list_workouts(
        self,
        client_id: str,
        actor_id: str,
        actor_role: ActorRole | str,
        filters: WorkoutFilters | None = None,
    ) -> list[ClientAssignedWorkout]:
        """List one client's workouts as the given actor.

        Args:
            client_id: The client whose workouts are requested
            actor_id: Verified member id of the caller
            actor_role: Verified role of the caller
            filters: Optional status / week number filters

        Returns:
            The client's workouts, empty if there are none

        Raises:
            UnauthorizedError: A client named another client, or a trainer
                named a client they are not actively assigned to
        """
        role = coerce_role(actor_role)

        if role is ActorRole.CLIENT:
            if client_id != actor_id:
                raise self._deny(
                    CLIENT_READ_DENIED, actor_id=actor_id, role=role.value, client_id=client_id
                )
        elif not await self.assignments.is_assigned(actor_id, client_id):
            raise self._deny(
                TRAINER_NOT_ASSIGNED, actor_id=actor_id, role=role.value, client_id=client_id
            )

        workouts = await self.store.fetch_all(WORKOUTS_COLLECTION)
        owned = [w for w in workouts if _owned_by(w, client_id)]
        result = apply_content_filters(owned, filters)

        logger.debug(
            "workouts_listed",
            actor_id=actor_id,
            role=role.value,
            client_id=client_id,
            count=len(result),
        )
        return result

    async def list_authorized_workouts(
        self,
        actor_id: str,
        actor_role: ActorRole | str,
        filters: WorkoutFilters | None = None,
    ) -> list[ClientAssignedWorkout]:
        """List every workout visible to the actor.

        Clients get their own workouts. Trainers get workouts of actively
        assigned clients plus any workout they authored. A missing actor id
        yields an empty list.
        """
        role = coerce_role(actor_role)

        if not actor_id:
            logger.info("workouts_listed_without_actor", role=role.value)
            return []

        if role is ActorRole.CLIENT:
            return await self.list_workouts(actor_id, actor_id, role, filters)

        managed = await self.assignments.active_clients_of(actor_id)
        workouts = await self.store.fetch_all(WORKOUTS_COLLECTION)
        visible = [
            w for w in workouts
            if w.trainer_id == actor_id or (w.client_id and w.client_id in managed)
        ]
        result = apply_content_filters(visible, filters)

        logger.debug(
            "trainer_workouts_listed",
            actor_id=actor_id,
            managed_clients=len(managed),
            count=len(result),
        )
        return result

    async def _can_access(self, workout: ClientAssignedWorkout, actor_id: str, role: ActorRole) -> bool:
        if not workout.client_id or not actor_id:
            return False
        if role is ActorRole.CLIENT:
            return workout.client_id == actor_id
        return await self.assignments.is_assigned(actor_id, workout.client_id)

    async def get_workout(
        self,
        workout_id: str,
        actor_id: str,
        actor_role: ActorRole | str,
    ) -> ClientAssignedWorkout | None:
        """Get a single workout if the actor may see it.

        Returns None both when the workout does not exist and when the actor
        is not allowed to see it, so the two cases cannot be told apart.
        """
        role = coerce_role(actor_role)

        workout = await self.store.fetch_by_id(WORKOUTS_COLLECTION, workout_id)
        if workout is None:
            return None

        if not await self._can_access(workout, actor_id, role):
            logger.info("workout_hidden", actor_id=actor_id, role=role.value, workout_id=workout_id)
            return None

        return workout

    async def update_workout(
        self,
        workout_id: str,
        patch: WorkoutPatch | Mapping[str, Any],
        actor_id: str,
        actor_role: ActorRole | str,
    ) -> ClientAssignedWorkout:
        """Apply a patch to a workout the actor may change.

        Raises:
            WorkoutNotFoundError: No workout with this id
            UnauthorizedError: The actor does not own, or is not assigned to
                the owner of, the workout
        """
        role = coerce_role(actor_role)
        if not isinstance(patch, WorkoutPatch):
            patch = WorkoutPatch.model_validate(patch)

        workout = await self.store.fetch_by_id(WORKOUTS_COLLECTION, workout_id)
        if workout is None:
            raise WorkoutNotFoundError(workout_id)

        if not await self._can_access(workout, actor_id, role):
            message = CLIENT_WRITE_DENIED if role is ActorRole.CLIENT else TRAINER_NOT_ASSIGNED
            raise self._deny(message, actor_id=actor_id, role=role.value, workout_id=workout_id)

        values = patch.to_patch()
        updated = await self.store.update_by_id(WORKOUTS_COLLECTION, workout_id, values)
        logger.info(
            "workout_updated",
            actor_id=actor_id,
            role=role.value,
            workout_id=workout_id,
            fields=sorted(values),
        )
        return updated
