"""Central import of all domain models.

This file imports all models to ensure they are registered with SQLAlchemy's
metadata before any database operations (like creating tables or migrations).
"""

# Trainers domain
from coachportal.domains.trainers.models import (
    ASSIGNMENTS_COLLECTION,
    AssignmentStatus,
    TrainerClientAssignment,
)

# Workouts domain
from coachportal.domains.workouts.models import (
    WORKOUTS_COLLECTION,
    ClientAssignedWorkout,
    WorkoutStatus,
)

__all__ = [
    "ASSIGNMENTS_COLLECTION",
    "AssignmentStatus",
    "TrainerClientAssignment",
    "WORKOUTS_COLLECTION",
    "ClientAssignedWorkout",
    "WorkoutStatus",
]
