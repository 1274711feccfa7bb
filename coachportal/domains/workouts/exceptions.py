"""Workout access errors."""


class WorkoutAccessError(Exception):
    """Base exception for workout access-control errors."""

    pass


class UnauthorizedError(WorkoutAccessError):
    """Actor does not satisfy the ownership or assignment rule for a named target."""

    pass


class WorkoutNotFoundError(WorkoutAccessError):
    """Workout targeted by a write does not exist."""

    def __init__(self, workout_id: str):
        super().__init__(f"Workout not found: {workout_id}")
        self.workout_id = workout_id


CLIENT_READ_DENIED = "Unauthorized: Clients can only access their own workouts"
CLIENT_WRITE_DENIED = "Unauthorized: Clients can only update their own workouts"
TRAINER_NOT_ASSIGNED = "Unauthorized: Trainer is not assigned to this client"
