"""Client assigned workout models."""
import enum

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from coachportal.config.database import Base
from coachportal.core.models import StringIDMixin, TimestampMixin

WORKOUTS_COLLECTION = "clientassignedworkouts"


class WorkoutStatus(str, enum.Enum):
    """Lifecycle status of an assigned exercise."""

    ACTIVE = "active"
    COMPLETED = "completed"
    PENDING = "pending"


class ClientAssignedWorkout(Base, StringIDMixin, TimestampMixin):
    """One prescribed exercise instance belonging to a single client."""

    __tablename__ = WORKOUTS_COLLECTION

    # Tenant key. Nullable only because legacy rows imported from the hosted
    # record store may lack it; such rows are never visible to clients.
    client_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    # Author of the programming, informational only
    trainer_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)

    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight_or_resistance: Mapped[str | None] = mapped_column(String(100), nullable=True)
    tempo: Mapped[str | None] = mapped_column(String(20), nullable=True)
    rest_time_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    exercise_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    status: Mapped[str] = mapped_column(
        String(20), default=WorkoutStatus.PENDING.value, nullable=False
    )
    week_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    workout_slot: Mapped[int | None] = mapped_column(Integer, nullable=True)  # day within the week
    trainer_comment: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<ClientAssignedWorkout {self.id} client={self.client_id} exercise={self.exercise_name}>"
