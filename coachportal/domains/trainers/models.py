"""Trainer domain models."""
import enum
from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from coachportal.config.database import Base
from coachportal.core.models import StringIDMixin, TimestampMixin

ASSIGNMENTS_COLLECTION = "trainerclientassignments"


class AssignmentStatus(str, enum.Enum):
    """Trainer-client assignment status. Only ACTIVE confers access."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class TrainerClientAssignment(Base, StringIDMixin, TimestampMixin):
    """Standing, revocable grant of a trainer's access to one client's data."""

    __tablename__ = ASSIGNMENTS_COLLECTION

    trainer_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    client_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20), default=AssignmentStatus.ACTIVE.value, nullable=False
    )
    assignment_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    @property
    def is_active(self) -> bool:
        return self.status == AssignmentStatus.ACTIVE.value

    def __repr__(self) -> str:
        return f"<TrainerClientAssignment trainer={self.trainer_id} client={self.client_id} status={self.status}>"
