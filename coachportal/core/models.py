"""Shared SQLAlchemy mixins."""
import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column


def generate_id() -> str:
    return str(uuid.uuid4())


class StringIDMixin:
    """Primary key stored as an opaque string.

    Records migrated from the hosted record store keep their original ids,
    which are not guaranteed to be UUIDs.
    """

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
