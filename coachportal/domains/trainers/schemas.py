"""Trainer schemas for request/response validation."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AssignmentResponse(BaseModel):
    """Trainer-client assignment response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    trainer_id: str
    client_id: str
    status: str
    assignment_date: datetime
    notes: str | None = None


class ManagedClientsResponse(BaseModel):
    """Clients the trainer currently manages."""

    trainer_id: str
    client_ids: list[str]
    total: int
