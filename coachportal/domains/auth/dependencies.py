"""FastAPI dependencies resolving the current actor.

Authentication happens in the gateway in front of this service. The gateway
forwards the verified member id and role in dedicated headers; nothing else
in the request is trusted for identity.
"""
from typing import Annotated

import structlog
from fastapi import Depends, HTTPException, Request, status

from coachportal.config.settings import settings
from coachportal.core.observability import set_actor_context
from coachportal.domains.auth.models import Actor, ActorRole, coerce_role

logger = structlog.get_logger(__name__)


async def get_current_actor(request: Request) -> Actor:
    """Build the Actor from the gateway identity headers."""
    member_id = (request.headers.get(settings.MEMBER_ID_HEADER) or "").strip()
    raw_role = (request.headers.get(settings.MEMBER_ROLE_HEADER) or "").strip().lower()

    if not member_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        role = coerce_role(raw_role)
    except ValueError:
        logger.warning("unrecognized_actor_role", member_id=member_id, role=raw_role)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unrecognized role",
        ) from None

    actor = Actor(member_id=member_id, role=role)
    set_actor_context(actor)
    return actor


async def get_current_trainer(actor: Annotated[Actor, Depends(get_current_actor)]) -> Actor:
    """Require the current actor to be a trainer."""
    if actor.role is not ActorRole.TRAINER:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Trainer role required",
        )
    return actor


CurrentActor = Annotated[Actor, Depends(get_current_actor)]
CurrentTrainer = Annotated[Actor, Depends(get_current_trainer)]
