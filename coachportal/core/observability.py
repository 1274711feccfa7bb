"""
Observability module for the Coach Portal API.

Provides error tracking and performance monitoring using GlitchTip
(open-source, Sentry-compatible).
"""
from typing import TYPE_CHECKING

import sentry_sdk
import structlog
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from coachportal.config.settings import settings

if TYPE_CHECKING:
    from coachportal.domains.auth.models import Actor

logger = structlog.get_logger(__name__)


def init_observability() -> bool:
    """Initialize GlitchTip/Sentry observability. Returns True when enabled."""
    if not settings.GLITCHTIP_DSN:
        logger.info("observability_disabled", reason="no DSN configured")
        return False

    traces_sample_rate = settings.GLITCHTIP_TRACES_SAMPLE_RATE
    if settings.is_development:
        traces_sample_rate = 1.0

    sentry_sdk.init(
        dsn=settings.GLITCHTIP_DSN,
        environment=settings.APP_ENV,
        release=f"coachportal-api@{settings.APP_VERSION}",
        traces_sample_rate=traces_sample_rate,
        send_default_pii=False,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
            SqlalchemyIntegration(),
        ],
        before_send=_before_send,
    )

    logger.info("observability_initialized", environment=settings.APP_ENV)
    return True


def _before_send(event: dict, hint: dict) -> dict | None:
    """Filter events before sending to GlitchTip."""
    if "exc_info" in hint:
        _, exc_value, _ = hint["exc_info"]
        exc_message = str(exc_value).lower()

        # Transient connection errors are not actionable
        if any(
            msg in exc_message
            for msg in ["connection refused", "connection reset", "broken pipe"]
        ):
            return None

    return event


def set_actor_context(actor: "Actor") -> None:
    """Tag error reports with the current actor."""
    sentry_sdk.set_user({"id": actor.member_id})
    sentry_sdk.set_tag("actor_role", actor.role.value)
