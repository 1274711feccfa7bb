"""Shared identifiers and helpers for the test suite."""
from coachportal.config.settings import settings

CLIENT_A = "client-a@example.com"
CLIENT_B = "client-b@example.com"
TRAINER_1 = "trainer-1@example.com"
TRAINER_2 = "trainer-2@example.com"


def actor_headers(member_id: str, role: str) -> dict[str, str]:
    """Identity headers as forwarded by the authenticating gateway."""
    return {
        settings.MEMBER_ID_HEADER: member_id,
        settings.MEMBER_ROLE_HEADER: role,
    }
