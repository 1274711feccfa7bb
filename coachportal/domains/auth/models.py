"""Actor and role model for access-control decisions."""
import enum
from dataclasses import dataclass


class ActorRole(str, enum.Enum):
    """Roles recognised by the access-control layer."""

    CLIENT = "client"
    TRAINER = "trainer"


def coerce_role(role: "ActorRole | str") -> ActorRole:
    """Return role as an ActorRole, raising ValueError for anything unrecognised."""
    if isinstance(role, ActorRole):
        return role
    return ActorRole(role)


@dataclass(frozen=True)
class Actor:
    """Verified caller of an access-control operation.

    Built per request from identity the gateway already verified; never
    derived from request payload fields.
    """

    member_id: str
    role: ActorRole

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", coerce_role(self.role))

    @property
    def is_trainer(self) -> bool:
        return self.role is ActorRole.TRAINER
