"""Requester identity for a single request."""

from enum import Enum
from typing import Optional

from margin.domain.model.common import DomainModel
from margin.domain.model.user import User


class ActorKind(str, Enum):
    ANONYMOUS = "anonymous"
    GUEST = "guest"
    ADMINISTRATOR = "administrator"


class Actor(DomainModel):
    """Who is making the request.

    Anonymous actors carry no user. Guests and administrators carry the
    account their credential resolved to.
    """

    kind: ActorKind = ActorKind.ANONYMOUS
    user: Optional[User] = None

    @classmethod
    def anonymous(cls) -> "Actor":
        return cls()

    @classmethod
    def for_user(cls, user: User) -> "Actor":
        kind = ActorKind.ADMINISTRATOR if user.is_administrator else ActorKind.GUEST
        return cls(kind=kind, user=user)

    @property
    def is_admin(self) -> bool:
        return self.kind is ActorKind.ADMINISTRATOR

    @property
    def is_anonymous(self) -> bool:
        return self.kind is ActorKind.ANONYMOUS

    def owns(self, user_id: int | None) -> bool:
        """Whether the comment owner ``user_id`` is this actor's account."""
        return (
            user_id is not None
            and self.user is not None
            and self.user.id == user_id
        )
