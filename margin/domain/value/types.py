"""Domain value objects for Margin.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Union

from pydantic import Field

from margin.domain.value.common import ValueObject


class CommentStatus(str, Enum):
    """Moderation state of a comment."""

    WAITING = "waiting"
    APPROVED = "approved"
    SPAM = "spam"


# Statuses hidden from everyone but administrators
HIDDEN_STATUSES: frozenset[CommentStatus] = frozenset(
    {CommentStatus.WAITING, CommentStatus.SPAM}
)


class CommentSort(str, Enum):
    """Ordering applied to root comments of a page."""

    INSERTED_AT_DESC = "insertedAt_desc"
    INSERTED_AT_ASC = "insertedAt_asc"
    LIKE_DESC = "like_desc"

    @classmethod
    def parse(cls, raw: str | None) -> "CommentSort":
        """Parse a client sort key; anything unrecognised is newest first."""
        if raw == cls.INSERTED_AT_ASC.value:
            return cls.INSERTED_AT_ASC
        if raw == cls.LIKE_DESC.value:
            return cls.LIKE_DESC
        return cls.INSERTED_AT_DESC


class SpamVerdict(str, Enum):
    """Answer from a spam checking service."""

    HAM = "ham"
    SPAM = "spam"


class UserType(str, Enum):
    """Settled account roles."""

    ADMINISTRATOR = "administrator"
    GUEST = "guest"


class PendingVerification(ValueObject):
    """Account awaiting email confirmation.

    Stored as ``verify:<token>:<expiry-millis>`` in the user type column;
    only the persistence mappers deal with that encoding.
    """

    token: str = Field(pattern=r"^\d{4}$")
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(timezone.utc)) >= self.expires_at

    def accepts(self, token: str, now: datetime | None = None) -> bool:
        """Whether ``token`` confirms this registration at ``now``."""
        return token == self.token and not self.is_expired(now)


UserRole = Union[UserType, PendingVerification]

_VERIFY_PREFIX = "verify"


def format_user_role(role: UserRole) -> str:
    """Encode a role for storage."""
    if isinstance(role, PendingVerification):
        expiry_ms = int(role.expires_at.timestamp() * 1000)
        return f"{_VERIFY_PREFIX}:{role.token}:{expiry_ms}"
    return role.value


def parse_user_role(raw: str | None) -> UserRole:
    """Decode a stored role; unknown values fall back to guest."""
    if raw == UserType.ADMINISTRATOR.value:
        return UserType.ADMINISTRATOR
    if raw and raw.startswith(f"{_VERIFY_PREFIX}:"):
        parts = raw.split(":")
        if len(parts) == 3 and parts[1].isdigit() and parts[2].isdigit():
            return PendingVerification(
                token=parts[1],
                expires_at=datetime.fromtimestamp(
                    int(parts[2]) / 1000, tz=timezone.utc
                ),
            )
    return UserType.GUEST
