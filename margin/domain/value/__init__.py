"""Domain value objects for Margin."""

from margin.domain.value.identifiers import CommentId, UserId
from margin.domain.value.types import (
    HIDDEN_STATUSES,
    CommentSort,
    CommentStatus,
    PendingVerification,
    SpamVerdict,
    UserRole,
    UserType,
    format_user_role,
    parse_user_role,
)

__all__ = [
    # Identifiers
    "CommentId",
    "UserId",
    # Types
    "CommentSort",
    "CommentStatus",
    "HIDDEN_STATUSES",
    "PendingVerification",
    "SpamVerdict",
    "UserRole",
    "UserType",
    "format_user_role",
    "parse_user_role",
]
