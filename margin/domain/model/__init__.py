"""Domain model entities for Margin."""

from margin.domain.model.actor import Actor, ActorKind
from margin.domain.model.comment import Comment
from margin.domain.model.user import User

__all__ = [
    "Actor",
    "ActorKind",
    "Comment",
    "User",
]
