"""Comment entity.

Comments are page-scoped: ``url`` is the content path they belong to.
Threading is two level. A root comment has neither ``pid`` nor ``rid``;
a reply points at its parent (``pid``) and at the thread root (``rid``).
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from margin.domain.model.common import DomainModel
from margin.domain.value import CommentId, CommentStatus, UserId


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Comment(DomainModel):
    """Comment entity.

    ``id`` is assigned by the repository on first save.
    """

    id: Optional[CommentId] = None
    user_id: Optional[UserId] = None
    comment: str = Field(min_length=1, max_length=65535)
    url: str = Field(min_length=1)
    nick: Optional[str] = None
    mail: Optional[str] = None
    link: Optional[str] = None
    ip: Optional[str] = None
    ua: Optional[str] = None
    pid: Optional[CommentId] = None
    rid: Optional[CommentId] = None
    status: CommentStatus = CommentStatus.APPROVED
    like: int = Field(default=0, ge=0)
    sticky: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    inserted_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def check_thread_links(self) -> "Comment":
        """A comment is either a root (no pid, no rid) or a reply (both set)."""
        if (self.pid is None) != (self.rid is None):
            raise ValueError("pid and rid must both be set for replies or both be empty")
        return self

    @property
    def is_root(self) -> bool:
        return self.pid is None

    def same_content(
        self,
        url: str,
        mail: str | None,
        nick: str | None,
        link: str | None,
        comment: str,
    ) -> bool:
        """Whether this comment matches a submission field for field."""
        return (
            self.url == url
            and self.mail == mail
            and self.nick == nick
            and self.link == link
            and self.comment == comment
        )
