"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional

from margin.domain.model.comment import Comment
from margin.domain.repository.comment import CommentPage, CommentRepository
from margin.domain.value import HIDDEN_STATUSES, CommentId, CommentSort, CommentStatus


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    def _visible(self, comment: Comment, include_hidden: bool) -> bool:
        return include_hidden or comment.status not in HIDDEN_STATUSES

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_roots(
        self,
        path: str,
        sort: CommentSort,
        page: int,
        page_size: int,
        include_hidden: bool = False,
    ) -> CommentPage:
        """Find one page of root comments on a path."""
        roots = [
            c
            for c in self._comments.values()
            if path in c.url and c.pid is None and self._visible(c, include_hidden)
        ]

        if sort is CommentSort.INSERTED_AT_ASC:
            roots.sort(key=lambda c: (c.inserted_at, c.id))
        elif sort is CommentSort.LIKE_DESC:
            roots.sort(key=lambda c: (c.like, c.inserted_at, c.id), reverse=True)
        else:
            roots.sort(key=lambda c: (c.inserted_at, c.id), reverse=True)

        offset = (page - 1) * page_size
        return CommentPage(items=roots[offset : offset + page_size], total=len(roots))

    async def find_children(
        self,
        path: str,
        root_id: CommentId,
        include_hidden: bool = False,
    ) -> list[Comment]:
        """Find replies to a root comment, oldest first."""
        children = [
            c
            for c in self._comments.values()
            if path in c.url and c.pid == root_id and self._visible(c, include_hidden)
        ]
        children.sort(key=lambda c: (c.inserted_at, c.id))
        return children

    async def count_approved_by_author(
        self, nick: Optional[str], mail: Optional[str]
    ) -> int:
        return sum(
            1
            for c in self._comments.values()
            if c.nick == nick and c.mail == mail and c.status is CommentStatus.APPROVED
        )

    async def find_duplicate(
        self,
        url: str,
        mail: Optional[str],
        nick: Optional[str],
        link: Optional[str],
        comment: str,
    ) -> Optional[Comment]:
        for existing in self._comments.values():
            if existing.same_content(url, mail, nick, link, comment):
                return existing
        return None

    async def find_for_admin(
        self,
        page: int,
        page_size: int,
        status: Optional[CommentStatus] = None,
        keyword: Optional[str] = None,
        mail: Optional[str] = None,
    ) -> CommentPage:
        matches = [
            c
            for c in self._comments.values()
            if (status is None or c.status is status)
            and (not keyword or keyword in c.comment)
            and (mail is None or c.mail == mail)
        ]
        matches.sort(key=lambda c: (c.inserted_at, c.id), reverse=True)
        offset = (page - 1) * page_size
        return CommentPage(items=matches[offset : offset + page_size], total=len(matches))

    async def count_by_status(
        self, status: CommentStatus, mail: Optional[str] = None
    ) -> int:
        return sum(
            1
            for c in self._comments.values()
            if c.status is status and (mail is None or c.mail == mail)
        )

    async def save(self, comment: Comment) -> Comment:
        """Insert or update a comment, assigning an id on insert."""
        if comment.id is None:
            comment = comment.evolve(id=CommentId(next(self._ids)))
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)
