"""Comment repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from margin.domain.model.comment import Comment
from margin.domain.value import CommentId, CommentSort, CommentStatus


@dataclass(frozen=True)
class CommentPage:
    """One page of comments plus the size of the whole result set."""

    items: List[Comment] = field(default_factory=list)
    total: int = 0


class CommentRepository(ABC):
    """Repository for Comment entity.

    Path matching is substring containment on the stored ``url``.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_roots(
        self,
        path: str,
        sort: CommentSort,
        page: int,
        page_size: int,
        include_hidden: bool = False,
    ) -> CommentPage:
        """Find one page of root comments on a path.

        Args:
            path: Content path (matched by containment)
            sort: Root ordering
            page: 1-based page number
            page_size: Items per page
            include_hidden: Whether waiting and spam comments are included

        Returns:
            The requested page and the total root count
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        path: str,
        root_id: CommentId,
        include_hidden: bool = False,
    ) -> List[Comment]:
        """Find replies whose parent is ``root_id``, oldest first."""
        pass

    @abstractmethod
    async def count_approved_by_author(
        self, nick: Optional[str], mail: Optional[str]
    ) -> int:
        """Count approved comments posted under this (nick, mail) pair."""
        pass

    @abstractmethod
    async def find_duplicate(
        self,
        url: str,
        mail: Optional[str],
        nick: Optional[str],
        link: Optional[str],
        comment: str,
    ) -> Optional[Comment]:
        """Find an existing comment identical to a submission."""
        pass

    @abstractmethod
    async def find_for_admin(
        self,
        page: int,
        page_size: int,
        status: Optional[CommentStatus] = None,
        keyword: Optional[str] = None,
        mail: Optional[str] = None,
    ) -> CommentPage:
        """Find comments across all pages for moderation, newest first.

        Args:
            page: 1-based page number
            page_size: Items per page
            status: Restrict to one moderation state
            keyword: Substring the content must contain
            mail: Restrict to comments left under this address

        Returns:
            The requested page and the total match count
        """
        pass

    @abstractmethod
    async def count_by_status(
        self, status: CommentStatus, mail: Optional[str] = None
    ) -> int:
        """Count comments in a moderation state."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (insert when it has no id yet, else update).

        Returns:
            The stored comment, with its id assigned
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        pass
