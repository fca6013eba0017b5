"""Comment domain service."""

from datetime import datetime, timezone
from typing import Any

import logfire

from margin.config import CommentSettings
from margin.domain.error import NotFoundError
from margin.domain.model import Comment
from margin.domain.repository import CommentPage, CommentRepository
from margin.domain.value import CommentId, CommentSort, CommentStatus, UserId

from .base import Service
from .trust_level import get_level, parse_thresholds


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            settings: Comment settings (trust level thresholds)
        """
        self.comment_repository = comment_repository
        self.settings = settings

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def list_roots(
        self,
        path: str,
        sort: CommentSort,
        page: int,
        page_size: int,
        include_hidden: bool = False,
    ) -> CommentPage:
        with logfire.span(
            "comment_service.list_roots",
            path=path,
            page=page,
            page_size=page_size,
            sort=sort.value,
            include_hidden=include_hidden,
        ):
            result = await self.comment_repository.find_roots(
                path=path,
                sort=sort,
                page=page,
                page_size=page_size,
                include_hidden=include_hidden,
            )
            logfire.info(
                "Root comments retrieved",
                path=path,
                count=len(result.items),
                total=result.total,
            )
            return result

    async def list_children(
        self, path: str, root_id: CommentId, include_hidden: bool = False
    ) -> list[Comment]:
        return await self.comment_repository.find_children(
            path=path, root_id=root_id, include_hidden=include_hidden
        )

    async def author_level(self, nick: str | None, mail: str | None) -> int:
        """Trust level of the author identified by (nick, mail)."""
        count = await self.comment_repository.count_approved_by_author(nick, mail)
        return get_level(count, parse_thresholds(self.settings.levels))

    async def is_duplicate(
        self,
        url: str,
        mail: str | None,
        nick: str | None,
        link: str | None,
        comment: str,
    ) -> bool:
        existing = await self.comment_repository.find_duplicate(
            url=url, mail=mail, nick=nick, link=link, comment=comment
        )
        return existing is not None

    async def create_comment(
        self,
        url: str,
        comment: str,
        status: CommentStatus,
        nick: str | None = None,
        mail: str | None = None,
        link: str | None = None,
        ip: str | None = None,
        ua: str | None = None,
        user_id: UserId | None = None,
        pid: CommentId | None = None,
    ) -> Comment:
        """Create a root comment or a reply.

        A reply's ``rid`` is always derived from its parent so it points at
        the thread root, whatever the client sent.

        Raises:
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            url=url,
            pid=pid,
            status=status.value,
            user_id=user_id,
        ):
            rid = None
            if pid is not None:
                parent = await self.get_comment_by_id(pid)
                rid = parent.rid if parent.rid is not None else parent.id

            now = datetime.now(timezone.utc)
            saved = await self.comment_repository.save(
                Comment(
                    user_id=user_id,
                    comment=comment,
                    url=url,
                    nick=nick,
                    mail=mail,
                    link=link,
                    ip=ip,
                    ua=ua,
                    pid=pid,
                    rid=rid,
                    status=status,
                    created_at=now,
                    updated_at=now,
                    inserted_at=now,
                )
            )
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                url=url,
                status=status.value,
                is_reply=pid is not None,
            )
            return saved

    async def update_comment(
        self, comment: Comment, changes: dict[str, Any]
    ) -> Comment:
        """Apply field changes to a comment. ``inserted_at`` never changes."""
        with logfire.span(
            "comment_service.update_comment",
            comment_id=comment.id,
            fields=sorted(changes),
        ):
            changes = {k: v for k, v in changes.items() if k != "inserted_at"}
            updated = await self.comment_repository.save(
                comment.evolve(**changes, updated_at=datetime.now(timezone.utc))
            )
            logfire.info("Comment updated", comment_id=comment.id, fields=sorted(changes))
            return updated

    async def toggle_like(self, comment_id: CommentId, liked: bool) -> Comment:
        """Add or take back one like (never below zero)."""
        with logfire.span("comment_service.toggle_like", comment_id=comment_id, liked=liked):
            comment = await self.get_comment_by_id(comment_id)
            like = comment.like + 1 if liked else max(comment.like - 1, 0)
            return await self.comment_repository.save(comment.evolve(like=like))

    async def delete_comment(self, comment_id: CommentId) -> None:
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)

    async def list_for_admin(
        self,
        page: int,
        page_size: int,
        status: CommentStatus | None = None,
        keyword: str | None = None,
        mail: str | None = None,
    ) -> CommentPage:
        with logfire.span(
            "comment_service.list_for_admin",
            page=page,
            status=status.value if status else None,
            keyword=keyword,
        ):
            return await self.comment_repository.find_for_admin(
                page=page,
                page_size=page_size,
                status=status,
                keyword=keyword,
                mail=mail,
            )

    async def count_by_status(
        self, status: CommentStatus, mail: str | None = None
    ) -> int:
        return await self.comment_repository.count_by_status(status, mail=mail)
