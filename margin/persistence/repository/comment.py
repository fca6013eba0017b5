"""PostgreSQL implementation of Comment repository."""

from typing import Any, List, Optional

from sqlalchemy import ColumnElement, asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from margin.domain.model import Comment
from margin.domain.repository import CommentPage, CommentRepository
from margin.domain.value import HIDDEN_STATUSES, CommentId, CommentSort, CommentStatus
from margin.persistence.mappers import comment_to_dict, row_to_comment
from margin.persistence.tables import comments_table

_c = comments_table.c


def _equals_or_null(column: Any, value: Optional[str]) -> ColumnElement[bool]:
    """Null-safe equality, so a missing nick/mail only matches missing values."""
    return column.is_(None) if value is None else column == value


def _visibility(include_hidden: bool) -> list[ColumnElement[bool]]:
    if include_hidden:
        return []
    return [_c.status.notin_([status.value for status in HIDDEN_STATUSES])]


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(_c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_roots(
        self,
        path: str,
        sort: CommentSort,
        page: int,
        page_size: int,
        include_hidden: bool = False,
    ) -> CommentPage:
        """Find one page of root comments on a path."""
        conditions = [
            _c.url.contains(path, autoescape=True),
            _c.pid.is_(None),
            *_visibility(include_hidden),
        ]

        if sort is CommentSort.INSERTED_AT_ASC:
            ordering = [asc(_c.inserted_at), asc(_c.id)]
        elif sort is CommentSort.LIKE_DESC:
            ordering = [desc(_c.like), desc(_c.inserted_at), desc(_c.id)]
        else:
            ordering = [desc(_c.inserted_at), desc(_c.id)]

        return await self._paginate(conditions, ordering, page, page_size)

    async def find_children(
        self,
        path: str,
        root_id: CommentId,
        include_hidden: bool = False,
    ) -> List[Comment]:
        """Find replies to a root comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(
                _c.url.contains(path, autoescape=True),
                _c.pid == root_id,
                *_visibility(include_hidden),
            )
            .order_by(asc(_c.inserted_at), asc(_c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_approved_by_author(
        self, nick: Optional[str], mail: Optional[str]
    ) -> int:
        """Count approved comments under a (nick, mail) pair."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(
                _equals_or_null(_c.nick, nick),
                _equals_or_null(_c.mail, mail),
                _c.status == CommentStatus.APPROVED.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_duplicate(
        self,
        url: str,
        mail: Optional[str],
        nick: Optional[str],
        link: Optional[str],
        comment: str,
    ) -> Optional[Comment]:
        """Find a comment identical to a submission."""
        stmt = (
            select(comments_table)
            .where(
                _c.url == url,
                _equals_or_null(_c.mail, mail),
                _equals_or_null(_c.nick, nick),
                _equals_or_null(_c.link, link),
                _c.comment == comment,
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_for_admin(
        self,
        page: int,
        page_size: int,
        status: Optional[CommentStatus] = None,
        keyword: Optional[str] = None,
        mail: Optional[str] = None,
    ) -> CommentPage:
        """Find comments for the moderation list, newest first."""
        conditions: list[ColumnElement[bool]] = []
        if status is not None:
            conditions.append(_c.status == status.value)
        if keyword:
            conditions.append(_c.comment.contains(keyword, autoescape=True))
        if mail is not None:
            conditions.append(_c.mail == mail)

        return await self._paginate(
            conditions, [desc(_c.inserted_at), desc(_c.id)], page, page_size
        )

    async def count_by_status(
        self, status: CommentStatus, mail: Optional[str] = None
    ) -> int:
        """Count comments in a moderation state."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(_c.status == status.value)
        )
        if mail is not None:
            stmt = stmt.where(_c.mail == mail)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment or update an existing one."""
        values = comment_to_dict(comment)
        if comment.id is None:
            stmt = comments_table.insert().values(**values).returning(comments_table)
        else:
            stmt = (
                comments_table.update()
                .where(_c.id == comment.id)
                .values(**values)
                .returning(comments_table)
            )

        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_comment(dict(row)) if row else comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(_c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def _paginate(
        self,
        conditions: list[ColumnElement[bool]],
        ordering: list[Any],
        page: int,
        page_size: int,
    ) -> CommentPage:
        count_stmt = select(func.count()).select_from(comments_table).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(comments_table)
            .where(*conditions)
            .order_by(*ordering)
            .limit(page_size)
            .offset((page - 1) * page_size)
        )
        result = await self.session.execute(stmt)
        items = [row_to_comment(dict(row)) for row in result.mappings().all()]
        return CommentPage(items=items, total=total)
