"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import asc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from margin.domain.model import User
from margin.domain.repository import UserRepository
from margin.domain.value import UserId, UserType
from margin.persistence.mappers import row_to_user, user_to_dict
from margin.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def count(self) -> int:
        stmt = select(func.count()).select_from(users_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_first_administrator(self) -> Optional[User]:
        """Earliest-created administrator, ties broken by id."""
        stmt = (
            select(users_table)
            .where(users_table.c.type == UserType.ADMINISTRATOR.value)
            .order_by(asc(users_table.c.created_at), asc(users_table.c.id))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert a new user or update an existing one."""
        values = user_to_dict(user)
        if user.id is None:
            stmt = users_table.insert().values(**values).returning(users_table)
        else:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**values)
                .returning(users_table)
            )

        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_user(dict(row)) if row else user
