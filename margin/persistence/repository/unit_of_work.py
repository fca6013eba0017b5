"""SQLAlchemy implementation of UnitOfWork."""

from sqlalchemy.ext.asyncio import AsyncSession

from margin.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the request's shared session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
