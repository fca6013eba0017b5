"""PostgreSQL repository implementations."""

from margin.persistence.repository.comment import PostgresCommentRepository
from margin.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork
from margin.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresUserRepository",
    "SqlAlchemyUnitOfWork",
]
