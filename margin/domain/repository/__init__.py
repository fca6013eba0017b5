"""Repository interfaces for Margin domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from margin.domain.repository.comment import CommentPage, CommentRepository
from margin.domain.repository.unit_of_work import UnitOfWork
from margin.domain.repository.user import UserRepository

__all__ = [
    "CommentPage",
    "CommentRepository",
    "UnitOfWork",
    "UserRepository",
]
