"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from margin.domain.model.user import User
from margin.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count registered accounts, pending ones included."""
        pass

    @abstractmethod
    async def find_first_administrator(self) -> Optional[User]:
        """Find the earliest-created administrator account."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (insert when it has no id yet, else update).

        Returns:
            The stored user, with its id assigned
        """
        pass
