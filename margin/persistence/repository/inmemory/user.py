"""In-memory user repository for testing."""

from itertools import count
from typing import Optional

from margin.domain.model.user import User
from margin.domain.repository.user import UserRepository
from margin.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids = count(1)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def count(self) -> int:
        return len(self._users)

    async def find_first_administrator(self) -> Optional[User]:
        admins = [u for u in self._users.values() if u.is_administrator]
        if not admins:
            return None
        return min(admins, key=lambda u: (u.created_at, u.id))

    async def save(self, user: User) -> User:
        """Insert or update a user, assigning an id on insert."""
        if user.id is None:
            user = user.evolve(id=UserId(next(self._ids)))
        self._users[user.id] = user
        return user
