"""User aggregate root.

Accounts are keyed by email. The first account ever registered becomes
the site administrator.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from margin.domain.model.common import DomainModel
from margin.domain.model.comment import utcnow
from margin.domain.value import PendingVerification, UserId, UserRole, UserType


class User(DomainModel):
    """User aggregate root."""

    id: Optional[UserId] = None
    display_name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    password: str  # bcrypt hash
    role: UserRole = UserType.GUEST
    label: Optional[str] = None
    url: Optional[str] = None
    avatar: Optional[str] = None
    two_factor_secret: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_administrator(self) -> bool:
        return self.role is UserType.ADMINISTRATOR

    @property
    def is_pending(self) -> bool:
        return isinstance(self.role, PendingVerification)

    @property
    def role_name(self) -> str:
        """Role as shown to clients (``verify`` for pending accounts)."""
        if isinstance(self.role, PendingVerification):
            return "verify"
        return self.role.value
