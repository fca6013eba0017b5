"""User domain service."""

import secrets
from datetime import datetime, timedelta, timezone

import logfire

from margin.config import MailSettings
from margin.domain.error import (
    ForbiddenError,
    TokenExpiredError,
    TwoFactorAuthError,
    UnauthorizedError,
    UserNotFoundError,
    UserRegisteredError,
    ValidationError,
)
from margin.domain.model import Actor, User
from margin.domain.repository import UserRepository
from margin.domain.value import PendingVerification, UserId, UserType
from margin.util.password import (
    hash_password,
    two_factor_enabled,
    verify_password,
    verify_totp,
)

from .base import Service

VERIFICATION_TTL = timedelta(hours=1)


class UserService(Service):
    """Domain service for account operations."""

    def __init__(
        self, user_repository: UserRepository, mail_settings: MailSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            mail_settings: Mail settings (registration needs verification when mail works)
        """
        self.user_repository = user_repository
        self.mail_settings = mail_settings

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            UserNotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise UserNotFoundError(str(user_id))
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Look up a user that may since have been removed."""
        return await self.user_repository.find_by_id(user_id)

    async def get_by_email(self, email: str) -> User:
        """Get user by email.

        Raises:
            UserNotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("User not found", email=email)
                raise UserNotFoundError(email)
            return user

    async def register(
        self,
        display_name: str,
        email: str,
        password: str,
        url: str | None = None,
    ) -> User:
        """Register an account, or refresh a registration still pending.

        The very first account becomes the administrator. Later accounts
        start pending verification when mail delivery is configured,
        otherwise they are guests straight away.

        Raises:
            UserRegisteredError: If the email already has an active account
        """
        with logfire.span("user_service.register", email=email):
            existing = await self.user_repository.find_by_email(email)
            if existing is not None and not existing.is_pending:
                logfire.warn("Email already registered", email=email)
                raise UserRegisteredError(email)

            if existing is None and await self.user_repository.count() == 0:
                role = UserType.ADMINISTRATOR
            elif self.mail_settings.configured:
                role = PendingVerification(
                    token=f"{secrets.randbelow(10000):04d}",
                    expires_at=datetime.now(timezone.utc) + VERIFICATION_TTL,
                )
            else:
                role = UserType.GUEST

            fields = {
                "display_name": display_name,
                "password": hash_password(password),
                "url": url,
                "role": role,
                "updated_at": datetime.now(timezone.utc),
            }
            if existing is not None:
                user = existing.evolve(**fields)
            else:
                user = User(email=email, **fields)

            saved = await self.user_repository.save(user)
            logfire.info(
                "User registered", user_id=saved.id, email=email, role=saved.role_name
            )
            return saved

    async def verify(self, email: str, token: str) -> User:
        """Confirm a pending registration.

        Raises:
            UserNotFoundError: If no such account exists
            TokenExpiredError: If the token is wrong, expired, or nothing is pending
        """
        with logfire.span("user_service.verify", email=email):
            user = await self.get_by_email(email)
            role = user.role
            if not isinstance(role, PendingVerification) or not role.accepts(token):
                logfire.warn("Verification token rejected", email=email)
                raise TokenExpiredError(email)

            verified = await self.user_repository.save(
                user.evolve(role=UserType.GUEST, updated_at=datetime.now(timezone.utc))
            )
            logfire.info("User verified", user_id=verified.id, email=email)
            return verified

    async def authenticate(
        self, email: str, password: str, code: str | None = None
    ) -> User:
        """Check credentials and the second factor when one is set up.

        Raises:
            UserNotFoundError: If no such account exists
            ValidationError: If the account still awaits verification
            UnauthorizedError: If the password is wrong
            TwoFactorAuthError: If the TOTP code does not verify
        """
        with logfire.span("user_service.authenticate", email=email):
            user = await self.get_by_email(email)
            if user.is_pending:
                raise ValidationError("Account is pending email verification")

            if not verify_password(password, user.password):
                logfire.warn("Password rejected", email=email)
                raise UnauthorizedError("Invalid credentials")

            if two_factor_enabled(user.two_factor_secret) and not verify_totp(
                user.two_factor_secret, code
            ):
                logfire.warn("Two factor code rejected", email=email)
                raise TwoFactorAuthError(email)

            logfire.info("User authenticated", user_id=user.id)
            return user

    async def set_role(self, actor: Actor, user_id: UserId, role: UserType) -> User:
        """Change an account's role.

        Only administrators may do this, and the first administrator's role
        can never change.

        Raises:
            ForbiddenError: If actor is not an administrator or targets the first administrator
            UserNotFoundError: If the target does not exist
        """
        with logfire.span(
            "user_service.set_role", user_id=user_id, role=role.value
        ):
            if not actor.is_admin:
                raise ForbiddenError("Only administrators can change roles")

            user = await self.get_by_id(user_id)
            first_admin = await self.user_repository.find_first_administrator()
            if first_admin is not None and first_admin.id == user.id:
                logfire.warn("Refused role change of first administrator", user_id=user_id)
                raise ForbiddenError("The first administrator's role is fixed")

            updated = await self.user_repository.save(
                user.evolve(role=role, updated_at=datetime.now(timezone.utc))
            )
            logfire.info("User role changed", user_id=user_id, role=role.value)
            return updated
