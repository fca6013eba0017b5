"""Unit tests for UserService."""

from datetime import datetime, timedelta, timezone

import pyotp
import pytest

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
from margin.domain.model import Actor
from margin.domain.service import UserService
from margin.domain.value import PendingVerification, UserType
from margin.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import add_user

SMTP_ON = MailSettings(smtp_user="bot@example.com", smtp_pass="pw")


def make_service(mail_settings: MailSettings | None = None):
    user_repo = InMemoryUserRepository()
    return UserService(user_repo, mail_settings or MailSettings()), user_repo


class TestRegister:
    """Tests for UserService.register()."""

    @pytest.mark.asyncio
    async def test_first_account_becomes_administrator(self):
        service, _ = make_service(SMTP_ON)

        user = await service.register("Owner", "owner@example.com", "pw123456")

        assert user.role is UserType.ADMINISTRATOR
        assert user.password != "pw123456"

    @pytest.mark.asyncio
    async def test_later_account_is_guest_without_mail(self):
        # Arrange
        service, _ = make_service()
        await service.register("Owner", "owner@example.com", "pw123456")

        # Act
        user = await service.register("Bob", "bob@example.com", "pw123456")

        # Assert
        assert user.role is UserType.GUEST

    @pytest.mark.asyncio
    async def test_later_account_is_pending_with_mail(self):
        service, _ = make_service(SMTP_ON)
        await service.register("Owner", "owner@example.com", "pw123456")

        user = await service.register("Bob", "bob@example.com", "pw123456")

        assert isinstance(user.role, PendingVerification)
        assert len(user.role.token) == 4
        assert user.role_name == "verify"

    @pytest.mark.asyncio
    async def test_active_email_cannot_register_again(self):
        service, _ = make_service()
        await service.register("Owner", "owner@example.com", "pw123456")

        with pytest.raises(UserRegisteredError):
            await service.register("Other", "owner@example.com", "pw123456")

    @pytest.mark.asyncio
    async def test_pending_registration_is_refreshed(self):
        # Arrange
        service, user_repo = make_service(SMTP_ON)
        await service.register("Owner", "owner@example.com", "pw123456")
        first = await service.register("Bob", "bob@example.com", "pw123456")

        # Act
        second = await service.register("Bobby", "bob@example.com", "new-pass")

        # Assert
        assert second.id == first.id
        assert second.display_name == "Bobby"
        assert second.is_pending
        assert await user_repo.count() == 2


class TestVerify:
    """Tests for UserService.verify()."""

    @pytest.mark.asyncio
    async def test_correct_token_makes_guest(self):
        service, _ = make_service(SMTP_ON)
        await service.register("Owner", "owner@example.com", "pw123456")
        pending = await service.register("Bob", "bob@example.com", "pw123456")

        user = await service.verify("bob@example.com", pending.role.token)

        assert user.role is UserType.GUEST

    @pytest.mark.asyncio
    async def test_wrong_token_is_rejected(self):
        service, _ = make_service(SMTP_ON)
        await service.register("Owner", "owner@example.com", "pw123456")
        pending = await service.register("Bob", "bob@example.com", "pw123456")
        wrong = "0000" if pending.role.token != "0000" else "1111"

        with pytest.raises(TokenExpiredError):
            await service.verify("bob@example.com", wrong)

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected(self):
        # Arrange
        service, user_repo = make_service(SMTP_ON)
        await add_user(
            user_repo,
            email="bob@example.com",
            role=PendingVerification(
                token="1234",
                expires_at=datetime.now(timezone.utc) - timedelta(minutes=1),
            ),
        )

        # Act / Assert
        with pytest.raises(TokenExpiredError):
            await service.verify("bob@example.com", "1234")

    @pytest.mark.asyncio
    async def test_active_account_has_nothing_to_verify(self):
        service, user_repo = make_service()
        await add_user(user_repo, email="bob@example.com")

        with pytest.raises(TokenExpiredError):
            await service.verify("bob@example.com", "1234")

    @pytest.mark.asyncio
    async def test_unknown_email(self):
        service, _ = make_service()

        with pytest.raises(UserNotFoundError):
            await service.verify("ghost@example.com", "1234")


class TestAuthenticate:
    """Tests for UserService.authenticate()."""

    @pytest.mark.asyncio
    async def test_correct_password(self):
        service, user_repo = make_service()
        stored = await add_user(user_repo, password="right-pass")

        user = await service.authenticate(stored.email, "right-pass")

        assert user.id == stored.id

    @pytest.mark.asyncio
    async def test_wrong_password(self):
        service, user_repo = make_service()
        stored = await add_user(user_repo, password="right-pass")

        with pytest.raises(UnauthorizedError):
            await service.authenticate(stored.email, "wrong-pass")

    @pytest.mark.asyncio
    async def test_pending_account_cannot_log_in(self):
        service, user_repo = make_service()
        stored = await add_user(
            user_repo,
            password="right-pass",
            role=PendingVerification(
                token="1234",
                expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
            ),
        )

        with pytest.raises(ValidationError):
            await service.authenticate(stored.email, "right-pass")

    @pytest.mark.asyncio
    async def test_two_factor_code_required_when_enabled(self):
        # Arrange
        secret = pyotp.random_base32(length=32)
        service, user_repo = make_service()
        stored = await add_user(
            user_repo, password="right-pass", two_factor_secret=secret
        )

        # Act / Assert
        with pytest.raises(TwoFactorAuthError):
            await service.authenticate(stored.email, "right-pass")
        with pytest.raises(TwoFactorAuthError):
            await service.authenticate(stored.email, "right-pass", code="000000x")

        user = await service.authenticate(
            stored.email, "right-pass", code=pyotp.TOTP(secret).now()
        )
        assert user.id == stored.id


class TestSetRole:
    """Tests for UserService.set_role()."""

    @pytest.mark.asyncio
    async def test_administrator_promotes_guest(self):
        # Arrange
        service, user_repo = make_service()
        admin = await add_user(
            user_repo, email="owner@example.com", role=UserType.ADMINISTRATOR
        )
        guest = await add_user(user_repo, email="bob@example.com")

        # Act
        updated = await service.set_role(
            Actor.for_user(admin), guest.id, UserType.ADMINISTRATOR
        )

        # Assert
        assert updated.is_administrator

    @pytest.mark.asyncio
    async def test_guest_cannot_change_roles(self):
        service, user_repo = make_service()
        guest = await add_user(user_repo, email="bob@example.com")

        with pytest.raises(ForbiddenError):
            await service.set_role(Actor.for_user(guest), guest.id, UserType.ADMINISTRATOR)

    @pytest.mark.asyncio
    async def test_first_administrator_role_is_fixed(self):
        service, user_repo = make_service()
        first = await add_user(
            user_repo, email="owner@example.com", role=UserType.ADMINISTRATOR
        )
        second = await add_user(
            user_repo, email="second@example.com", role=UserType.ADMINISTRATOR
        )

        with pytest.raises(ForbiddenError):
            await service.set_role(Actor.for_user(second), first.id, UserType.GUEST)

    @pytest.mark.asyncio
    async def test_unknown_target(self):
        service, user_repo = make_service()
        admin = await add_user(user_repo, role=UserType.ADMINISTRATOR)

        with pytest.raises(UserNotFoundError):
            await service.set_role(Actor.for_user(admin), 999, UserType.GUEST)
