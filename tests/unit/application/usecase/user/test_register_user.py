"""Unit tests for RegisterUserUseCase and VerifyUserUseCase."""

from urllib.parse import parse_qs, urlparse

import pytest

from margin.adapter.mail import RecordingNotifier
from margin.application.usecase.user import (
    RegisterUserRequest,
    RegisterUserUseCase,
    VerifyUserRequest,
    VerifyUserUseCase,
)
from margin.config import MailSettings, Settings
from margin.domain.error import TokenExpiredError, UserRegisteredError
from margin.domain.repository import UserRepository
from margin.domain.service import NotificationService, Notifier, NotifyEvent
from margin.domain.value import UserType
from tests.harness import create_env_fixture

# Mail is configured, so accounts after the first need confirmation
mail_env = create_env_fixture(
    settings=Settings(mail=MailSettings(smtp_user="bot@example.com", smtp_pass="pw"))
)
unit_env = create_env_fixture()


def register_request(email: str, **fields) -> RegisterUserRequest:
    return RegisterUserRequest(
        display_name=fields.pop("display_name", email.split("@")[0]),
        email=email,
        password=fields.pop("password", "pw123456"),
        server_url="https://comments.example.com/",
        **fields,
    )


class TestRegisterUser:
    @pytest.mark.asyncio
    async def test_first_account_needs_no_confirmation(self, mail_env):
        use_case = await mail_env.get(RegisterUserUseCase)
        user_repo = await mail_env.get(UserRepository)

        payload = await use_case.execute(register_request("owner@example.com"))

        assert payload == {}
        owner = await user_repo.find_by_email("owner@example.com")
        assert owner.role is UserType.ADMINISTRATOR

    @pytest.mark.asyncio
    async def test_confirmation_mail_round_trip(self, mail_env):
        # Arrange
        register = await mail_env.get(RegisterUserUseCase)
        verify = await mail_env.get(VerifyUserUseCase)
        notifier: RecordingNotifier = await mail_env.get(Notifier)
        notification_service = await mail_env.get(NotificationService)
        user_repo = await mail_env.get(UserRepository)
        await register.execute(register_request("owner@example.com"))

        # Act
        payload = await register.execute(
            register_request("bob@example.com", lang="zh-CN")
        )
        await notification_service.drain()

        # Assert
        assert payload == {"verify": True}
        [sent] = notifier.sent
        assert sent.event is NotifyEvent.REGISTER_USER
        assert sent.locale == "zh-CN"
        link = urlparse(sent.values["url"])
        assert link.netloc == "comments.example.com"
        assert link.path == "/api/verification"
        query = parse_qs(link.query)
        assert query["email"] == ["bob@example.com"]

        await verify.execute(
            VerifyUserRequest(email="bob@example.com", token=query["token"][0])
        )
        bob = await user_repo.find_by_email("bob@example.com")
        assert bob.role is UserType.GUEST

    @pytest.mark.asyncio
    async def test_wrong_token_is_rejected(self, mail_env):
        register = await mail_env.get(RegisterUserUseCase)
        verify = await mail_env.get(VerifyUserUseCase)
        user_repo = await mail_env.get(UserRepository)
        await register.execute(register_request("owner@example.com"))
        await register.execute(register_request("bob@example.com"))
        pending = await user_repo.find_by_email("bob@example.com")
        wrong = "0000" if pending.role.token != "0000" else "9999"

        with pytest.raises(TokenExpiredError):
            await verify.execute(VerifyUserRequest(email="bob@example.com", token=wrong))

    @pytest.mark.asyncio
    async def test_without_mail_account_is_active_at_once(self, unit_env):
        use_case = await unit_env.get(RegisterUserUseCase)
        user_repo = await unit_env.get(UserRepository)
        await use_case.execute(register_request("owner@example.com"))

        payload = await use_case.execute(register_request("bob@example.com"))

        assert payload == {}
        assert (await user_repo.find_by_email("bob@example.com")).role is UserType.GUEST

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env):
        use_case = await unit_env.get(RegisterUserUseCase)
        await use_case.execute(register_request("owner@example.com"))

        with pytest.raises(UserRegisteredError):
            await use_case.execute(register_request("owner@example.com"))
