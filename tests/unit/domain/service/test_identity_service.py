"""Unit tests for IdentityService."""

import pytest

from margin.config import AuthSettings
from margin.domain.error import UnauthorizedError
from margin.domain.model import ActorKind
from margin.domain.service import IdentityService, JWTService
from margin.domain.value import UserType
from margin.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import add_user


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="test-secret"))


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def identity_service(jwt_service, user_repo):
    return IdentityService(jwt_service=jwt_service, user_repository=user_repo)


class TestIdentityService:
    """Tests for requester resolution."""

    @pytest.mark.asyncio
    async def test_no_token_is_anonymous(self, identity_service):
        actor = await identity_service.resolve(None, strict=True)

        assert actor.kind is ActorKind.ANONYMOUS
        assert actor.user is None

    @pytest.mark.asyncio
    async def test_guest_token(self, identity_service, jwt_service, user_repo):
        # Arrange
        user = await add_user(user_repo)
        token = jwt_service.sign(user.email)

        # Act
        actor = await identity_service.resolve(token)

        # Assert
        assert actor.kind is ActorKind.GUEST
        assert actor.user.id == user.id

    @pytest.mark.asyncio
    async def test_administrator_token(self, identity_service, jwt_service, user_repo):
        user = await add_user(user_repo, role=UserType.ADMINISTRATOR)

        actor = await identity_service.resolve(jwt_service.sign(user.email))

        assert actor.is_admin

    @pytest.mark.asyncio
    async def test_bad_token_is_anonymous_when_lenient(self, identity_service):
        actor = await identity_service.resolve("not-a-jwt")

        assert actor.is_anonymous

    @pytest.mark.asyncio
    async def test_bad_token_fails_when_strict(self, identity_service):
        with pytest.raises(UnauthorizedError):
            await identity_service.resolve("not-a-jwt", strict=True)

    @pytest.mark.asyncio
    async def test_expired_token_fails_when_strict(
        self, identity_service, jwt_service, user_repo
    ):
        user = await add_user(user_repo)
        token = jwt_service.sign(user.email, ttl_seconds=-10)

        with pytest.raises(UnauthorizedError):
            await identity_service.resolve(token, strict=True)

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret_is_rejected(
        self, identity_service, user_repo
    ):
        user = await add_user(user_repo)
        forged = JWTService(AuthSettings(jwt_secret="other")).sign(user.email)

        assert (await identity_service.resolve(forged)).is_anonymous
        with pytest.raises(UnauthorizedError):
            await identity_service.resolve(forged, strict=True)

    @pytest.mark.asyncio
    async def test_unknown_account(self, identity_service, jwt_service):
        token = jwt_service.sign("ghost@example.com")

        assert (await identity_service.resolve(token)).is_anonymous
        with pytest.raises(UnauthorizedError):
            await identity_service.resolve(token, strict=True)
