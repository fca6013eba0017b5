"""Unit tests for ListCommentsUseCase."""

import pytest

from margin.application.usecase.comment import ListCommentsRequest, ListCommentsUseCase
from margin.domain.error import ForbiddenError, UnauthorizedError, ValidationError
from margin.domain.repository import CommentRepository, UserRepository
from margin.domain.service import JWTService
from margin.domain.value import CommentStatus, UserType
from tests.conftest import add_comment, add_user, bearer
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed(env):
    comment_repo = await env.get(CommentRepository)
    user_repo = await env.get(UserRepository)
    jwt_service = await env.get(JWTService)
    admin = await add_user(
        user_repo, email="owner@example.com", role=UserType.ADMINISTRATOR
    )
    await add_comment(comment_repo, "mine", minutes=1, mail="owner@example.com")
    await add_comment(comment_repo, "held", minutes=2, status=CommentStatus.WAITING)
    await add_comment(comment_repo, "junk", minutes=3, status=CommentStatus.SPAM)
    await add_comment(comment_repo, "fine", minutes=4, url="/other")
    return bearer(jwt_service, admin)


class TestListComments:
    """Tests for the moderation list."""

    @pytest.mark.asyncio
    async def test_lists_every_status_newest_first(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        token = await seed(unit_env)

        # Act
        payload = await use_case.execute(ListCommentsRequest(auth_token=token))

        # Assert
        assert [c["orig"] for c in payload["data"]] == ["fine", "junk", "held", "mine"]
        assert payload["waitingCount"] == 1
        assert payload["spamCount"] == 1
        assert payload["totalPages"] == 1
        assert payload["pageSize"] == 10

    @pytest.mark.asyncio
    async def test_status_filter(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        token = await seed(unit_env)

        payload = await use_case.execute(
            ListCommentsRequest(auth_token=token, status="waiting")
        )

        assert [c["orig"] for c in payload["data"]] == ["held"]

    @pytest.mark.asyncio
    async def test_keyword_filter(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        token = await seed(unit_env)

        payload = await use_case.execute(
            ListCommentsRequest(auth_token=token, keyword="ju")
        )

        assert [c["orig"] for c in payload["data"]] == ["junk"]

    @pytest.mark.asyncio
    async def test_mine_filters_by_admin_mail(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        token = await seed(unit_env)

        payload = await use_case.execute(
            ListCommentsRequest(auth_token=token, owner="mine")
        )

        assert [c["orig"] for c in payload["data"]] == ["mine"]
        assert payload["data"][0]["mail"] == "owner@example.com"
        assert payload["waitingCount"] == 0

    @pytest.mark.asyncio
    async def test_unknown_status(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        token = await seed(unit_env)

        with pytest.raises(ValidationError):
            await use_case.execute(ListCommentsRequest(auth_token=token, status="deleted"))

    @pytest.mark.asyncio
    async def test_anonymous_is_unauthorized(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(ListCommentsRequest())

    @pytest.mark.asyncio
    async def test_guest_is_forbidden(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        jwt_service = await unit_env.get(JWTService)
        guest = await add_user(user_repo)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                ListCommentsRequest(auth_token=bearer(jwt_service, guest))
            )
