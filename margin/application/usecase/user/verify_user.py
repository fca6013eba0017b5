"""Verify user use case."""

from pydantic import BaseModel

from margin.domain.service import UserService

from margin.application.usecase.base import BaseUseCase


class VerifyUserRequest(BaseModel):
    """Confirmation link parameters."""

    email: str
    token: str


class VerifyUserUseCase(BaseUseCase):
    """Use case completing a pending registration."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: VerifyUserRequest) -> None:
        """Turn the pending account into a guest.

        Raises:
            UserNotFoundError: If no account has this email
            TokenExpiredError: If the token is wrong or expired
        """
        await self.user_service.verify(request.email, request.token)
