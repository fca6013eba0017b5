"""Get current user use case."""

from pydantic import BaseModel

from margin.domain.error import UnauthorizedError
from margin.domain.service import IdentityService, RenderService

from margin.application.usecase.base import BaseUseCase, Payload
from margin.application.usecase.user.profile import UserProfile


class GetCurrentUserRequest(BaseModel):
    auth_token: str | None = None


class GetCurrentUserUseCase(BaseUseCase):
    """Use case returning the signed-in account's profile."""

    def __init__(
        self, identity_service: IdentityService, render_service: RenderService
    ) -> None:
        self.identity_service = identity_service
        self.render_service = render_service

    async def execute(self, request: GetCurrentUserRequest) -> Payload:
        """Raises UnauthorizedError unless a valid credential is presented."""
        actor = await self.identity_service.resolve(request.auth_token, strict=True)
        if actor.user is None:
            raise UnauthorizedError("Not signed in")
        return UserProfile.from_user(actor.user, self.render_service).to_payload()
