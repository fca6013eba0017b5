"""Set user type use case."""

from pydantic import BaseModel

from margin.domain.error import UnauthorizedError, ValidationError
from margin.domain.service import IdentityService, UserService
from margin.domain.value import UserId, UserType

from margin.application.usecase.base import BaseUseCase


class SetUserTypeRequest(BaseModel):
    """Role change request from the administrator console."""

    user_id: int
    type: str
    auth_token: str | None = None


class SetUserTypeUseCase(BaseUseCase):
    """Use case promoting or demoting an account."""

    def __init__(
        self, identity_service: IdentityService, user_service: UserService
    ) -> None:
        self.identity_service = identity_service
        self.user_service = user_service

    async def execute(self, request: SetUserTypeRequest) -> None:
        """Change the target account's role.

        Raises:
            UnauthorizedError: If no valid credential was presented
            ValidationError: If the type is not administrator or guest
            ForbiddenError: If the requester is not an administrator, or the
                target is the first administrator
            UserNotFoundError: If the target does not exist
        """
        actor = await self.identity_service.resolve(request.auth_token, strict=True)
        if actor.is_anonymous:
            raise UnauthorizedError("Administrator credential required")

        try:
            role = UserType(request.type)
        except ValueError:
            raise ValidationError(f"Unknown user type: {request.type}")

        await self.user_service.set_role(actor, UserId(request.user_id), role)
