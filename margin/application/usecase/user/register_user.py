"""Register user use case."""

from urllib.parse import urlencode

from pydantic import BaseModel, Field

from margin.domain.service import NotificationService, UserService
from margin.domain.value import PendingVerification

from margin.application.usecase.base import BaseUseCase, Payload


class RegisterUserRequest(BaseModel):
    """Register user request."""

    display_name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)
    url: str | None = None
    lang: str | None = None
    # Public base URL of this server, used to build the confirmation link
    server_url: str


class RegisterUserUseCase(BaseUseCase):
    """Use case for creating an account (or refreshing a pending one)."""

    def __init__(
        self, user_service: UserService, notification_service: NotificationService
    ) -> None:
        self.user_service = user_service
        self.notification_service = notification_service

    async def execute(self, request: RegisterUserRequest) -> Payload:
        """Register and, when confirmation is needed, mail the link.

        Returns:
            ``{"verify": True}`` when the account awaits confirmation,
            otherwise an empty payload

        Raises:
            UserRegisteredError: If the email already has an active account
        """
        user = await self.user_service.register(
            display_name=request.display_name,
            email=request.email,
            password=request.password,
            url=request.url,
        )

        if not isinstance(user.role, PendingVerification):
            return {}

        query = urlencode({"token": user.role.token, "email": user.email})
        confirm_url = f"{request.server_url.rstrip('/')}/api/verification?{query}"
        self.notification_service.notify_registration(
            user, confirm_url, locale=request.lang
        )
        return {"verify": True}
