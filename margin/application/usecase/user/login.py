"""Login use case."""

import logfire
from pydantic import BaseModel

from margin.config import AuthSettings
from margin.domain.service import JWTService, RenderService, UserService

from margin.application.usecase.base import BaseUseCase, Payload
from margin.application.usecase.user.profile import UserProfile


class LoginRequest(BaseModel):
    """Email/password login, with a TOTP code for two-factor accounts."""

    email: str
    password: str
    code: str | None = None


class LoginUseCase(BaseUseCase):
    """Use case for password login."""

    def __init__(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        render_service: RenderService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
            render_service: Avatar fallback for accounts without one
            auth_settings: Authentication settings (token lifetime)
        """
        self.user_service = user_service
        self.jwt_service = jwt_service
        self.render_service = render_service
        self.auth_settings = auth_settings

    async def execute(self, request: LoginRequest) -> Payload:
        """Check credentials and issue a token.

        Returns:
            The account profile with a ``token`` field

        Raises:
            UserNotFoundError: If no account has this email
            ValidationError: If the account awaits confirmation
            UnauthorizedError: If the password is wrong
            TwoFactorAuthError: If the TOTP code is wrong
        """
        user = await self.user_service.authenticate(
            request.email, request.password, request.code
        )
        token = self.jwt_service.sign(
            user.email, ttl_seconds=self.auth_settings.jwt_expiry_seconds
        )
        logfire.info("User logged in", user_id=user.id)
        return UserProfile.from_user(user, self.render_service, token=token).to_payload()
