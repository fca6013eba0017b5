"""JWT token domain service."""

import logfire

from margin.config import AuthSettings
from margin.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def sign(self, email: str, ttl_seconds: int | None = None) -> str:
        """Create a JWT token whose subject is ``email``.

        Args:
            email: Account email
            ttl_seconds: Lifetime override (defaults to configured expiry)

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.sign", email=email):
            token = create_token(email, self.auth_settings, ttl_seconds)
            logfire.info("JWT token created", email=email)
            return token

    def verify(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify"):
            try:
                return verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
