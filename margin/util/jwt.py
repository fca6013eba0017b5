"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from margin.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload.

    The subject is the account email, matching the identity key used by
    the user repository.
    """

    email: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    email: str, settings: AuthSettings, ttl_seconds: int | None = None
) -> str:
    """Create a JWT token for the account.

    Args:
        email: Account email (token subject)
        settings: Authentication settings
        ttl_seconds: Lifetime override, defaults to settings.jwt_expiry_seconds

    Returns:
        Encoded JWT token
    """
    ttl = ttl_seconds if ttl_seconds is not None else settings.jwt_expiry_seconds
    expiry = datetime.now(timezone.utc) + timedelta(seconds=ttl)

    payload = {
        "email": email,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
