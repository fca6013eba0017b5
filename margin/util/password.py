"""Password hashing and two-factor helpers."""

import bcrypt
import pyotp

# Secrets of this length are base32 TOTP keys; anything else means 2FA is off
TOTP_SECRET_LENGTH = 32


def hash_password(password: str) -> str:
    """Hash a password with bcrypt.

    Args:
        password: Plain text password

    Returns:
        bcrypt hash as text
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plain text password against a bcrypt hash.

    Malformed hashes never verify.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def two_factor_enabled(secret: str | None) -> bool:
    return secret is not None and len(secret) == TOTP_SECRET_LENGTH


def verify_totp(secret: str, code: str | None) -> bool:
    """Check a TOTP code against a base32 secret, allowing one step of drift."""
    if not code:
        return False
    return pyotp.TOTP(secret).verify(code, valid_window=1)
