"""Domain layer errors.

Every domain error carries a stable machine-readable ``errno`` and a
``message_key`` that the interface layer localizes.
"""

GENERIC_ERRNO = 1000


class DomainError(Exception):
    """Base domain error."""

    errno: int = GENERIC_ERRNO
    message_key: str = "Error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.message_key
        super().__init__(self.detail)


class ValidationError(DomainError):
    """Domain validation error."""

    message_key = "Invalid Request"


class UnauthorizedError(DomainError):
    """Raised when a write needs a valid credential and none was presented."""

    errno = 401
    message_key = "Unauthorized"


class ForbiddenError(DomainError):
    """Raised when the requester may not act on a resource."""

    errno = 403
    message_key = "FORBIDDEN"


class RateLimitedError(DomainError):
    """Raised when a client exceeds its comment allowance for the window."""

    message_key = "Comment too fast"

    def __init__(self, client: str):
        self.client = client
        super().__init__(f"Rate limit exceeded for {client}")


class DuplicateContentError(DomainError):
    """Raised when an identical comment already exists on the page."""

    message_key = "Duplicate Content"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    message_key = "Not Found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UserNotFoundError(NotFoundError):
    """Raised when an account lookup by email or id fails."""

    message_key = "USER_NOT_EXIST"

    def __init__(self, identifier: str):
        super().__init__("User", identifier)


class UserRegisteredError(DomainError):
    """Raised when registering an email that already has an active account."""

    message_key = "USER_REGISTERED"


class TokenExpiredError(DomainError):
    """Raised when a verification token does not match or has expired."""

    message_key = "TOKEN_EXPIRED"


class TwoFactorAuthError(DomainError):
    """Raised when a TOTP code does not verify."""

    message_key = "TWO_FACTOR_AUTH_ERROR_DETAIL"
