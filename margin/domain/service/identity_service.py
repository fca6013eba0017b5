"""Resolve the requester behind a bearer credential."""

import logfire

from margin.domain.error import UnauthorizedError
from margin.domain.model import Actor
from margin.domain.repository import UserRepository
from margin.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService


class IdentityService(Service):
    """Domain service turning an optional credential into an Actor."""

    def __init__(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> None:
        self.jwt_service = jwt_service
        self.user_repository = user_repository

    async def resolve(self, token: str | None, strict: bool = False) -> Actor:
        """Resolve the actor for a request.

        No credential always resolves to Anonymous. A credential that does
        not verify, or names an unknown account, is Anonymous on lenient
        (read) paths and Unauthorized on strict paths (writes, admin-only
        queries).

        Args:
            token: Bearer token, if any
            strict: Whether a bad credential fails the request

        Returns:
            Anonymous, Guest or Administrator actor

        Raises:
            UnauthorizedError: On a bad credential when strict
        """
        if not token:
            return Actor.anonymous()

        with logfire.span("identity_service.resolve", strict=strict):
            try:
                payload = self.jwt_service.verify(token)
            except JWTError as e:
                if strict:
                    raise UnauthorizedError(str(e))
                return Actor.anonymous()

            user = await self.user_repository.find_by_email(payload.email)
            if user is None:
                logfire.warn("Token subject has no account", email=payload.email)
                if strict:
                    raise UnauthorizedError("Unknown account")
                return Actor.anonymous()

            actor = Actor.for_user(user)
            logfire.info("Actor resolved", kind=actor.kind.value, user_id=user.id)
            return actor
