"""Create comment use case."""

import logfire
from pydantic import BaseModel, Field, field_validator

from margin.config import AuthSettings, CommentSettings
from margin.domain.error import (
    DuplicateContentError,
    ForbiddenError,
    RateLimitedError,
    UnauthorizedError,
)
from margin.domain.repository import UnitOfWork
from margin.domain.service import (
    CommentCache,
    CommentService,
    IdentityService,
    ModerationService,
    NotificationService,
    RateLimiter,
    RenderService,
    UserService,
)
from margin.domain.value import CommentId

from margin.application.usecase.base import BaseUseCase, Payload
from margin.application.usecase.comment.presenter import CommentPresenter


class CreateCommentRequest(BaseModel):
    """Create comment request.

    Empty guest identity fields are treated as absent.
    """

    comment: str = Field(min_length=1)
    url: str = Field(min_length=1)
    nick: str | None = None
    mail: str | None = None
    link: str | None = None
    ua: str | None = None
    pid: int | None = None  # Parent comment ID for replies
    rid: int | None = None  # Ignored; the thread root is derived from the parent
    client_ip: str | None = None
    auth_token: str | None = None
    lang: str | None = None

    @field_validator("nick", "mail", "link", "ua", mode="before")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a root comment or a reply."""

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        moderation_service: ModerationService,
        notification_service: NotificationService,
        render_service: RenderService,
        user_service: UserService,
        rate_limiter: RateLimiter,
        comment_cache: CommentCache,
        unit_of_work: UnitOfWork,
        comment_settings: CommentSettings,
        auth_settings: AuthSettings,
    ) -> None:
        self.comment_service = comment_service
        self.identity_service = identity_service
        self.moderation_service = moderation_service
        self.notification_service = notification_service
        self.render_service = render_service
        self.user_service = user_service
        self.rate_limiter = rate_limiter
        self.comment_cache = comment_cache
        self.unit_of_work = unit_of_work
        self.comment_settings = comment_settings
        self.auth_settings = auth_settings

    async def execute(self, request: CreateCommentRequest) -> Payload:
        """Execute create comment flow.

        Steps:
        1. Resolve the requester (a bad token fails the request)
        2. Non-administrators: forced login, blocked IPs, duplicate
           content, then the rate limiter
        3. Decide the initial status through moderation
        4. Persist and commit, drop cached pages that list the comment,
           notify the owner

        Raises:
            UnauthorizedError: On a bad token, or anonymous posting under forced login
            ForbiddenError: If the client IP is blocked
            DuplicateContentError: If the same comment already exists
            RateLimitedError: If the client is commenting too fast
            NotFoundError: If the parent comment does not exist
        """
        actor = await self.identity_service.resolve(request.auth_token, strict=True)
        ip = request.client_ip or ""

        nick, mail = request.nick, request.mail
        if actor.user is not None:
            nick = nick or actor.user.display_name
            mail = mail or actor.user.email

        with logfire.span(
            "create_comment",
            url=request.url,
            ip=ip,
            actor=actor.kind.value,
            is_reply=request.pid is not None,
        ):
            if not actor.is_admin:
                if actor.is_anonymous and self.auth_settings.login == "force":
                    raise UnauthorizedError("Sign in to comment")

                if ip in self.comment_settings.disallowed_ips:
                    logfire.info("Comment from disallowed IP", ip=ip)
                    raise ForbiddenError(f"IP {ip} may not comment")

                if await self.comment_service.is_duplicate(
                    url=request.url,
                    mail=mail,
                    nick=nick,
                    link=request.link,
                    comment=request.comment,
                ):
                    raise DuplicateContentError()

                if not self.rate_limiter.admit(
                    ip, self.comment_settings.rate_limit_count
                ):
                    raise RateLimitedError(ip)

            status = await self.moderation_service.decide(
                actor=actor, nick=nick, mail=mail, ip=ip, content=request.comment
            )

            comment = await self.comment_service.create_comment(
                url=request.url,
                comment=request.comment,
                status=status,
                nick=nick,
                mail=mail,
                link=request.link,
                ip=ip or None,
                ua=request.ua,
                user_id=actor.user.id if actor.user is not None else None,
                pid=CommentId(request.pid) if request.pid is not None else None,
            )
            # Readers must not refill the cache from pre-commit data
            await self.unit_of_work.commit()
            self.comment_cache.invalidate_matching(comment.url)

            presenter = CommentPresenter(
                self.render_service, self.user_service, reveal_private=True
            )
            entry = await presenter.present(comment)
            self.notification_service.notify_new_comment(
                comment, entry.comment, locale=request.lang
            )
            return entry.to_payload()
