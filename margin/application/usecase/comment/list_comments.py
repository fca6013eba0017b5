"""Administrator comment listing use case."""

import math
from typing import Literal

import logfire
from pydantic import BaseModel

from margin.config import CommentSettings
from margin.domain.error import ForbiddenError, UnauthorizedError, ValidationError
from margin.domain.service import (
    CommentService,
    IdentityService,
    RenderService,
    UserService,
)
from margin.domain.value import CommentStatus

from margin.application.usecase.base import BaseUseCase, Payload
from margin.application.usecase.comment.presenter import CommentPresenter


class ListCommentsRequest(BaseModel):
    """Moderation list request."""

    auth_token: str | None = None
    owner: Literal["mine", "all"] = "all"
    status: str | None = None  # waiting | approved | spam, all statuses when empty
    keyword: str | None = None
    page: int = 1


class ListCommentsUseCase(BaseUseCase):
    """Use case listing every comment for the moderation console."""

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        render_service: RenderService,
        user_service: UserService,
        settings: CommentSettings,
    ) -> None:
        self.comment_service = comment_service
        self.identity_service = identity_service
        self.render_service = render_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: ListCommentsRequest) -> Payload:
        """List comments newest first, with waiting and spam totals.

        ``owner="mine"`` narrows the list to comments written with the
        administrator's own mail.

        Raises:
            UnauthorizedError: If no valid credential was presented
            ForbiddenError: If the requester is not an administrator
            ValidationError: If status or page is malformed
        """
        actor = await self.identity_service.resolve(request.auth_token, strict=True)
        if actor.is_anonymous:
            raise UnauthorizedError("Administrator credential required")
        if not actor.is_admin:
            raise ForbiddenError("Only administrators can list all comments")
        if request.page < 1:
            raise ValidationError("page must be at least 1")

        status = self._parse_status(request.status)
        mail = actor.user.email if request.owner == "mine" else None
        page_size = self.settings.admin_page_size

        with logfire.span(
            "list_comments",
            owner=request.owner,
            status=request.status,
            page=request.page,
        ):
            result = await self.comment_service.list_for_admin(
                page=request.page,
                page_size=page_size,
                status=status,
                keyword=request.keyword or None,
                mail=mail,
            )
            presenter = CommentPresenter(
                self.render_service, self.user_service, reveal_private=True
            )
            data = [(await presenter.present(c)).to_payload() for c in result.items]

            return {
                "data": data,
                "page": request.page,
                "pageSize": page_size,
                "totalPages": math.ceil(result.total / page_size),
                "waitingCount": await self.comment_service.count_by_status(
                    CommentStatus.WAITING, mail=mail
                ),
                "spamCount": await self.comment_service.count_by_status(
                    CommentStatus.SPAM, mail=mail
                ),
            }

    @staticmethod
    def _parse_status(raw: str | None) -> CommentStatus | None:
        if not raw:
            return None
        try:
            return CommentStatus(raw)
        except ValueError:
            raise ValidationError(f"Unknown comment status: {raw}")
