"""Update comment use case."""

from typing import Any

import logfire
from pydantic import BaseModel, Field

from margin.domain.error import ForbiddenError, UnauthorizedError
from margin.domain.repository import UnitOfWork
from margin.domain.service import (
    CommentCache,
    CommentService,
    IdentityService,
    RenderService,
    UserService,
)
from margin.domain.value import CommentId, CommentStatus

from margin.application.usecase.base import BaseUseCase, Payload
from margin.application.usecase.comment.presenter import CommentPresenter

# Fields only administrators may change
_MODERATION_FIELDS = frozenset({"status", "sticky"})


class UpdateCommentRequest(BaseModel):
    """Update comment request.

    Fields left as None are not changed. A request carrying ``like`` is a
    public like toggle and changes nothing else.
    """

    comment_id: int
    auth_token: str | None = None
    like: bool | None = None
    status: CommentStatus | None = None
    sticky: bool | None = None
    comment: str | None = Field(default=None, min_length=1)
    link: str | None = None
    mail: str | None = None
    nick: str | None = None
    ua: str | None = None
    url: str | None = Field(default=None, min_length=1)

    def changes(self) -> dict[str, Any]:
        return self.model_dump(
            exclude={"comment_id", "auth_token", "like"}, exclude_none=True
        )


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing, moderating or liking a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        render_service: RenderService,
        user_service: UserService,
        comment_cache: CommentCache,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            identity_service: Resolves the requester from the bearer token
            render_service: Presentation fields for the response
            user_service: Owning account lookups
            comment_cache: Cleared after every successful update
            unit_of_work: Commits the change before the cache is cleared
        """
        self.comment_service = comment_service
        self.identity_service = identity_service
        self.render_service = render_service
        self.user_service = user_service
        self.comment_cache = comment_cache
        self.unit_of_work = unit_of_work

    async def execute(self, request: UpdateCommentRequest) -> Payload:
        """Execute update comment flow.

        Raises:
            UnauthorizedError: If an edit comes without a valid credential
            ForbiddenError: If the requester neither owns the comment nor
                administers the site, or a non-administrator moderates
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(request.comment_id)

        if request.like is not None:
            updated = await self.comment_service.toggle_like(comment_id, request.like)
            await self.unit_of_work.commit()
            self.comment_cache.clear()
            presenter = CommentPresenter(self.render_service, self.user_service)
            return (await presenter.present(updated)).to_payload()

        actor = await self.identity_service.resolve(request.auth_token, strict=True)
        if actor.is_anonymous:
            raise UnauthorizedError("Sign in to edit comments")

        with logfire.span("update_comment", comment_id=comment_id, actor=actor.kind.value):
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if not actor.is_admin and not actor.owns(comment.user_id):
                logfire.warn(
                    "Comment update refused",
                    comment_id=comment_id,
                    user_id=actor.user.id if actor.user else None,
                )
                raise ForbiddenError("You can only edit your own comments")

            changes = request.changes()
            if not actor.is_admin and _MODERATION_FIELDS & changes.keys():
                raise ForbiddenError("Only administrators can moderate comments")

            updated = await self.comment_service.update_comment(comment, changes)
            await self.unit_of_work.commit()
            self.comment_cache.clear()

            presenter = CommentPresenter(
                self.render_service, self.user_service, reveal_private=True
            )
            return (await presenter.present(updated)).to_payload()
