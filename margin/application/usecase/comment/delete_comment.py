"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from margin.domain.error import ForbiddenError, UnauthorizedError
from margin.domain.repository import UnitOfWork
from margin.domain.service import CommentCache, CommentService, IdentityService
from margin.domain.value import CommentId

from margin.application.usecase.base import BaseUseCase


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    auth_token: str | None = None


class DeleteCommentUseCase(BaseUseCase):
    """Use case for permanently removing a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        comment_cache: CommentCache,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.comment_service = comment_service
        self.identity_service = identity_service
        self.comment_cache = comment_cache
        self.unit_of_work = unit_of_work

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Delete a comment owned by the requester, or any comment for admins.

        Replies to the comment are left in place.

        Raises:
            UnauthorizedError: If no valid credential was presented
            ForbiddenError: If the requester may not delete the comment
            NotFoundError: If the comment does not exist
        """
        actor = await self.identity_service.resolve(request.auth_token, strict=True)
        if actor.is_anonymous:
            raise UnauthorizedError("Sign in to delete comments")

        comment_id = CommentId(request.comment_id)
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if not actor.is_admin and not actor.owns(comment.user_id):
            logfire.warn("Comment delete refused", comment_id=comment_id)
            raise ForbiddenError("You can only delete your own comments")

        await self.comment_service.delete_comment(comment_id)
        await self.unit_of_work.commit()
        self.comment_cache.clear()
