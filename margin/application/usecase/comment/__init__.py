"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .list_comments import ListCommentsRequest, ListCommentsUseCase
from .presenter import CommentEntry, CommentPresenter, ReplyUser
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentEntry",
    "CommentPresenter",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "ReplyUser",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
