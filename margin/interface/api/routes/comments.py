"""Comment routes."""

from typing import Any, Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, Field

from margin.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from margin.domain.value import CommentStatus
from margin.interface.api.request import client_ip, extract_token
from margin.interface.api.response import success
from margin.interface.error import MissingQueryError

router = APIRouter(prefix="/api", tags=["comments"], route_class=DishkaRoute)


@router.get("/comment")
async def get_comments(
    request: Request,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    path: str | None = None,
    page: int = 1,
    page_size: int | None = Query(default=None, alias="pageSize"),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    owner: Literal["mine", "all"] | None = None,
    status: str | None = None,
    keyword: str | None = None,
) -> dict[str, Any]:
    """Get comments.

    With ``path`` this is the public (or administrator) view of one page
    of that path's threads. Without it, it is the administrator's
    moderation list, which needs ``owner``.
    """
    token = extract_token(request)
    if path is not None:
        payload = await get_comments_use_case.execute(
            GetCommentsRequest(
                path=path,
                page=page,
                page_size=page_size,
                sort_by=sort_by,
                auth_token=token,
            )
        )
        return success(payload)

    if owner is None:
        raise MissingQueryError(["path", "owner"])
    payload = await list_comments_use_case.execute(
        ListCommentsRequest(
            auth_token=token,
            owner=owner,
            status=status,
            keyword=keyword,
            page=page,
        )
    )
    return success(payload)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    comment: str = Field(min_length=1)
    url: str = Field(min_length=1)
    nick: str | None = None
    mail: str | None = None
    link: str | None = None
    ua: str | None = None
    pid: int | None = None
    rid: int | None = None
    at: str | None = None  # Nick being replied to; display only


@router.post("/comment")
async def create_comment(
    request: Request,
    body: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    lang: str | None = None,
) -> dict[str, Any]:
    """Post a comment or a reply.

    Anonymous posting is allowed unless login is forced. The user agent
    falls back to the request header when the body leaves it out.
    """
    payload = await create_comment_use_case.execute(
        CreateCommentRequest(
            comment=body.comment,
            url=body.url,
            nick=body.nick,
            mail=body.mail,
            link=body.link,
            ua=body.ua or request.headers.get("user-agent"),
            pid=body.pid,
            rid=body.rid,
            client_ip=client_ip(request),
            auth_token=extract_token(request),
            lang=lang,
        )
    )
    return success(payload)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment; omitted fields stay unchanged."""

    like: bool | None = None
    status: CommentStatus | None = None
    sticky: bool | None = None
    comment: str | None = None
    link: str | None = None
    mail: str | None = None
    nick: str | None = None
    ua: str | None = None
    url: str | None = None


@router.put("/comment/{comment_id}")
async def update_comment(
    comment_id: int,
    request: Request,
    body: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> dict[str, Any]:
    """Edit or moderate a comment, or toggle a like (no sign-in needed)."""
    payload = await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            auth_token=extract_token(request),
            **body.model_dump(exclude_none=True),
        )
    )
    return success(payload)


@router.delete("/comment/{comment_id}")
async def delete_comment(
    comment_id: int,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> dict[str, Any]:
    """Delete a comment. Owners and administrators only."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, auth_token=extract_token(request))
    )
    return success()
