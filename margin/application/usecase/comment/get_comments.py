"""Get comments use case (the comment aggregation engine)."""

import math

import logfire
from pydantic import BaseModel, Field

from margin.config import CommentSettings
from margin.domain.error import ValidationError
from margin.domain.model import Actor
from margin.domain.service import (
    CommentCache,
    CommentService,
    IdentityService,
    RenderService,
    UserService,
)
from margin.domain.value import CommentSort

from margin.application.usecase.base import BaseUseCase, Payload
from margin.application.usecase.comment.presenter import CommentEntry, CommentPresenter


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    path: str = Field(min_length=1)
    page: int = 1
    page_size: int | None = None  # Falls back to the configured default
    sort_by: str | None = None  # insertedAt_desc | insertedAt_asc | like_desc
    auth_token: str | None = None  # Optional; a bad token reads as anonymous


class GetCommentsResponse(BaseModel):
    """One page of comment trees plus pagination metadata."""

    count: int
    data: list[CommentEntry]
    page: int
    page_size: int = Field(serialization_alias="pageSize")
    total_pages: int = Field(serialization_alias="totalPages")


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading one page of a path's comment threads.

    Public pages are served from and stored into the comment cache;
    administrator pages include hidden comments and private fields and
    never touch the cache.
    """

    def __init__(
        self,
        comment_service: CommentService,
        identity_service: IdentityService,
        render_service: RenderService,
        user_service: UserService,
        comment_cache: CommentCache,
        settings: CommentSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            identity_service: Resolves the requester from the bearer token
            render_service: Presentation fields (HTML, avatar, UA, region)
            user_service: Owning account lookups
            comment_cache: Process-wide page cache
            settings: Comment settings (page sizes)
        """
        self.comment_service = comment_service
        self.identity_service = identity_service
        self.render_service = render_service
        self.user_service = user_service
        self.comment_cache = comment_cache
        self.settings = settings

    async def execute(self, request: GetCommentsRequest) -> Payload:
        """Execute get comments flow.

        Steps:
        1. Resolve the requester (leniently)
        2. Serve the default public view from cache when present
        3. Fetch the page of roots, then each root's replies
        4. Decorate every node and assemble the tree
        5. Store the default public view, unless a write landed meanwhile

        Raises:
            ValidationError: If the page number is below 1
        """
        if request.page < 1:
            raise ValidationError("page must be at least 1")
        page_size = self._page_size(request.page_size)

        actor = await self.identity_service.resolve(request.auth_token)
        sort = CommentSort.parse(request.sort_by)
        # Only the default public view is cached; entries carry no sort or size
        cacheable = (
            not actor.is_admin
            and sort is CommentSort.INSERTED_AT_DESC
            and page_size == self.settings.default_page_size
        )
        generation = self.comment_cache.generation
        if cacheable:
            cached = self.comment_cache.get(request.path, request.page)
            if cached is not None:
                logfire.info("Comment page served from cache", path=request.path)
                return cached

        with logfire.span(
            "get_comments",
            path=request.path,
            page=request.page,
            admin=actor.is_admin,
        ):
            payload = (await self._assemble(request, sort, page_size, actor)).model_dump(
                by_alias=True, mode="json"
            )

        if cacheable:
            self.comment_cache.put(
                request.path, request.page, payload, generation=generation
            )
        return payload

    async def _assemble(
        self,
        request: GetCommentsRequest,
        sort: CommentSort,
        page_size: int,
        actor: Actor,
    ) -> GetCommentsResponse:
        include_hidden = actor.is_admin
        presenter = CommentPresenter(
            self.render_service, self.user_service, reveal_private=actor.is_admin
        )

        roots = await self.comment_service.list_roots(
            path=request.path,
            sort=sort,
            page=request.page,
            page_size=page_size,
            include_hidden=include_hidden,
        )

        count = roots.total
        entries: list[CommentEntry] = []
        for root in roots.items:
            # Replies carry the thread author's level, not their own
            level = await self.comment_service.author_level(root.nick, root.mail)
            entry = await presenter.present(root, level=level)

            children = await self.comment_service.list_children(
                path=request.path, root_id=root.id, include_hidden=include_hidden
            )
            count += len(children)
            entry.children = [
                await presenter.present(child, level=level, reply_to=root)
                for child in children
            ]
            entries.append(entry)

        return GetCommentsResponse(
            count=count,
            data=entries,
            page=request.page,
            page_size=page_size,
            total_pages=math.ceil(roots.total / page_size),
        )

    def _page_size(self, requested: int | None) -> int:
        if requested is None:
            return self.settings.default_page_size
        if requested < 1:
            raise ValidationError("pageSize must be at least 1")
        return min(requested, self.settings.max_page_size)
