"""Client-facing comment representation.

Field names are a compatibility surface shared with Waline clients and
must not change.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from margin.domain.model import Comment, User
from margin.domain.service import RenderService, UserService
from margin.domain.value import UserId

# Keys left out of the payload entirely when they have no value
_OMIT_WHEN_NONE = ("type", "reply_user")


class ReplyUser(BaseModel):
    """Who a reply answers, for quoting."""

    avatar: str
    link: Optional[str] = None
    nick: Optional[str] = None


class CommentEntry(BaseModel):
    """One decorated comment, possibly with its replies."""

    model_config = ConfigDict(populate_by_name=True)

    object_id: int = Field(alias="objectId")
    status: str
    like: int
    link: Optional[str] = None
    mail: Optional[str] = None
    nick: Optional[str] = None
    user_id: Optional[int] = None
    browser: str = ""
    os: str = ""
    type: Optional[str] = None
    ip: Optional[str] = None
    orig: str
    url: str
    pid: Optional[int] = None
    rid: Optional[int] = None
    time: int
    inserted_at: datetime = Field(alias="insertedAt")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    comment: str
    avatar: str
    level: Optional[int] = None
    label: Optional[str] = None
    sticky: bool = False
    addr: Optional[str] = None
    children: list["CommentEntry"] = Field(default_factory=list)
    reply_user: Optional[ReplyUser] = None

    @model_serializer(mode="wrap")
    def _omit_empty_optionals(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        for key in _OMIT_WHEN_NONE:
            if data.get(key) is None:
                data.pop(key, None)
        return data

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class CommentPresenter:
    """Decorates stored comments for one request.

    Owning accounts are looked up once per request. Mail and IP are only
    filled in when ``reveal_private`` is set.
    """

    def __init__(
        self,
        render_service: RenderService,
        user_service: UserService,
        reveal_private: bool = False,
    ) -> None:
        self.render_service = render_service
        self.user_service = user_service
        self.reveal_private = reveal_private
        self._owners: dict[UserId, Optional[User]] = {}

    async def owner(self, user_id: UserId) -> Optional[User]:
        if user_id not in self._owners:
            self._owners[user_id] = await self.user_service.find_by_id(user_id)
        return self._owners[user_id]

    async def present(
        self,
        comment: Comment,
        level: Optional[int] = None,
        reply_to: Optional[Comment] = None,
    ) -> CommentEntry:
        render = self.render_service
        browser, os_name = render.browser_and_os(comment.ua)
        entry = CommentEntry(
            object_id=comment.id,
            status=comment.status.value,
            like=comment.like,
            link=comment.link,
            nick=comment.nick,
            user_id=comment.user_id,
            browser=browser,
            os=os_name,
            orig=comment.comment,
            url=comment.url,
            pid=comment.pid,
            rid=comment.rid,
            time=int(comment.created_at.timestamp() * 1000),
            inserted_at=comment.inserted_at,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            comment=render.render_content(comment.comment),
            avatar=render.avatar(comment.mail),
            level=level,
            sticky=comment.sticky,
            addr=render.region(comment.ip),
        )

        if comment.user_id is not None:
            user = await self.owner(comment.user_id)
            if user is not None:
                entry.label = user.label
                entry.type = user.role_name
                if user.avatar:
                    entry.avatar = user.avatar

        if self.reveal_private:
            entry.mail = comment.mail
            entry.ip = comment.ip

        if reply_to is not None:
            entry.reply_user = ReplyUser(
                avatar=render.avatar(reply_to.mail),
                link=reply_to.link,
                nick=reply_to.nick,
            )
        return entry
