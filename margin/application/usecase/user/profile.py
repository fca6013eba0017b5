"""Client-facing account representation."""

import hashlib
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from margin.domain.model import User
from margin.domain.service import RenderService


class UserProfile(BaseModel):
    """Account fields returned by login and current-user requests."""

    model_config = ConfigDict(populate_by_name=True)

    object_id: int = Field(alias="objectId")
    display_name: str
    email: str
    type: str
    label: Optional[str] = None
    url: Optional[str] = None
    avatar: str
    two_factor: Optional[str] = Field(default=None, alias="2fa")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    mail_md5: str = Field(alias="mailMd5")
    token: Optional[str] = None

    @classmethod
    def from_user(
        cls, user: User, render_service: RenderService, token: str | None = None
    ) -> "UserProfile":
        return cls(
            object_id=user.id,
            display_name=user.display_name,
            email=user.email,
            type=user.role_name,
            label=user.label,
            url=user.url,
            avatar=user.avatar or render_service.avatar(user.email),
            two_factor=user.two_factor_secret,
            created_at=user.created_at,
            updated_at=user.updated_at,
            mail_md5=hashlib.md5(user.email.encode("utf-8")).hexdigest(),
            token=token,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
