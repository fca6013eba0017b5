"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic objects, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from margin.domain.model import Comment, User
from margin.domain.value import (
    CommentId,
    CommentStatus,
    UserId,
    format_user_role,
    parse_user_role,
)


def _optional_id(value: Any) -> int | None:
    return int(value) if value is not None else None


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    pid = _optional_id(row.get("pid"))
    # Legacy rows may have a pid without rid; the parent then is the root
    rid = (_optional_id(row.get("rid")) or pid) if pid is not None else None
    return Comment(
        id=CommentId(int(row["id"])),
        user_id=UserId(row["user_id"]) if row.get("user_id") is not None else None,
        comment=row["comment"],
        url=row["url"],
        nick=row.get("nick"),
        mail=row.get("mail"),
        link=row.get("link"),
        ip=row.get("ip"),
        ua=row.get("ua"),
        pid=CommentId(pid) if pid is not None else None,
        rid=CommentId(rid) if rid is not None else None,
        status=CommentStatus(row.get("status") or CommentStatus.APPROVED.value),
        like=max(row.get("like") or 0, 0),
        sticky=bool(row.get("sticky")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        inserted_at=row.get("inserted_at") or row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The id is left out; it is assigned by the database on insert.
    """
    return {
        "user_id": comment.user_id,
        "comment": comment.comment,
        "url": comment.url,
        "nick": comment.nick,
        "mail": comment.mail,
        "link": comment.link,
        "ip": comment.ip,
        "ua": comment.ua,
        "pid": comment.pid,
        "rid": comment.rid,
        "status": comment.status.value,
        "like": comment.like,
        "sticky": 1 if comment.sticky else 0,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
        "inserted_at": comment.inserted_at,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(int(row["id"])),
        display_name=row["display_name"],
        email=row["email"],
        password=row["password"],
        role=parse_user_role(row.get("type")),
        label=row.get("label"),
        url=row.get("url"),
        avatar=row.get("avatar"),
        two_factor_secret=row.get("two_factor_auth", row.get("2fa")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict (id excluded)."""
    return {
        "display_name": user.display_name,
        "email": user.email,
        "password": user.password,
        "type": format_user_role(user.role),
        "label": user.label,
        "url": user.url,
        "avatar": user.avatar,
        "two_factor_auth": user.two_factor_secret,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }
