"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

from margin.domain.model import Comment, User
from margin.domain.repository import CommentRepository, UserRepository
from margin.domain.service import JWTService
from margin.domain.value import CommentStatus, UserType
from margin.util.password import hash_password

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


async def add_user(
    user_repo: UserRepository,
    email: str = "alice@example.com",
    display_name: str = "Alice",
    password: str = "s3cret-pass",
    role: UserType = UserType.GUEST,
    **fields,
) -> User:
    """Store an account with a real bcrypt hash of ``password``."""
    return await user_repo.save(
        User(
            display_name=display_name,
            email=email,
            password=hash_password(password),
            role=role,
            **fields,
        )
    )


async def add_comment(
    comment_repo: CommentRepository,
    text: str = "Hello",
    url: str = "/post/1",
    minutes: int = 0,
    status: CommentStatus = CommentStatus.APPROVED,
    **fields,
) -> Comment:
    """Store a comment inserted ``minutes`` after a fixed base time.

    Fixed timestamps keep ordering assertions deterministic.
    """
    at = BASE_TIME + timedelta(minutes=minutes)
    return await comment_repo.save(
        Comment(
            comment=text,
            url=url,
            status=status,
            created_at=at,
            updated_at=at,
            inserted_at=at,
            **fields,
        )
    )


def bearer(jwt_service: JWTService, user: User) -> str:
    """Sign a token for ``user``."""
    return jwt_service.sign(user.email)
