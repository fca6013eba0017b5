"""initial_schema

Create the comment engine schema, named after the Waline tables so an
existing deployment's data can be served unchanged:
- wl_comment (page-scoped comments, replies linked by pid/rid)
- wl_users (registered accounts, roles and pending verifications)

Revision ID: 3c41d9e07a52
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c41d9e07a52"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""

    # ========================================================================
    # WL_COMMENT table
    # ========================================================================
    op.create_table(
        "wl_comment",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=True),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column("ip", sa.String(100), nullable=True),
        sa.Column("link", sa.String(255), nullable=True),
        sa.Column("mail", sa.String(255), nullable=True),
        sa.Column("nick", sa.String(255), nullable=True),
        sa.Column("pid", sa.BigInteger(), nullable=True),  # Direct parent
        sa.Column("rid", sa.BigInteger(), nullable=True),  # Thread root
        sa.Column("sticky", sa.SmallInteger(), nullable=True),
        sa.Column(
            "status", sa.String(50), nullable=False, server_default="approved"
        ),
        sa.Column("like", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("ua", sa.Text(), nullable=True),
        sa.Column("url", sa.String(255), nullable=False),
        _timestamp("inserted_at"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_wl_comment_url_pid", "wl_comment", ["url", "pid"])
    op.create_index("idx_wl_comment_nick_mail", "wl_comment", ["nick", "mail"])

    # ========================================================================
    # WL_USERS table
    # ========================================================================
    op.create_table(
        "wl_users",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        # administrator | guest | verify:<token>:<expiry ms>
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("label", sa.String(255), nullable=True),
        sa.Column("url", sa.String(255), nullable=True),
        sa.Column("avatar", sa.String(255), nullable=True),
        sa.Column("github", sa.String(255), nullable=True),
        sa.Column("twitter", sa.String(255), nullable=True),
        sa.Column("facebook", sa.String(255), nullable=True),
        sa.Column("google", sa.String(255), nullable=True),
        sa.Column("weibo", sa.String(255), nullable=True),
        sa.Column("qq", sa.String(255), nullable=True),
        sa.Column("2fa", sa.String(32), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_wl_users_email"),
    )
    op.create_index("idx_wl_users_type", "wl_users", ["type"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_wl_users_type", table_name="wl_users")
    op.drop_table("wl_users")

    op.drop_index("idx_wl_comment_nick_mail", table_name="wl_comment")
    op.drop_index("idx_wl_comment_url_pid", table_name="wl_comment")
    op.drop_table("wl_comment")
