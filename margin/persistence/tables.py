"""SQLAlchemy table definitions for Margin.

Table and column names follow the Waline schema so existing databases
can be served as-is. They match the Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

# ============================================================================
# COMMENTS
# ============================================================================
comments_table = Table(
    "wl_comment",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("user_id", BigInteger, nullable=True),
    Column("comment", Text, nullable=False),
    Column("ip", String(100), nullable=True),
    Column("link", String(255), nullable=True),
    Column("mail", String(255), nullable=True),
    Column("nick", String(255), nullable=True),
    Column("pid", BigInteger, nullable=True),  # Direct parent
    Column("rid", BigInteger, nullable=True),  # Thread root
    Column("sticky", SmallInteger, nullable=True),
    Column("status", String(50), nullable=False, server_default="approved"),
    Column("like", Integer, nullable=False, server_default="0"),
    Column("ua", Text, nullable=True),
    Column("url", String(255), nullable=False),
    Column(
        "inserted_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_wl_comment_url_pid", comments_table.c.url, comments_table.c.pid)
Index("idx_wl_comment_nick_mail", comments_table.c.nick, comments_table.c.mail)

# ============================================================================
# USERS
# ============================================================================
users_table = Table(
    "wl_users",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("display_name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password", String(255), nullable=False),
    Column("type", String(50), nullable=False),  # administrator | guest | verify:<token>:<ms>
    Column("label", String(255), nullable=True),
    Column("url", String(255), nullable=True),
    Column("avatar", String(255), nullable=True),
    Column("github", String(255), nullable=True),
    Column("twitter", String(255), nullable=True),
    Column("facebook", String(255), nullable=True),
    Column("google", String(255), nullable=True),
    Column("weibo", String(255), nullable=True),
    Column("qq", String(255), nullable=True),
    Column("2fa", String(32), key="two_factor_auth", nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_wl_users_type", users_table.c.type)
