"""SQLAlchemy table definitions for Newsboard.

Column types are kept portable so the same metadata creates the schema on
PostgreSQL and on SQLite.
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
    func,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USER TABLE
# ============================================================================
users_table = Table(
    "user",
    metadata,
    Column("id", Text, primary_key=True),
    Column("username", Text, nullable=False),
    Column("password_hash", Text, nullable=False),
    UniqueConstraint("username", name="user_username_unique"),
)

# ============================================================================
# SESSION TABLE
# ============================================================================
sessions_table = Table(
    "session",
    metadata,
    Column("id", Text, primary_key=True),
    Column("user_id", Text, ForeignKey("user.id"), nullable=False),
    Column("expires_at", DateTime(timezone=True), nullable=False),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Text, nullable=False),
    Column("title", Text, nullable=False),
    Column("url", Text, nullable=True),
    Column("content", Text, nullable=True),
    Column("points", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)

Index("idx_posts_user_id", posts_table.c.user_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Text, nullable=False),
    Column("post_id", Integer, nullable=False),
    Column("parent_comment_id", Integer, nullable=True),  # NULL for root comments
    Column("content", Text, nullable=False),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("points", Integer, nullable=False, server_default="0"),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)

# ============================================================================
# UPVOTE TABLES
# ============================================================================
post_upvotes_table = Table(
    "post_upvotes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("post_id", Integer, nullable=False),
    Column("user_id", Text, nullable=False),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)

Index(
    "idx_post_upvotes_post_user",
    post_upvotes_table.c.post_id,
    post_upvotes_table.c.user_id,
)

comment_upvotes_table = Table(
    "comment_upvotes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("comment_id", Integer, nullable=False),
    Column("user_id", Text, nullable=False),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)

Index(
    "idx_comment_upvotes_comment_user",
    comment_upvotes_table.c.comment_id,
    comment_upvotes_table.c.user_id,
)
