"""SQLAlchemy table definitions for DevConnector.

They match the schema defined in Alembic migrations.

Sub-collection tables (likes, comments, experience, education) hold one
row per item. Their ``seq`` identity column records insertion order; items
are read ``ORDER BY seq DESC`` so the most recent comes first.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Date,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column("password_hash", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("uq_users_email", func.lower(users_table.c.email), unique=True)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", Text, nullable=False),
    Column("name", String(255), nullable=False),  # Snapshot of author name
    Column("avatar_url", Text, nullable=True),  # Snapshot of author avatar
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# POST LIKES TABLE
# ============================================================================
# user_id carries no foreign key: likes outlive the account that left them
post_likes_table = Table(
    "post_likes",
    metadata,
    Column("seq", BigInteger, Identity(always=True), primary_key=True),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),
)

# ============================================================================
# POST COMMENTS TABLE
# ============================================================================
# user_id carries no foreign key: comments outlive the account that left them
post_comments_table = Table(
    "post_comments",
    metadata,
    Column("seq", BigInteger, Identity(always=True), primary_key=True),
    Column("id", UUID, nullable=False, unique=True),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, nullable=False),
    Column("text", Text, nullable=False),
    Column("name", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_post_comments_post_id", post_comments_table.c.post_id)

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,  # One profile per user
    ),
    Column("company", String(255), nullable=True),
    Column("website", Text, nullable=True),
    Column("location", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("status", String(255), nullable=False),
    Column("github_username", String(255), nullable=True),
    Column("skills", ARRAY(String(100)), nullable=False),
    Column("social", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PROFILE EXPERIENCE TABLE
# ============================================================================
profile_experience_table = Table(
    "profile_experience",
    metadata,
    Column("seq", BigInteger, Identity(always=True), primary_key=True),
    Column("id", UUID, nullable=False, unique=True),
    Column(
        "profile_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(255), nullable=False),
    Column("company", String(255), nullable=False),
    Column("location", String(255), nullable=True),
    Column("from_date", Date, nullable=False),
    Column("to_date", Date, nullable=True),
    Column("current", Boolean, nullable=False, server_default="false"),
    Column("description", Text, nullable=True),
)

Index("idx_profile_experience_profile_id", profile_experience_table.c.profile_id)

# ============================================================================
# PROFILE EDUCATION TABLE
# ============================================================================
profile_education_table = Table(
    "profile_education",
    metadata,
    Column("seq", BigInteger, Identity(always=True), primary_key=True),
    Column("id", UUID, nullable=False, unique=True),
    Column(
        "profile_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("school", String(255), nullable=False),
    Column("degree", String(255), nullable=False),
    Column("fieldofstudy", String(255), nullable=False),
    Column("from_date", Date, nullable=False),
    Column("to_date", Date, nullable=True),
    Column("current", Boolean, nullable=False, server_default="false"),
    Column("description", Text, nullable=True),
)

Index("idx_profile_education_profile_id", profile_education_table.c.profile_id)
