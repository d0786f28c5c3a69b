"""SQLAlchemy table definitions for the record store.

One table per record collection: users, organizations, invites. Column types
are kept portable so the same tables run on PostgreSQL in production and on
SQLite in repository tests. They match the schema in the Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (keyed by identity provider uid)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(128), primary_key=True),
    Column("email", String(320), nullable=False),
    Column("display_name", Text, nullable=False, server_default=""),
    Column("photo_url", Text, nullable=False, server_default=""),
    Column(
        "org_id",
        String(64),
        ForeignKey("organizations.id", ondelete="RESTRICT"),
        nullable=True,  # NULL only for the super admin
    ),
    Column("role", String(32), nullable=True),  # NULL = deactivated
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    CheckConstraint(
        "role IS NULL OR role IN ('viewer', 'user', 'admin', 'superAdmin')",
        name="users_role_valid",
    ),
)

Index("idx_users_email_role", users_table.c.email, users_table.c.role)
Index("idx_users_org_id", users_table.c.org_id)

# ============================================================================
# ORGANIZATIONS TABLE
# ============================================================================
organizations_table = Table(
    "organizations",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(200), nullable=False),
    Column("slug", String(100), nullable=False, unique=True),
    Column("created_by", String(128), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("member_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("member_count >= 0", name="organizations_member_count_positive"),
)

Index("idx_organizations_name", organizations_table.c.name)

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("email", String(320), nullable=False),
    Column(
        "org_id",
        String(64),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("role", String(32), nullable=False),
    Column("invited_by", String(128), nullable=False),
    Column("invite_token", String(255), nullable=False, unique=True),
    Column("status", String(16), nullable=False, server_default="pending"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("expires_at", DateTime(timezone=True), nullable=False),
    CheckConstraint(
        "role IN ('viewer', 'user', 'admin')", name="invites_role_member_only"
    ),
    CheckConstraint(
        "status IN ('pending', 'accepted')", name="invites_status_valid"
    ),
)

# Account-creation lookup: email + status, ordered by created_at
Index(
    "idx_invites_email_status_created",
    invites_table.c.email,
    invites_table.c.status,
    invites_table.c.created_at,
)
