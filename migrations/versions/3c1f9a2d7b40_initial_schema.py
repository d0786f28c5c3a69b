"""initial_schema

Create the record store schema for Gatehouse:
- Organizations (tenants, with a denormalized member count)
- Users (one record per identity, keyed by identity provider uid)
- Invites (pending/accepted invitations binding an email to org + role)

Revision ID: 3c1f9a2d7b40
Revises:
Create Date: 2026-10-19 09:12:44.201733

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # ORGANIZATIONS table
    # ========================================================================
    op.create_table(
        "organizations",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("created_by", sa.String(128), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("member_count", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="organizations_slug_key"),
        sa.CheckConstraint(
            "member_count >= 0", name="organizations_member_count_positive"
        ),
    )
    op.create_index("idx_organizations_name", "organizations", ["name"])

    # ========================================================================
    # USERS table (keyed by identity provider uid)
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("display_name", sa.Text(), nullable=False, server_default=""),
        sa.Column("photo_url", sa.Text(), nullable=False, server_default=""),
        sa.Column("org_id", sa.String(64), nullable=True),
        sa.Column("role", sa.String(32), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["org_id"], ["organizations.id"], ondelete="RESTRICT"
        ),
        sa.CheckConstraint(
            "role IS NULL OR role IN ('viewer', 'user', 'admin', 'superAdmin')",
            name="users_role_valid",
        ),
    )
    op.create_index("idx_users_email_role", "users", ["email", "role"])
    op.create_index("idx_users_org_id", "users", ["org_id"])

    # ========================================================================
    # INVITES table
    # ========================================================================
    op.create_table(
        "invites",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("org_id", sa.String(64), nullable=False),
        sa.Column("role", sa.String(32), nullable=False),
        sa.Column("invited_by", sa.String(128), nullable=False),
        sa.Column("invite_token", sa.String(255), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="pending"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["org_id"], ["organizations.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint("invite_token", name="invites_invite_token_key"),
        sa.CheckConstraint(
            "role IN ('viewer', 'user', 'admin')", name="invites_role_member_only"
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted')", name="invites_status_valid"
        ),
    )
    # Account-creation lookup: pending invites by email, earliest first
    op.create_index(
        "idx_invites_email_status_created",
        "invites",
        ["email", "status", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("invites")
    op.drop_table("users")
    op.drop_table("organizations")
