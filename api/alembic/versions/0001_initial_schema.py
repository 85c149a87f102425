"""Initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "site_settings",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("slug", sa.String(100), nullable=False, unique=True, index=True),
        sa.Column("webhook_url", sa.Text, nullable=False, server_default=""),
        sa.Column("enabled_post_types", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("template", sa.Text, nullable=False, server_default=""),
        sa.Column("excerpt_length", sa.Integer, nullable=False, server_default="55"),
        sa.Column("excerpt_more", sa.String(100), nullable=False, server_default=" ..."),
        sa.Column("hook_key_hash", sa.String(255), nullable=False),
        sa.Column("key_prefix", sa.String(12), nullable=True),
        sa.Column("is_active", sa.Boolean, server_default=sa.true()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("site_settings")
