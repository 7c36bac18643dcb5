from __future__ import annotations
"""server/prometheus_lens/migrations/versions/0001_initial.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schéma initial : asset_folders + assets.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

# JSONB / TEXT[] sous PostgreSQL, JSON ailleurs
CONFIGURATION_TYPE = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")
TAGS_TYPE = sa.JSON().with_variant(postgresql.ARRAY(sa.Text()), "postgresql")


def upgrade() -> None:
    op.create_table(
        "asset_folders",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("parent_id", sa.String(255), nullable=True),
        sa.ForeignKeyConstraint(["parent_id"], ["asset_folders.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_asset_folders_parent_id", "asset_folders", ["parent_id"], unique=False)

    op.create_table(
        "assets",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("status", sa.String(50), server_default="pending", nullable=False),
        sa.Column("last_checked", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("grafana_link", sa.Text(), nullable=True),
        sa.Column("configuration", CONFIGURATION_TYPE, nullable=True),
        sa.Column("tags", TAGS_TYPE, nullable=True),
        sa.Column("folder_id", sa.String(255), nullable=True),
        sa.ForeignKeyConstraint(["folder_id"], ["asset_folders.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_assets_name", "assets", ["name"], unique=False)
    op.create_index("ix_assets_folder_id", "assets", ["folder_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_assets_folder_id", table_name="assets")
    op.drop_index("ix_assets_name", table_name="assets")
    op.drop_table("assets")
    op.drop_index("ix_asset_folders_parent_id", table_name="asset_folders")
    op.drop_table("asset_folders")
