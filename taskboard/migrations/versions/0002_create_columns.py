"""create columns

Revision ID: 0002_create_columns
Revises: 0001_create_boards
Create Date: 2024-05-26
"""
from alembic import op
import sqlalchemy as sa

revision = "0002_create_columns"
down_revision = "0001_create_boards"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "columns",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("board_id", sa.Integer, sa.ForeignKey("boards.id", ondelete="CASCADE"), nullable=False),
        sa.Column("order", sa.Integer, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_columns_id", "columns", ["id"])
    op.create_index("ix_columns_board_id", "columns", ["board_id"])


def downgrade() -> None:
    op.drop_index("ix_columns_board_id", table_name="columns")
    op.drop_index("ix_columns_id", table_name="columns")
    op.drop_table("columns")
