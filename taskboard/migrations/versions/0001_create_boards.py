"""create boards

Revision ID: 0001_create_boards
Revises:
Create Date: 2024-05-26
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_create_boards"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "boards",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_boards_id", "boards", ["id"])


def downgrade() -> None:
    op.drop_index("ix_boards_id", table_name="boards")
    op.drop_table("boards")
