"""create tasks

Subtask counts are derived at query time, so no counter column is stored.

Revision ID: 0003_create_tasks
Revises: 0002_create_columns
Create Date: 2024-05-26
"""
from alembic import op
import sqlalchemy as sa

revision = "0003_create_tasks"
down_revision = "0002_create_columns"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("column_id", sa.Integer, sa.ForeignKey("columns.id", ondelete="CASCADE"), nullable=False),
        sa.Column("order", sa.Integer, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_tasks_id", "tasks", ["id"])
    op.create_index("ix_tasks_column_id", "tasks", ["column_id"])


def downgrade() -> None:
    op.drop_index("ix_tasks_column_id", table_name="tasks")
    op.drop_index("ix_tasks_id", table_name="tasks")
    op.drop_table("tasks")
