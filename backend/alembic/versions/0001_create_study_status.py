"""create study_status

Revision ID: 0001_create_study_status
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "0001_create_study_status"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "study_status",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("study_token", sa.Text(), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_study_status_token_timestamp", "study_status", ["study_token", "timestamp"])


def downgrade() -> None:
    op.drop_index("ix_study_status_token_timestamp", table_name="study_status")
    op.drop_table("study_status")
