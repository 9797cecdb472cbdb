"""Initial schema — routing results.

Revision ID: 001
Revises: None
Create Date: 2026-10-17
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "routing_results",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("ticket_id", sa.Integer, nullable=False),
        sa.Column("primary_role", sa.String(50), nullable=False),
        sa.Column("agents_involved", sa.JSON, nullable=False),
        sa.Column("handoff_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("confidence", sa.Float, nullable=False, server_default="0"),
        sa.Column("recommendations", sa.JSON, nullable=False),
        sa.Column("processing_time_ms", sa.Float, nullable=False, server_default="0"),
        sa.Column("summary", sa.Text, nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("idx_routing_results_ticket", "routing_results", ["ticket_id"])


def downgrade() -> None:
    op.drop_index("idx_routing_results_ticket", table_name="routing_results")
    op.drop_table("routing_results")
