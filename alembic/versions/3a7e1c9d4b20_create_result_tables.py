"""Create result_event_mapping and event_id_map

Revision ID: 3a7e1c9d4b20
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3a7e1c9d4b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "event_id_map",
        sa.Column("event_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("api_event_id", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("event_id"),
        sa.UniqueConstraint("api_event_id"),
    )
    op.create_table(
        "result_event_mapping",
        sa.Column("event_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("api_event_id", sa.String(length=64), nullable=False),
        sa.Column("comp_type", sa.String(length=64), nullable=False),
        sa.Column("completed", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("outcome", sa.String(length=2), nullable=True),
        sa.Column("score", sa.String(length=16), nullable=True),
        sa.Column("last_updated_dt", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("event_id"),
        sa.UniqueConstraint("api_event_id"),
    )
    op.create_index(
        "ix_result_event_mapping_completed",
        "result_event_mapping",
        ["completed"],
        unique=False,
    )
    op.create_index(
        "ix_result_event_mapping_comp_type",
        "result_event_mapping",
        ["comp_type"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_result_event_mapping_comp_type", table_name="result_event_mapping")
    op.drop_index("ix_result_event_mapping_completed", table_name="result_event_mapping")
    op.drop_table("result_event_mapping")
    op.drop_table("event_id_map")
