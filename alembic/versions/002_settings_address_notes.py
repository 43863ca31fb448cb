"""Add venue address and notes to conference_settings.

Revision ID: 002_settings_address_notes
Revises: 001_initial
Create Date: 2025-06-16

The admin form already collected both fields; they were dropped on save.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "002_settings_address_notes"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "conference_settings",
        sa.Column("address", sa.Text(), nullable=False, server_default=""),
    )
    op.add_column(
        "conference_settings",
        sa.Column("notes", sa.Text(), nullable=False, server_default=""),
    )


def downgrade() -> None:
    op.drop_column("conference_settings", "notes")
    op.drop_column("conference_settings", "address")
