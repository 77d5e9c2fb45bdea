"""add total players to tournaments

Revision ID: 9c1e4b7a2f60
Revises: 4a7c2e91d0b3
Create Date: 2026-10-17 12:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str | None = "9c1e4b7a2f60"
down_revision: str | None = "4a7c2e91d0b3"
branch_labels: str | None = None
depends_on: str | None = None


def upgrade() -> None:
    op.add_column("tournaments", sa.Column("total_players", sa.Integer(), nullable=True))


def downgrade() -> None:
    op.drop_column("tournaments", "total_players")
