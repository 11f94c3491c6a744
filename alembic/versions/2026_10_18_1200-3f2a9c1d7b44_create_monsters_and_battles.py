# pyright: reportAttributeAccessIssue=false, reportUndefinedVariable=false
"""create monsters and battles

Revision ID: 3f2a9c1d7b44
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel.sql.sqltypes

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b44"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "monsters",
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("attack", sa.Integer(), nullable=False),
        sa.Column("defense", sa.Integer(), nullable=False),
        sa.Column("hp", sa.Integer(), nullable=False),
        sa.Column("speed", sa.Integer(), nullable=False),
        sa.Column("image_url", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_monsters_id"), "monsters", ["id"], unique=False)
    op.create_index(op.f("ix_monsters_name"), "monsters", ["name"], unique=False)

    op.create_table(
        "battles",
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("monster_a_id", sa.Integer(), nullable=False),
        sa.Column("monster_b_id", sa.Integer(), nullable=False),
        sa.Column("winner_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["monster_a_id"], ["monsters.id"]),
        sa.ForeignKeyConstraint(["monster_b_id"], ["monsters.id"]),
        sa.ForeignKeyConstraint(["winner_id"], ["monsters.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_battles_id"), "battles", ["id"], unique=False)
    op.create_index(op.f("ix_battles_monster_a_id"), "battles", ["monster_a_id"], unique=False)
    op.create_index(op.f("ix_battles_monster_b_id"), "battles", ["monster_b_id"], unique=False)
    op.create_index(op.f("ix_battles_winner_id"), "battles", ["winner_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_battles_winner_id"), table_name="battles")
    op.drop_index(op.f("ix_battles_monster_b_id"), table_name="battles")
    op.drop_index(op.f("ix_battles_monster_a_id"), table_name="battles")
    op.drop_index(op.f("ix_battles_id"), table_name="battles")
    op.drop_table("battles")

    op.drop_index(op.f("ix_monsters_name"), table_name="monsters")
    op.drop_index(op.f("ix_monsters_id"), table_name="monsters")
    op.drop_table("monsters")
