"""Create people table

Revision ID: 3c1f0a9d52e7
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from rollcall.adapters.db.sa_types import BIGINT_PK, UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d52e7"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "people",
        sa.Column(
            "seq",
            BIGINT_PK,
            sa.Identity(always=False, start=1),
            nullable=False,
            comment="Insertion order; list() reads in this order.",
        ),
        sa.Column(
            "person_id",
            sa.String(length=64),
            nullable=False,
            comment="Store-assigned identifier.",
        ),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column(
            "recorded_at",
            UTCDateTime(),
            nullable=False,
            comment="UTC time the row was created.",
        ),
        sa.PrimaryKeyConstraint("seq", name=op.f("pk_people")),
        sa.UniqueConstraint("person_id", name=op.f("uq_people_person_id")),
        sa.CheckConstraint("age >= 0", name=op.f("ck_people_age_non_negative")),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("people")
