"""People table schema.

| Constraint            | Purpose                                   |
|-----------------------|-------------------------------------------|
| PRIMARY KEY(seq)      | insertion order; drives `list()` ordering |
| UNIQUE(person_id)     | one row per store-assigned identifier     |
| CHECK(age >= 0)       | ages are never negative                   |

The table is created by the Alembic migration in `alembic/versions`; keep the
two in step.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Identity,
    Integer,
    String,
    Table,
    UniqueConstraint,
)

from .metadata import metadata
from .sa_types import BIGINT_PK, UTCDateTime

__all__ = ["people"]

PERSON_ID_LENGTH = 64

people = Table(
    "people",
    metadata,
    Column(
        "seq",
        BIGINT_PK,
        Identity(start=1),
        primary_key=True,
        comment="Insertion order; list() reads in this order.",
    ),
    Column(
        "person_id",
        String(PERSON_ID_LENGTH),
        nullable=False,
        comment="Store-assigned identifier.",
    ),
    Column("name", String(200), nullable=False),
    Column("age", Integer, nullable=False),
    Column("email", String(320), nullable=True),
    Column(
        "recorded_at",
        UTCDateTime(),
        nullable=False,
        comment="UTC time the row was created.",
    ),
    UniqueConstraint("person_id"),
    CheckConstraint("age >= 0", name="age_non_negative"),
)
