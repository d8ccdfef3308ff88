"""Declarative Base — shared metadata for the users, photos, likes and messages tables.

Invariants:
    - Every model inherits from Base; alembic reads Base.metadata
    - Constraint and index names follow NAMING_CONVENTION so migrations are reproducible
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all Dating API ORM models."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
