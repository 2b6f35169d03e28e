"""SQLAlchemy Declarative Base — shared base class for the ORM models.

Invariants:
    - All models inherit from Base
    - Base.metadata is what Alembic and create_schema() read
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for guestbook ORM models."""
    pass
