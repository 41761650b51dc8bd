"""SQLAlchemy Declarative Base - shared base class for ORM entities.

Invariants:
    - All entities inherit from Base
    - Base is the single source of truth for table metadata
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM entities."""
    pass
