"""
Base Model Module

This module provides a base class for all SQLAlchemy models with common fields:
- id: Primary key (opaque text key)
- created_at: Timestamp when record was created

Column types and defaults mirror the DDL of existing database files,
so integers stand in for booleans and timestamps use CURRENT_TIMESTAMP.
"""

from sqlalchemy import Column, DateTime, Text, func

from account_store.db.database import Base


class BaseModel(Base):
    """
    Abstract base model class that provides common fields for all models.

    Attributes:
        id (TEXT): Primary key, supplied by the caller or generated as a UUID string
        created_at (DATETIME): Set by the database when the row is inserted
    """

    # No table is created for BaseModel itself
    __abstract__ = True

    id = Column(Text, primary_key=True)

    created_at = Column(
        DateTime,
        server_default=func.current_timestamp()
    )

    def __repr__(self):
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"
