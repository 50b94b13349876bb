"""
Base SQLModel classes with common fields.

Design decisions:
- Use SQLModel for combined Pydantic + SQLAlchemy functionality
- Opaque string identifiers (UUID4 text) for every primary key, so ids
  coming from the authentication layer can be stored and compared as-is

Note on Column reuse: SQLAlchemy Column objects cannot be shared between
tables. Base classes therefore declare plain Fields (no sa_column) and
leave sa_column to the concrete table models.
"""

from __future__ import annotations

import uuid as uuid_lib
from datetime import UTC, datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

__all__ = [
    "SQLModel",
    "BaseTableModel",
    "LinkTableModel",
    "new_id",
    "utc_now",
]

ID_LENGTH = 36


def utc_now() -> datetime:
    """Get current UTC time."""
    return datetime.now(UTC)


def new_id() -> str:
    """Generate a new opaque identifier."""
    return str(uuid_lib.uuid4())


class BaseTableModel(SQLModel):
    """
    Base class for soft-deletable entity tables (users, groups, roles, permissions).

    Provides:
    - id: Opaque string primary key
    - created_at, updated_at: Automatic timestamps
    - deleted_at: Soft-delete support

    Usage:
        class Group(BaseTableModel, table=True):
            __tablename__ = "groups"
            name: str = Field(max_length=255)

    Note: Subclasses must set table=True to create actual tables.
    """

    id: str = Field(
        default_factory=new_id,
        primary_key=True,
        max_length=ID_LENGTH,
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=sa.DateTime(timezone=True),
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=sa.DateTime(timezone=True),
    )

    # Soft delete - null means active, set means deleted
    deleted_at: datetime | None = Field(
        default=None,
        sa_type=sa.DateTime(timezone=True),
    )

    @property
    def is_deleted(self) -> bool:
        """Check if record has been soft-deleted."""
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        """Mark record as deleted."""
        self.deleted_at = utc_now()

    def restore(self) -> None:
        """Restore a soft-deleted record."""
        self.deleted_at = None


class LinkTableModel(SQLModel):
    """
    Base class for many-to-many link rows (role_permissions, user_roles).

    Links are never soft-deleted; removing a link deletes the row.
    """

    id: str = Field(
        default_factory=new_id,
        primary_key=True,
        max_length=ID_LENGTH,
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=sa.DateTime(timezone=True),
    )
