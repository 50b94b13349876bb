"""
AuditLog model - one immutable historical fact about a mutation.

Design notes:
- NO soft delete and NO updated_at - audit logs are permanent records
- entity_type/entity_id are free text so any domain entity can be audited
- actor_id is nulled by the database when the referenced user is erased,
  the record itself survives
- old_values/new_values/metadata arrive already sanitized by the caller
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

from access_audit.models.base import ID_LENGTH, new_id, utc_now
from access_audit.schemas.enums import AuditOperation

__all__ = ["AuditLog"]

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONPayload = JSON().with_variant(JSONB(), "postgresql")


class AuditLog(SQLModel, table=True):
    """
    Permanent record of one operation on one entity.

    Unlike other models, audit logs are NEVER updated or deleted.
    """

    __tablename__ = "audit_logs"
    __table_args__ = (
        Index("idx_audit_entity", "entity_type", "entity_id"),
        Index("idx_audit_actor", "actor_id"),
        Index("idx_audit_operation", "operation"),
        Index("idx_audit_timestamp", "timestamp"),
    )

    id: str | None = Field(
        default_factory=new_id,
        sa_column=Column(String(ID_LENGTH), primary_key=True),
    )

    # What was done
    operation: AuditOperation = Field(
        sa_column=Column(String(20), nullable=False),
    )

    # To what
    entity_type: str = Field(
        sa_column=Column(Text, nullable=False),
    )
    entity_id: str = Field(
        sa_column=Column(Text, nullable=False),
    )

    # By whom
    actor_id: str | None = Field(
        default=None,
        sa_column=Column(
            String(ID_LENGTH),
            ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )

    # State snapshots
    old_values: dict[str, Any] | None = Field(
        default=None,
        sa_column=Column(JSONPayload, nullable=True),
    )
    new_values: dict[str, Any] | None = Field(
        default=None,
        sa_column=Column(JSONPayload, nullable=True),
    )

    # Request context; "metadata" is reserved on declarative classes
    metadata_: dict[str, Any] | None = Field(
        default=None,
        sa_column=Column("metadata", JSONPayload, nullable=True),
    )

    # When - set once, never updated
    timestamp: datetime | None = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), server_default=func.now(), nullable=False),
    )
