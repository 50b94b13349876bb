"""
AuditLog request/response schemas.

Patterns:
- AuditLogCreate: descriptor handed to the audit recorder (internal use)
- AuditLogRead: Response body - audit logs are immutable, no Update schema

Note: Audit logs are only created through AuditRecorder. The Create schema
does not check for blank strings; AuditRecorder rejects those with its own
ValidationError before touching storage.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from access_audit.schemas.enums import AuditOperation

__all__ = [
    "AuditLogCreate",
    "AuditLogRead",
]


class AuditLogCreate(BaseModel):
    """Descriptor of one operation to record (internal use)."""

    operation: AuditOperation = Field(description="Operation kind")
    entity_type: str | None = Field(
        default=None,
        description="Type of entity affected (e.g., 'user', 'role')",
    )
    entity_id: str | None = Field(
        default=None,
        description="Identifier of the affected entity",
    )
    actor_id: str | None = Field(
        default=None,
        description="Identifier of the principal who performed the operation",
    )
    old_values: dict[str, Any] | None = Field(
        default=None,
        description="Sanitized state before the operation",
    )
    new_values: dict[str, Any] | None = Field(
        default=None,
        description="Sanitized state after the operation",
    )
    metadata: dict[str, Any] | None = Field(
        default=None,
        description="Request context (IP, user agent, reason, etc.)",
    )


class AuditLogRead(BaseModel):
    """Schema for audit log API responses. Audit logs are immutable."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(description="Unique identifier")
    operation: AuditOperation = Field(description="Operation kind")
    entity_type: str = Field(description="Entity type")
    entity_id: str = Field(description="Entity identifier")
    actor_id: str | None = Field(
        default=None,
        description="Actor identifier (null once the actor has been erased)",
    )
    old_values: dict[str, Any] | None = Field(default=None, description="Previous state")
    new_values: dict[str, Any] | None = Field(default=None, description="New state")
    metadata: dict[str, Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("metadata_", "metadata"),
        description="Request context",
    )
    timestamp: datetime = Field(description="When the operation was recorded")
