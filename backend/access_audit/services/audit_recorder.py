"""
Audit recorder - builds and appends one immutable AuditLog per operation.

Callers sanitize payloads before handing them over: this recorder is
entity-agnostic and never redacts credentials, tokens or secrets itself.

Failure semantics:
- Missing/blank entity_type, entity_id or actor_id raise ValidationError
  before the store is touched
- Store errors propagate; a silently dropped audit record is a compliance
  defect, so callers wanting best-effort logging must catch explicitly

Caller pattern for a strict before/after pair:
    old = snapshot(entity)          # read before mutating
    await mutate(entity)
    await recorder.log_update("user", entity.id, actor_id, old, snapshot(entity))
"""

from __future__ import annotations

import logging
from typing import Any

from access_audit.models.audit_log import AuditLog
from access_audit.schemas.audit_log import AuditLogCreate
from access_audit.schemas.enums import AuditOperation
from access_audit.services.exceptions import ValidationError
from access_audit.services.protocols import AuditLogStore

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("entity_type", "entity_id", "actor_id")


class AuditRecorder:
    """Validates audit descriptors and appends them to an AuditLogStore."""

    def __init__(self, store: AuditLogStore):
        self.store = store

    async def log(self, entry: AuditLogCreate) -> AuditLog:
        """
        Record a generic operation. All log_* helpers delegate here.

        Raises:
            ValidationError: If entity_type, entity_id or actor_id is empty
        """
        cleaned: dict[str, str] = {}
        for field in _REQUIRED_FIELDS:
            value = getattr(entry, field)
            if value is None or not value.strip():
                raise ValidationError(f"{field} cannot be empty", field=field)
            cleaned[field] = value.strip()

        record = AuditLog(
            operation=entry.operation,
            entity_type=cleaned["entity_type"],
            entity_id=cleaned["entity_id"],
            actor_id=cleaned["actor_id"],
            old_values=entry.old_values,
            new_values=entry.new_values,
            metadata_=entry.metadata,
        )
        stored = await self.store.append(record)
        logger.debug(
            f"Audit log {stored.id} recorded: {stored.operation} {stored.entity_type}"
        )
        return stored

    async def log_create(
        self,
        entity_type: str,
        entity_id: str,
        actor_id: str,
        new_values: dict[str, Any],
        metadata: dict[str, Any] | None = None,
    ) -> AuditLog:
        """Record a CREATE; old_values is always null."""
        return await self.log(
            AuditLogCreate(
                operation=AuditOperation.CREATE,
                entity_type=entity_type,
                entity_id=entity_id,
                actor_id=actor_id,
                old_values=None,
                new_values=new_values,
                metadata=metadata,
            )
        )

    async def log_update(
        self,
        entity_type: str,
        entity_id: str,
        actor_id: str,
        old_values: dict[str, Any],
        new_values: dict[str, Any],
        metadata: dict[str, Any] | None = None,
    ) -> AuditLog:
        """Record an UPDATE with both snapshots as given."""
        return await self.log(
            AuditLogCreate(
                operation=AuditOperation.UPDATE,
                entity_type=entity_type,
                entity_id=entity_id,
                actor_id=actor_id,
                old_values=old_values,
                new_values=new_values,
                metadata=metadata,
            )
        )

    async def log_delete(
        self,
        entity_type: str,
        entity_id: str,
        actor_id: str,
        old_values: dict[str, Any],
        metadata: dict[str, Any] | None = None,
    ) -> AuditLog:
        """Record a (soft) DELETE; new_values is always null."""
        return await self.log(
            AuditLogCreate(
                operation=AuditOperation.DELETE,
                entity_type=entity_type,
                entity_id=entity_id,
                actor_id=actor_id,
                old_values=old_values,
                new_values=None,
                metadata=metadata,
            )
        )

    async def log_restore(
        self,
        entity_type: str,
        entity_id: str,
        actor_id: str,
        new_values: dict[str, Any],
        metadata: dict[str, Any] | None = None,
    ) -> AuditLog:
        """Record a RESTORE of a soft-deleted entity; old_values is always null."""
        return await self.log(
            AuditLogCreate(
                operation=AuditOperation.RESTORE,
                entity_type=entity_type,
                entity_id=entity_id,
                actor_id=actor_id,
                old_values=None,
                new_values=new_values,
                metadata=metadata,
            )
        )

    async def log_read(
        self,
        entity_type: str,
        entity_id: str,
        actor_id: str,
        metadata: dict[str, Any] | None = None,
    ) -> AuditLog:
        """
        Record a READ of sensitive data; both snapshots are null.

        Only for sensitive-data access, not general query logging.
        """
        return await self.log(
            AuditLogCreate(
                operation=AuditOperation.READ,
                entity_type=entity_type,
                entity_id=entity_id,
                actor_id=actor_id,
                metadata=metadata,
            )
        )
