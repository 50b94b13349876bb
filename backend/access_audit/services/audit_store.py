"""
Audit Log store - append-only persistence and retrieval.

Audit logs are:
- Immutable (no update/delete method exists on this class)
- Appended only through AuditRecorder
- Queryable by entity, actor, operation, or as a newest-first page
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from access_audit.core.config import AuditSettings, get_settings
from access_audit.models.audit_log import AuditLog
from access_audit.models.base import new_id, utc_now
from access_audit.schemas.enums import AuditOperation
from access_audit.services.exceptions import InfrastructureError


def _coerce_int(value: Any) -> int | None:
    """Best-effort int conversion; None when the value is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return None


def clamp_page(limit: Any, offset: Any, settings: AuditSettings) -> tuple[int, int]:
    """
    Normalize caller-supplied paging values.

    - missing, non-numeric or non-positive limit -> default_page_size
    - limit above max_page_size -> max_page_size
    - missing, non-numeric or negative offset -> 0
    - offset above max_offset -> max_offset
    """
    safe_limit = _coerce_int(limit)
    if safe_limit is None or safe_limit < 1:
        safe_limit = settings.default_page_size
    safe_limit = min(safe_limit, settings.max_page_size)

    safe_offset = _coerce_int(offset)
    if safe_offset is None or safe_offset < 0:
        safe_offset = 0
    safe_offset = min(safe_offset, settings.max_offset)

    return safe_limit, safe_offset


class SqlAuditLogStore:
    """AuditLogStore over an AsyncSession."""

    def __init__(self, db: AsyncSession, settings: AuditSettings | None = None):
        self.db = db
        self.settings = settings or get_settings().audit

    async def append(self, record: AuditLog) -> AuditLog:
        """Insert one record, filling id and timestamp when unset."""
        if record.id is None:
            record.id = new_id()
        if record.timestamp is None:
            record.timestamp = utc_now()

        self.db.add(record)
        try:
            await self.db.commit()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise InfrastructureError("Failed to append audit log") from e
        return record

    async def find_by_entity(self, entity_type: str, entity_id: str) -> list[AuditLog]:
        """Get every record for one entity, newest first."""
        stmt = select(AuditLog).where(
            AuditLog.entity_type == entity_type,
            AuditLog.entity_id == entity_id,
        )
        return await self._fetch_newest_first(stmt)

    async def find_by_actor(self, actor_id: str) -> list[AuditLog]:
        """Get every record created by one actor, newest first."""
        stmt = select(AuditLog).where(AuditLog.actor_id == actor_id)
        return await self._fetch_newest_first(stmt)

    async def find_by_operation(self, operation: AuditOperation) -> list[AuditLog]:
        """Get every record of one operation kind, newest first."""
        stmt = select(AuditLog).where(AuditLog.operation == operation)
        return await self._fetch_newest_first(stmt)

    async def find_all(self, limit: Any = None, offset: Any = None) -> list[AuditLog]:
        """Get one newest-first page of all records; paging is clamped."""
        safe_limit, safe_offset = clamp_page(limit, offset, self.settings)
        stmt = select(AuditLog).offset(safe_offset).limit(safe_limit)
        return await self._fetch_newest_first(stmt)

    async def find_by_id(self, id: str) -> AuditLog | None:
        """Get an audit log by id."""
        stmt = select(AuditLog).where(AuditLog.id == id)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise InfrastructureError("Failed to load audit log") from e
        return result.scalar_one_or_none()

    async def _fetch_newest_first(self, stmt) -> list[AuditLog]:
        try:
            result = await self.db.execute(stmt.order_by(AuditLog.timestamp.desc()))
        except SQLAlchemyError as e:
            raise InfrastructureError("Failed to query audit logs") from e
        return list(result.scalars().all())
