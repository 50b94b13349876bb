"""
Capability interfaces for the two stores the access subsystem depends on.

Production code wires the SQL implementations (SqlPermissionDataSource,
SqlAuditLogStore); tests pass in-memory fakes with the same shape.
"""

from __future__ import annotations

from typing import Any, Protocol

from access_audit.models.audit_log import AuditLog
from access_audit.models.permission import Permission
from access_audit.schemas.enums import AuditOperation

__all__ = [
    "PermissionDataSource",
    "AuditLogStore",
]


class PermissionDataSource(Protocol):
    """Read access to the role/permission graph."""

    async def get_user_permissions(self, user_id: str) -> list[Permission]:
        """
        Every live permission reachable from user_id through live roles.

        May contain the same permission more than once when it is granted
        via several roles or duplicated links. Unknown users yield [].
        """
        ...


class AuditLogStore(Protocol):
    """
    Append-only access to audit records.

    Records are never updated or deleted.
    """

    async def append(self, record: AuditLog) -> AuditLog: ...

    async def find_by_entity(self, entity_type: str, entity_id: str) -> list[AuditLog]: ...

    async def find_by_actor(self, actor_id: str) -> list[AuditLog]: ...

    async def find_by_operation(self, operation: AuditOperation) -> list[AuditLog]: ...

    async def find_all(self, limit: Any = None, offset: Any = None) -> list[AuditLog]: ...

    async def find_by_id(self, id: str) -> AuditLog | None: ...
