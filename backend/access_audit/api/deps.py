"""
API dependencies for FastAPI route handlers.

Provides:
- Database session dependency
- Current actor dependency (identity from the authentication layer)
- Composition of the permission guard and audit services per request
- require_permission() route guard
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from access_audit.core.config import get_settings
from access_audit.database import get_db
from access_audit.services.audit_recorder import AuditRecorder
from access_audit.services.audit_store import SqlAuditLogStore
from access_audit.services.permission_guard import PermissionGuard
from access_audit.services.permission_resolver import PermissionResolver
from access_audit.services.permission_store import SqlPermissionDataSource

__all__ = [
    "AuditStore",
    "Auditor",
    "CurrentActor",
    "DbSession",
    "Guard",
    "get_current_actor",
    "require_permission",
]


# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_current_actor(request: Request) -> str:
    """
    Verified actor identity.

    The upstream authentication layer sets the configured header once the
    caller is authenticated; this service trusts it and does not look the
    actor up.
    """
    actor_id = request.headers.get(get_settings().actor_header, "").strip()
    if not actor_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return actor_id


CurrentActor = Annotated[str, Depends(get_current_actor)]


def get_permission_guard(db: DbSession) -> PermissionGuard:
    """Build the guard stack for this request's session."""
    return PermissionGuard(PermissionResolver(SqlPermissionDataSource(db)))


Guard = Annotated[PermissionGuard, Depends(get_permission_guard)]


def get_audit_store(db: DbSession) -> SqlAuditLogStore:
    """Audit store bound to this request's session."""
    return SqlAuditLogStore(db, get_settings().audit)


AuditStore = Annotated[SqlAuditLogStore, Depends(get_audit_store)]


def get_audit_recorder(store: AuditStore) -> AuditRecorder:
    """Audit recorder writing through this request's store."""
    return AuditRecorder(store)


Auditor = Annotated[AuditRecorder, Depends(get_audit_recorder)]


def require_permission(resource: str, action: str):
    """
    Route dependency enforcing (resource, action) for the current actor.

    Usage:
        @router.get("", dependencies=[require_permission("audit_logs", "read")])
    """

    async def dependency(actor_id: CurrentActor, guard: Guard) -> str:
        await guard.require(actor_id, resource, action)
        return actor_id

    return Depends(dependency)
