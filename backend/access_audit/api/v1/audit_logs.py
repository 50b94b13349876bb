"""
Audit Log API endpoints.

Read-only endpoints for viewing the audit trail (all require audit_logs:read):
- GET /audit-logs - Newest-first page (limit/offset, clamped server-side)
- GET /audit-logs/entity/{entity_type}/{entity_id} - History of one entity
- GET /audit-logs/actor/{actor_id} - Everything one actor did
- GET /audit-logs/operation/{operation} - Records of one operation kind
- GET /audit-logs/{audit_log_id} - Get single log
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query

from access_audit.api.deps import AuditStore, require_permission
from access_audit.core.config import get_settings
from access_audit.schemas.audit_log import AuditLogRead
from access_audit.schemas.common import ErrorResponse, LimitOffsetPage
from access_audit.schemas.enums import AuditOperation
from access_audit.services.audit_store import clamp_page
from access_audit.services.exceptions import NotFoundError

AUDIT_LOG_RESOURCE = "audit_logs"

router = APIRouter(
    dependencies=[require_permission(AUDIT_LOG_RESOURCE, "read")],
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
    },
)


@router.get("", response_model=LimitOffsetPage[AuditLogRead])
async def list_audit_logs(
    store: AuditStore,
    # Accepted as raw strings: invalid values fall back to defaults instead of 422
    limit: str | None = Query(
        default=None,
        description="Page size (default 100, capped at 1000)",
        examples=["100"],
    ),
    offset: str | None = Query(
        default=None,
        description="Number of records to skip (default 0)",
        examples=["0"],
    ),
):
    """List audit logs, newest first."""
    safe_limit, safe_offset = clamp_page(limit, offset, get_settings().audit)
    items = await store.find_all(safe_limit, safe_offset)

    return LimitOffsetPage[AuditLogRead](
        items=[AuditLogRead.model_validate(item) for item in items],
        limit=safe_limit,
        offset=safe_offset,
    )


@router.get("/entity/{entity_type}/{entity_id}", response_model=list[AuditLogRead])
async def list_entity_audit_logs(
    store: AuditStore,
    entity_type: str = Path(..., description="Type of the audited entity", examples=["user"]),
    entity_id: str = Path(..., description="Identifier of the audited entity"),
):
    """Full history of one entity, newest first."""
    items = await store.find_by_entity(entity_type, entity_id)
    return [AuditLogRead.model_validate(item) for item in items]


@router.get("/actor/{actor_id}", response_model=list[AuditLogRead])
async def list_actor_audit_logs(
    store: AuditStore,
    actor_id: str = Path(..., description="Identifier of the acting principal"),
):
    """Everything one actor did, newest first."""
    items = await store.find_by_actor(actor_id)
    return [AuditLogRead.model_validate(item) for item in items]


@router.get("/operation/{operation}", response_model=list[AuditLogRead])
async def list_operation_audit_logs(
    store: AuditStore,
    operation: AuditOperation = Path(..., description="Operation kind", examples=["UPDATE"]),
):
    """Records of one operation kind, newest first."""
    items = await store.find_by_operation(operation)
    return [AuditLogRead.model_validate(item) for item in items]


@router.get("/{audit_log_id}", response_model=AuditLogRead)
async def get_audit_log(
    store: AuditStore,
    audit_log_id: str = Path(..., description="The identifier of the audit log entry"),
):
    """Get a single audit log by id."""
    log = await store.find_by_id(audit_log_id)

    if not log:
        raise NotFoundError("Audit log")

    return AuditLogRead.model_validate(log)
