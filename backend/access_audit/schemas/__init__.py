"""
Pydantic schemas for request/response validation.

Re-exports all schemas for convenient importing:
    from access_audit.schemas import AuditLogRead, AuditOperation, PermissionCheck
"""

# Common schemas
from access_audit.schemas.common import (
    ErrorResponse,
    HealthResponse,
    LimitOffsetPage,
)

# Enums
from access_audit.schemas.enums import AuditOperation

# Entity schemas - Permission
from access_audit.schemas.permission import (
    PermissionCheck,
    PermissionRead,
)

# Entity schemas - AuditLog
from access_audit.schemas.audit_log import (
    AuditLogCreate,
    AuditLogRead,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    "LimitOffsetPage",
    # Enums
    "AuditOperation",
    # Permission
    "PermissionCheck",
    "PermissionRead",
    # AuditLog
    "AuditLogCreate",
    "AuditLogRead",
]
