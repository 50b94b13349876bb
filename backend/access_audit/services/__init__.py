"""
Services package - business logic layer.

Re-exports the access subsystem for convenient importing.
"""

from access_audit.services.audit_recorder import AuditRecorder
from access_audit.services.audit_store import SqlAuditLogStore, clamp_page
from access_audit.services.permission_guard import PermissionGuard
from access_audit.services.permission_resolver import PermissionResolver
from access_audit.services.permission_store import SqlPermissionDataSource

__all__ = [
    "AuditRecorder",
    "PermissionGuard",
    "PermissionResolver",
    "SqlAuditLogStore",
    "SqlPermissionDataSource",
    "clamp_page",
]
