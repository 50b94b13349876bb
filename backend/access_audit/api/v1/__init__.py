"""
API v1 router - aggregates all endpoint routers.
"""

from fastapi import APIRouter

from access_audit.api.v1.audit_logs import router as audit_logs_router
from access_audit.api.v1.permissions import router as permissions_router

api_router = APIRouter()

# Include all routers with their prefixes and tags
api_router.include_router(audit_logs_router, prefix="/audit-logs", tags=["Audit Logs"])
api_router.include_router(permissions_router, prefix="/permissions", tags=["Permissions"])
