"""
Permission API endpoints for the current actor.

- GET /permissions/me - The actor's own resolved permissions (UI use)
- POST /permissions/check - Batch check of the actor's own permissions

Both only ever answer about the calling actor and fail closed.
"""

from __future__ import annotations

from fastapi import APIRouter, Body

from access_audit.api.deps import CurrentActor, Guard
from access_audit.schemas.permission import PermissionCheck, PermissionRead

router = APIRouter()


@router.get("/me", response_model=list[PermissionRead])
async def list_my_permissions(actor_id: CurrentActor, guard: Guard):
    """List every permission the current actor holds."""
    permissions = await guard.get_user_permissions(actor_id)
    return [PermissionRead.model_validate(permission) for permission in permissions]


@router.post("/check", response_model=dict[str, bool])
async def check_my_permissions(
    actor_id: CurrentActor,
    guard: Guard,
    checks: list[PermissionCheck] = Body(
        ...,
        description="(resource, action) pairs to check",
        examples=[[{"resource": "users", "action": "read"}]],
    ),
):
    """Check several permissions at once; keys are "resource:action"."""
    return await guard.check_multiple(actor_id, checks)
