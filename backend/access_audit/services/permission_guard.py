"""
Permission guard - the enforcement facade controllers call.

Every failure mode looks the same from the outside:
- check() returns False for a denial and for any internal error
- require() raises one contentless AuthorizationDenied
- check_multiple() maps every requested key to False on error
- get_user_permissions() returns [] on error

Internal errors are written to this module's logger only.

Usage in a controller:
    guard = PermissionGuard(PermissionResolver(SqlPermissionDataSource(db)))
    await guard.require(actor_id, "users", "write")
    ...perform the operation, then record it with AuditRecorder...
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from access_audit.models.permission import Permission
from access_audit.schemas.permission import PermissionCheck
from access_audit.services.exceptions import AuthorizationDenied
from access_audit.services.permission_resolver import PermissionResolver

logger = logging.getLogger(__name__)


class PermissionGuard:
    """Fail-closed wrapper around PermissionResolver."""

    def __init__(self, resolver: PermissionResolver):
        self.resolver = resolver

    async def check(self, actor_id: str, resource: str, action: str) -> bool:
        """Whether the actor holds (resource, action). Never raises."""
        try:
            return await self.resolver.resolve_has_permission(actor_id, resource, action)
        except Exception:
            logger.exception("Permission check error")
            return False

    async def require(self, actor_id: str, resource: str, action: str) -> None:
        """
        Enforce (resource, action) for the actor.

        Raises:
            AuthorizationDenied: always with the same generic message,
                whatever the reason for the denial
        """
        if not await self.check(actor_id, resource, action):
            raise AuthorizationDenied()

    async def check_multiple(
        self,
        actor_id: str,
        checks: Sequence[PermissionCheck],
    ) -> dict[str, bool]:
        """Batch check; every key maps to False if resolution fails."""
        try:
            return await self.resolver.resolve_many_has_permission(actor_id, checks)
        except Exception:
            logger.exception("Multiple permission check error")
            return {check.key: False for check in checks}

    async def has_all(self, actor_id: str, checks: Sequence[PermissionCheck]) -> bool:
        """
        True only if the actor holds every listed permission.

        An empty list is treated as a mistake at the call site and yields
        False without consulting the resolver.
        """
        if not checks:
            return False
        results = await self.check_multiple(actor_id, checks)
        return all(results.values())

    async def has_any(self, actor_id: str, checks: Sequence[PermissionCheck]) -> bool:
        """True if the actor holds at least one listed permission. Empty -> False."""
        if not checks:
            return False
        results = await self.check_multiple(actor_id, checks)
        return any(results.values())

    async def get_user_permissions(self, actor_id: str) -> list[Permission]:
        """
        Full resolved permission set, for UI decisions only.

        This discloses more than point checks do; expose it only to the
        authenticated actor about themselves.
        """
        try:
            return await self.resolver.resolve_user_permissions(actor_id)
        except Exception:
            logger.exception("Get user permissions error")
            return []
