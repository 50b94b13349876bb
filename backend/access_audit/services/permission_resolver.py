"""
Permission resolution: does user U hold (resource, action)?

A user holds a permission when at least one of their live roles grants it.
Resolution always loads the user's full permission set and scans every
entry, so cost depends on the size of that set and never on whether or
where a match occurs. Nonexistent users and users without roles resolve
to an empty set.

This bounds what response latency can reveal; it is not a complete timing
defense. String comparison is ordinary equality and storage round-trip time
still grows with the number of role/permission rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from access_audit.models.permission import Permission
from access_audit.schemas.permission import PermissionCheck
from access_audit.services.protocols import PermissionDataSource


def dedupe_permissions(permissions: Iterable[Permission]) -> list[Permission]:
    """Collapse duplicates by permission id, keeping first-seen order."""
    unique: dict[str, Permission] = {}
    for permission in permissions:
        unique.setdefault(permission.id, permission)
    return list(unique.values())


def scan_for_grant(permissions: Sequence[Permission], resource: str, action: str) -> bool:
    """
    Uniform-time membership test.

    Every permission is compared exactly once and the results are combined
    with a non-short-circuiting OR. Do not replace with any() or an early
    return.
    """
    granted = False
    for permission in permissions:
        granted |= (permission.resource == resource) & (permission.action == action)
    return granted


class PermissionResolver:
    """
    Stateless query service over a PermissionDataSource.

    Storage errors propagate unchanged; there is no retry here.
    """

    def __init__(self, data_source: PermissionDataSource):
        self.data_source = data_source

    async def resolve_user_permissions(self, user_id: str) -> list[Permission]:
        """Every permission the user holds via any role, each listed once."""
        permissions = await self.data_source.get_user_permissions(user_id)
        return dedupe_permissions(permissions)

    async def resolve_has_permission(self, user_id: str, resource: str, action: str) -> bool:
        """Check a single (resource, action) pair."""
        permissions = await self.resolve_user_permissions(user_id)
        return scan_for_grant(permissions, resource, action)

    async def resolve_many_has_permission(
        self,
        user_id: str,
        checks: Iterable[PermissionCheck],
    ) -> dict[str, bool]:
        """
        Check several pairs against a single fetch of the permission set.

        Returns:
            Mapping of "resource:action" to the check result
        """
        permissions = await self.resolve_user_permissions(user_id)

        results: dict[str, bool] = {}
        for check in checks:
            results[check.key] = scan_for_grant(permissions, check.resource, check.action)
        return results
