"""
SQL-backed read access to the role/permission graph.

Resolution path: user_roles -> roles -> role_permissions -> permissions.
Soft-deleted roles and permissions are skipped; the user row itself is not
consulted, so a soft-deleted user still resolves (callers filter that).
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from access_audit.models.permission import Permission
from access_audit.models.role import Role
from access_audit.models.role_permission import RolePermission
from access_audit.models.user_role import UserRole
from access_audit.services.exceptions import InfrastructureError


class SqlPermissionDataSource:
    """PermissionDataSource over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_permissions(self, user_id: str) -> list[Permission]:
        """Get every permission granted to the user through live roles."""
        stmt = (
            select(Permission)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .join(Role, Role.id == RolePermission.role_id)
            .join(UserRole, UserRole.role_id == Role.id)
            .where(
                UserRole.user_id == user_id,
                Role.deleted_at.is_(None),
                Permission.deleted_at.is_(None),
            )
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise InfrastructureError("Failed to load user permissions") from e
        return list(result.scalars().all())
