"""
RolePermission model - links a role to a permission.

No unique constraint on (role_id, permission_id): duplicate links are
tolerated and collapse during permission resolution.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, String
from sqlmodel import Field

from access_audit.models.base import ID_LENGTH, LinkTableModel

__all__ = ["RolePermission"]


class RolePermission(LinkTableModel, table=True):
    """Grant of one permission to one role."""

    __tablename__ = "role_permissions"
    __table_args__ = (
        Index("idx_role_permissions_role", "role_id"),
        Index("idx_role_permissions_permission", "permission_id"),
    )

    role_id: str = Field(
        sa_column=Column(
            String(ID_LENGTH),
            ForeignKey("roles.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    permission_id: str = Field(
        sa_column=Column(
            String(ID_LENGTH),
            ForeignKey("permissions.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
