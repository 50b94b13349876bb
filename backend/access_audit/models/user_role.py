"""
UserRole model - links a user to a role.

Same deletion and duplicate-tolerance rules as RolePermission.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, String
from sqlmodel import Field

from access_audit.models.base import ID_LENGTH, LinkTableModel

__all__ = ["UserRole"]


class UserRole(LinkTableModel, table=True):
    """Membership of one user in one role."""

    __tablename__ = "user_roles"
    __table_args__ = (
        Index("idx_user_roles_user", "user_id"),
        Index("idx_user_roles_role", "role_id"),
    )

    user_id: str = Field(
        sa_column=Column(
            String(ID_LENGTH),
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    role_id: str = Field(
        sa_column=Column(
            String(ID_LENGTH),
            ForeignKey("roles.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
