"""
Role model - a named bundle of permissions scoped to exactly one group.

Design notes:
- Roles link to permissions through role_permissions and to users through
  user_roles; both are plain link tables
- A soft-deleted role stops granting its permissions
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, String, Text
from sqlmodel import Field

from access_audit.models.base import ID_LENGTH, BaseTableModel

__all__ = ["Role"]


class Role(BaseTableModel, table=True):
    """Permission bundle owned by a group."""

    __tablename__ = "roles"
    __table_args__ = (Index("idx_roles_group", "group_id"),)

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        max_length=255,
    )
    description: str | None = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )
    group_id: str = Field(
        sa_column=Column(
            String(ID_LENGTH),
            ForeignKey("groups.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
