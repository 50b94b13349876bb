"""
Permission model - an atomic capability keyed by (resource, action).

Design notes:
- name is the unique key, but (resource, action) is the semantic identity
- Two permissions with the same (resource, action) under different names
  are allowed by the schema and resolve as a single logical grant
"""

from __future__ import annotations

from sqlalchemy import Column, Index, String, Text, UniqueConstraint
from sqlmodel import Field

from access_audit.models.base import BaseTableModel

__all__ = ["Permission"]


class Permission(BaseTableModel, table=True):
    """Capability to perform one action on one resource."""

    __tablename__ = "permissions"
    __table_args__ = (
        UniqueConstraint("name", name="uq_permissions_name"),
        Index("idx_permissions_resource_action", "resource", "action"),
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        max_length=255,
    )
    resource: str = Field(
        sa_column=Column(String(100), nullable=False),
        max_length=100,
    )
    action: str = Field(
        sa_column=Column(String(100), nullable=False),
        max_length=100,
    )
    description: str | None = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    @property
    def key(self) -> str:
        """The "resource:action" key used in batch check results."""
        return f"{self.resource}:{self.action}"
