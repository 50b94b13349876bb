"""
Group model - organizational scope that owns roles.

Groups are soft-deleted; removing a group row cascades to its roles.
"""

from __future__ import annotations

from sqlalchemy import Column, String, Text
from sqlmodel import Field

from access_audit.models.base import BaseTableModel

__all__ = ["Group"]


class Group(BaseTableModel, table=True):
    """Organizational scope for a set of roles."""

    __tablename__ = "groups"

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        max_length=255,
    )
    description: str | None = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )
