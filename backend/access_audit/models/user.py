"""
User model - the principals that roles are granted to and that act on entities.

Design notes:
- Only the fields the access subsystem needs are modelled here; account
  management lives with the authentication layer
- Permanently erasing a user cascades to user_roles and nulls
  audit_logs.actor_id, leaving the audit trail itself intact
"""

from __future__ import annotations

from sqlalchemy import Column, Index, String, UniqueConstraint
from sqlmodel import Field

from access_audit.models.base import BaseTableModel

__all__ = ["User"]


class User(BaseTableModel, table=True):
    """System user that can hold roles and perform audited actions."""

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
        Index("idx_users_email", "email"),
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False),
        max_length=255,
    )
    display_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        max_length=255,
    )
