"""
Permission request/response schemas.

Patterns:
- PermissionCheck: one (resource, action) pair to test
- PermissionRead: response body for resolved permissions
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "PermissionCheck",
    "PermissionRead",
]


class PermissionCheck(BaseModel):
    """A single (resource, action) pair."""

    model_config = ConfigDict(frozen=True)

    resource: str = Field(
        min_length=1,
        max_length=100,
        description="Resource name (e.g., 'users')",
    )
    action: str = Field(
        min_length=1,
        max_length=100,
        description="Action name (e.g., 'write')",
    )

    @property
    def key(self) -> str:
        """Result key in batch checks: "resource:action"."""
        return f"{self.resource}:{self.action}"


class PermissionRead(BaseModel):
    """Schema for permission API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(description="Permission identifier")
    name: str = Field(description="Unique permission name")
    resource: str = Field(description="Resource name")
    action: str = Field(description="Action name")
    description: str | None = Field(default=None, description="Permission description")
