"""
Common Pydantic schemas shared across the application.

Provides:
- Limit/offset page wrapper for list endpoints
- Error response schemas
- Health check schemas
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "LimitOffsetPage",
    "ErrorResponse",
    "HealthResponse",
]


T = TypeVar("T")


class LimitOffsetPage(BaseModel, Generic[T]):
    """
    Generic limit/offset response wrapper.

    limit and offset echo the values actually applied after server-side
    clamping, not the raw query parameters.

    Usage:
        @router.get("", response_model=LimitOffsetPage[AuditLogRead])
        async def list_audit_logs(...):
            return LimitOffsetPage(items=logs, limit=limit, offset=offset)
    """

    items: list[T]
    limit: int = Field(description="Maximum number of items in this page")
    offset: int = Field(description="Number of items skipped")

    @property
    def has_more(self) -> bool:
        """Whether the page was filled, so a further page may exist."""
        return len(self.items) >= self.limit

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [],
                "limit": 100,
                "offset": 0,
            }
        }
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""

    detail: str = Field(description="Error details")

    model_config = ConfigDict(json_schema_extra={"example": {"detail": "Forbidden"}})


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Health status")
    app: str = Field(description="Application name")
    version: str | None = Field(default=None, description="Application version")
