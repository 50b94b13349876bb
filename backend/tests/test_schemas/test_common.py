"""Tests for common schemas."""

from access_audit.schemas.common import ErrorResponse, HealthResponse, LimitOffsetPage


class TestLimitOffsetPage:
    """Test the limit/offset page wrapper."""

    def test_fields(self):
        page = LimitOffsetPage[str](items=["a", "b"], limit=100, offset=0)
        assert page.items == ["a", "b"]
        assert page.limit == 100
        assert page.offset == 0

    def test_has_more_when_page_full(self):
        page = LimitOffsetPage[str](items=["a", "b"], limit=2, offset=4)
        assert page.has_more is True

    def test_no_more_when_page_short(self):
        page = LimitOffsetPage[str](items=["a"], limit=2, offset=4)
        assert page.has_more is False

    def test_empty_page(self):
        page = LimitOffsetPage[str](items=[], limit=100, offset=0)
        assert page.has_more is False
        assert page.model_dump() == {"items": [], "limit": 100, "offset": 0}


class TestErrorResponse:
    """Test error response schema."""

    def test_string_detail(self):
        error = ErrorResponse(detail="Forbidden")
        assert error.model_dump() == {"detail": "Forbidden"}


class TestHealthResponse:
    def test_version_optional(self):
        health = HealthResponse(status="healthy", app="Access Audit")
        assert health.version is None
