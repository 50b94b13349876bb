"""Tests for enum definitions."""

import json

from access_audit.schemas.enums import AuditOperation


class TestEnumValues:
    """Test enum values are correctly defined."""

    def test_audit_operation_values(self):
        assert [op.value for op in AuditOperation] == [
            "CREATE",
            "UPDATE",
            "DELETE",
            "RESTORE",
            "READ",
        ]

    def test_lookup_by_value(self):
        assert AuditOperation("RESTORE") is AuditOperation.RESTORE


class TestEnumSerialization:
    """Test enums serialize correctly to strings."""

    def test_enum_string_conversion(self):
        assert str(AuditOperation.CREATE) == "CREATE"

    def test_enum_json_serializable(self):
        """Test enums are JSON serializable."""
        serialized = json.dumps({"operation": AuditOperation.DELETE})
        assert serialized == '{"operation": "DELETE"}'
