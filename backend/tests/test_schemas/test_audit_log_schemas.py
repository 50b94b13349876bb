"""Tests for AuditLog request/response schemas."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from access_audit.models.audit_log import AuditLog
from access_audit.schemas.audit_log import AuditLogCreate, AuditLogRead
from access_audit.schemas.enums import AuditOperation


class TestAuditLogCreate:
    """Tests for AuditLogCreate schema."""

    def test_valid_create_minimal(self):
        """Test creating with minimal fields."""
        entry = AuditLogCreate(operation="READ", entity_type="user", entity_id="u-1", actor_id="a")
        assert entry.operation is AuditOperation.READ
        assert entry.old_values is None
        assert entry.new_values is None
        assert entry.metadata is None

    def test_valid_create_full(self):
        entry = AuditLogCreate(
            operation=AuditOperation.UPDATE,
            entity_type="role",
            entity_id="r-1",
            actor_id="a-1",
            old_values={"name": "Reader"},
            new_values={"name": "Viewer"},
            metadata={"ip": "192.168.1.1", "user_agent": "Mozilla"},
        )
        assert entry.old_values["name"] == "Reader"
        assert entry.new_values["name"] == "Viewer"

    def test_blank_fields_left_for_recorder(self):
        """Test blank strings pass schema validation; the recorder rejects them."""
        entry = AuditLogCreate(operation="CREATE", entity_type="", entity_id=" ", actor_id=None)
        assert entry.entity_type == ""
        assert entry.actor_id is None

    def test_unknown_operation_rejected(self):
        with pytest.raises(ValidationError):
            AuditLogCreate(operation="PATCH", entity_type="user", entity_id="u-1", actor_id="a")


class TestAuditLogRead:
    """Tests for AuditLogRead schema."""

    def test_from_model(self):
        """Test reading metadata from the model's metadata_ attribute."""
        now = datetime.now(UTC)
        log = AuditLog(
            id="log-1",
            operation=AuditOperation.CREATE,
            entity_type="user",
            entity_id="u-1",
            actor_id="a-1",
            new_values={"email": "a@b.com"},
            metadata_={"request_id": "abc123"},
            timestamp=now,
        )

        read = AuditLogRead.model_validate(log)

        assert read.metadata == {"request_id": "abc123"}
        assert read.new_values == {"email": "a@b.com"}
        assert read.timestamp == now
        assert read.model_dump()["metadata"] == {"request_id": "abc123"}

    def test_read_with_nulls(self):
        """Test AuditLogRead with null optional fields."""
        read = AuditLogRead(
            id="log-2",
            operation="READ",
            entity_type="user",
            entity_id="u-1",
            actor_id=None,
            metadata=None,
            timestamp=datetime.now(UTC),
        )
        assert read.actor_id is None
        assert read.old_values is None
        assert read.metadata is None
