"""
Enum definitions for the access audit application.

All enums are defined as StrEnum for JSON serialization compatibility.
Database stores these as VARCHAR - validation happens at Pydantic/FastAPI layer.
"""

from enum import StrEnum

__all__ = [
    "AuditOperation",
]


class AuditOperation(StrEnum):
    """
    Kind of operation an audit record describes.

    Value snapshots per kind:
    CREATE  -> old_values null, new_values set
    UPDATE  -> both may be set
    DELETE  -> old_values set, new_values null
    RESTORE -> old_values null, new_values set
    READ    -> both null (sensitive-data access only)
    """

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    RESTORE = "RESTORE"
    READ = "READ"
