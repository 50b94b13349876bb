"""
SQLModel/SQLAlchemy ORM models.

Models are imported lazily to avoid circular import issues.
Import specific models directly:
    from access_audit.models.role import Role
    from access_audit.models.audit_log import AuditLog

Or import all at once (after all modules are loaded):
    from access_audit.models import Role, Permission, AuditLog

ALL_TABLE_MODELS lists every table model in foreign-key order (parents
first), which is what metadata creation and test cleanup need.
"""

# Re-export SQLModel for convenience
from sqlmodel import SQLModel

__all__ = [
    "SQLModel",
    "ALL_TABLE_MODELS",
    # Base
    "BaseTableModel",
    "LinkTableModel",
    # Models
    "User",
    "Group",
    "Role",
    "Permission",
    "RolePermission",
    "UserRole",
    "AuditLog",
]

_MODEL_MODULES = {
    "BaseTableModel": "access_audit.models.base",
    "LinkTableModel": "access_audit.models.base",
    "User": "access_audit.models.user",
    "Group": "access_audit.models.group",
    "Role": "access_audit.models.role",
    "Permission": "access_audit.models.permission",
    "RolePermission": "access_audit.models.role_permission",
    "UserRole": "access_audit.models.user_role",
    "AuditLog": "access_audit.models.audit_log",
}

_TABLE_ORDER = (
    "User",
    "Group",
    "Role",
    "Permission",
    "RolePermission",
    "UserRole",
    "AuditLog",
)


def __getattr__(name: str):
    """
    Lazy import of models to avoid circular import issues.

    This is called when an attribute is accessed that doesn't exist
    in the module namespace. We use it to defer model imports until
    they're actually needed.
    """
    if name == "ALL_TABLE_MODELS":
        return tuple(__getattr__(model_name) for model_name in _TABLE_ORDER)

    module_path = _MODEL_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'access_audit.models' has no attribute '{name}'")

    import importlib

    return getattr(importlib.import_module(module_path), name)
