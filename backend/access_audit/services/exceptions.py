"""
Domain exceptions for the service layer.

These exceptions are raised by services and caught by API routes
to convert into appropriate HTTP responses.

Only PermissionGuard converts exceptions into values (fail closed). Every
other service lets them propagate.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(ServiceError):
    """Entity not found."""

    def __init__(self, entity: str, identifier: str | None = None):
        self.entity = entity
        self.identifier = identifier
        message = f"{entity} not found"
        if identifier:
            message = f"{entity} with identifier '{identifier}' not found"
        super().__init__(message)


class ValidationError(ServiceError):
    """Validation error in service layer."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class AuthorizationDenied(ServiceError):
    """
    The actor is not authorized.

    Carries no resource, action or actor: every denial reason produces the
    same message and the same (empty) payload.
    """

    MESSAGE = "Forbidden"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


class InfrastructureError(ServiceError):
    """Storage layer failure. The original exception is chained as __cause__."""

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message)
