"""
Domain-specific errors for the resources bounded context.

All errors raised from the resources domain and its validators are
defined here. They are mapped to HTTP responses at the interface layer
through their ErrorKind, never through their message.
"""

from app.shared.errors.taxonomy import ErrorKind, ServiceError


class ResourceDomainError(ServiceError):
    """Base error for all resource errors."""


class ResourceNotFoundError(ResourceDomainError):
    """Raised when an id is absent from the store."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource_id: int) -> None:
        super().__init__(f"Resource not found: {resource_id}")
        self.resource_id = resource_id


class ResourceAlreadyExistsError(ResourceDomainError):
    """Raised when creating an id that is already present."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, resource_id: int) -> None:
        super().__init__(f"Resource already exists: {resource_id}")
        self.resource_id = resource_id


class InvalidRequestError(ResourceDomainError):
    """Raised when an identifier or payload fails validation."""

    kind = ErrorKind.INVALID

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid request: {reason}")
        self.reason = reason


class CorruptResourceError(ResourceDomainError):
    """Raised when a stored payload no longer has a valid shape."""

    kind = ErrorKind.INTERNAL

    def __init__(self, resource_id: int) -> None:
        super().__init__(f"Stored resource has an invalid shape: {resource_id}")
        self.resource_id = resource_id
