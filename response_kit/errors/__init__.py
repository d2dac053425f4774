"""Errors package: service error hierarchy and FastAPI exception handlers."""

from response_kit.errors.error_handler import (
    ConfigurationError,
    DataNotFoundError,
    DuplicateEntryError,
    ExternalServiceError,
    InsufficientPermissionsError,
    ProcessingError,
    ResourceLockedError,
    ServiceError,
    ServiceTimeoutError,
    ValidationError,
    register_error_handlers,
)

__all__ = [
    "ConfigurationError",
    "DataNotFoundError",
    "DuplicateEntryError",
    "ExternalServiceError",
    "InsufficientPermissionsError",
    "ProcessingError",
    "ResourceLockedError",
    "ServiceError",
    "ServiceTimeoutError",
    "ValidationError",
    "register_error_handlers",
]
