"""Internal service-status enumeration.

Service statuses classify domain-level outcomes (missing data, duplicate
entries, upstream failures) independently of the HTTP status the outcome is
eventually reported with. Like ``HttpStatus``, every member resolves through
a registry with a fallback for keys it does not know.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from response_kit.status.http_status import HttpStatus

UNDEFINED_ERROR_CODE = "UNDEFINED"


class ServiceStatus(str, Enum):
    """Outcome of a service-layer operation."""

    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    PROCESSING_ERROR = "processing_error"
    DATA_NOT_FOUND = "data_not_found"
    DUPLICATE_ENTRY = "duplicate_entry"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"
    RESOURCE_LOCKED = "resource_locked"
    CONFIGURATION_ERROR = "configuration_error"
    EXTERNAL_SERVICE_ERROR = "external_service_error"
    TIMEOUT_ERROR = "timeout_error"
    UNKNOWN_ERROR = "unknown_error"

    @property
    def error_code(self) -> str:
        """String error code, ``"UNDEFINED"`` if the member is not registered."""
        return service_status_error_code(self)

    @property
    def is_error(self) -> bool:
        """Whether this outcome is a failure."""
        return service_status_is_error(self)

    @property
    def http_status(self) -> HttpStatus:
        """HTTP status this outcome is reported with."""
        return service_status_http_status(self)


@dataclass(frozen=True)
class ServiceStatusMeta:
    """Registry entry: string error code and error flag."""

    code: str
    is_error: bool


_SERVICE_STATUS_REGISTRY: dict[ServiceStatus, ServiceStatusMeta] = {
    ServiceStatus.SUCCESS: ServiceStatusMeta("SUCCESS", False),
    ServiceStatus.VALIDATION_ERROR: ServiceStatusMeta("VALIDATION_ERROR", True),
    ServiceStatus.PROCESSING_ERROR: ServiceStatusMeta("PROCESSING_ERROR", True),
    ServiceStatus.DATA_NOT_FOUND: ServiceStatusMeta("DATA_NOT_FOUND", True),
    ServiceStatus.DUPLICATE_ENTRY: ServiceStatusMeta("DUPLICATE_ENTRY", True),
    ServiceStatus.INSUFFICIENT_PERMISSIONS: ServiceStatusMeta("INSUFFICIENT_PERMISSIONS", True),
    ServiceStatus.RESOURCE_LOCKED: ServiceStatusMeta("RESOURCE_LOCKED", True),
    ServiceStatus.CONFIGURATION_ERROR: ServiceStatusMeta("CONFIGURATION_ERROR", True),
    ServiceStatus.EXTERNAL_SERVICE_ERROR: ServiceStatusMeta("EXTERNAL_SERVICE_ERROR", True),
    ServiceStatus.TIMEOUT_ERROR: ServiceStatusMeta("TIMEOUT_ERROR", True),
    ServiceStatus.UNKNOWN_ERROR: ServiceStatusMeta("UNKNOWN_ERROR", True),
}

# HTTP status a service outcome is reported with
_SERVICE_TO_HTTP: dict[ServiceStatus, HttpStatus] = {
    ServiceStatus.SUCCESS: HttpStatus.OK,
    ServiceStatus.VALIDATION_ERROR: HttpStatus.UNPROCESSABLE,
    ServiceStatus.PROCESSING_ERROR: HttpStatus.INTERNAL_SERVER_ERROR,
    ServiceStatus.DATA_NOT_FOUND: HttpStatus.NOT_FOUND,
    ServiceStatus.DUPLICATE_ENTRY: HttpStatus.CONFLICT,
    ServiceStatus.INSUFFICIENT_PERMISSIONS: HttpStatus.FORBIDDEN,
    ServiceStatus.RESOURCE_LOCKED: HttpStatus.CONFLICT,
    ServiceStatus.CONFIGURATION_ERROR: HttpStatus.INTERNAL_SERVER_ERROR,
    ServiceStatus.EXTERNAL_SERVICE_ERROR: HttpStatus.BAD_GATEWAY,
    ServiceStatus.TIMEOUT_ERROR: HttpStatus.GATEWAY_TIMEOUT,
    ServiceStatus.UNKNOWN_ERROR: HttpStatus.INTERNAL_SERVER_ERROR,
}


def _lookup(status: object) -> ServiceStatusMeta | None:
    try:
        return _SERVICE_STATUS_REGISTRY.get(status)  # type: ignore[call-overload]
    except TypeError:
        # unhashable keys are never registered
        return None


def service_status_error_code(status: object) -> str:
    """Return the registered error code for *status*, or ``"UNDEFINED"``."""
    meta = _lookup(status)
    if meta is None:
        return UNDEFINED_ERROR_CODE
    return meta.code


def service_status_is_error(status: object) -> bool:
    """Return the registered error flag for *status*; unknown keys are errors."""
    meta = _lookup(status)
    if meta is None:
        return True
    return meta.is_error


def service_status_http_status(status: object) -> HttpStatus:
    """Return the HTTP status *status* is reported with; unknown keys map to 500."""
    try:
        return _SERVICE_TO_HTTP.get(status, HttpStatus.INTERNAL_SERVER_ERROR)  # type: ignore[call-overload]
    except TypeError:
        return HttpStatus.INTERNAL_SERVER_ERROR
