"""Status registries: HTTP statuses and internal service statuses."""

from response_kit.status.http_status import (
    UNKNOWN_HTTP_CODE,
    HttpStatus,
    HttpStatusMeta,
    http_status_code,
    http_status_default_message,
    http_status_is_error,
)
from response_kit.status.service_status import (
    UNDEFINED_ERROR_CODE,
    ServiceStatus,
    ServiceStatusMeta,
    service_status_error_code,
    service_status_http_status,
    service_status_is_error,
)

__all__ = [
    "HttpStatus",
    "HttpStatusMeta",
    "ServiceStatus",
    "ServiceStatusMeta",
    "UNDEFINED_ERROR_CODE",
    "UNKNOWN_HTTP_CODE",
    "http_status_code",
    "http_status_default_message",
    "http_status_is_error",
    "service_status_error_code",
    "service_status_http_status",
    "service_status_is_error",
]
