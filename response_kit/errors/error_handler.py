"""Service error hierarchy and FastAPI exception handlers.

Every service-layer error extends ServiceError and carries a ServiceStatus.
The FastAPI exception handlers catch these errors (plus Starlette's
HTTPException, Pydantic's RequestValidationError and unhandled exceptions)
and render them as ApiResponse envelopes.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from response_kit.config.settings import ResponseKitSettings
from response_kit.models.responses import ApiResponse, new_response, service_response
from response_kit.status.http_status import HttpStatus
from response_kit.status.service_status import ServiceStatus

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ServiceError(Exception):
    """Base error for all service-layer failures."""

    service_status: ServiceStatus = ServiceStatus.UNKNOWN_ERROR
    message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message if message is not None else self.__class__.message
        self.details = kwargs
        super().__init__(self.message)

    @property
    def status(self) -> HttpStatus:
        return self.service_status.http_status

    def to_response(self) -> ApiResponse[Any]:
        """Error envelope; keyword details become the payload."""
        return service_response(self.service_status, self.message, self.details or None)


class ValidationError(ServiceError):
    """Input rejected by business validation rules."""

    service_status = ServiceStatus.VALIDATION_ERROR
    message = "Validation error"


class ProcessingError(ServiceError):
    service_status = ServiceStatus.PROCESSING_ERROR
    message = "Processing failed"


class DataNotFoundError(ServiceError):
    service_status = ServiceStatus.DATA_NOT_FOUND
    message = "Data not found"


class DuplicateEntryError(ServiceError):
    service_status = ServiceStatus.DUPLICATE_ENTRY
    message = "Duplicate entry"


class InsufficientPermissionsError(ServiceError):
    service_status = ServiceStatus.INSUFFICIENT_PERMISSIONS
    message = "Insufficient permissions"


class ResourceLockedError(ServiceError):
    service_status = ServiceStatus.RESOURCE_LOCKED
    message = "Resource is locked"


class ConfigurationError(ServiceError):
    service_status = ServiceStatus.CONFIGURATION_ERROR
    message = "Configuration error"


class ExternalServiceError(ServiceError):
    """An upstream dependency failed."""

    service_status = ServiceStatus.EXTERNAL_SERVICE_ERROR
    message = "External service error"


class ServiceTimeoutError(ServiceError):
    service_status = ServiceStatus.TIMEOUT_ERROR
    message = "Operation timed out"


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


def _settings(request: Request) -> ResponseKitSettings:
    return request.app.state.response_kit_settings


def _log_context(request: Request, status: HttpStatus, error_code: str | None) -> dict:
    return {
        "status_code": status.code,
        "error_code": error_code,
        "method": request.method,
        "path": request.url.path,
    }


async def _service_error_handler(request: Request, exc: ServiceError) -> Response:
    """Handle ServiceError subclasses."""
    envelope = exc.to_response()
    extra = _log_context(request, envelope.status, envelope.error_code)
    if envelope.status.code >= 500:
        logger.error("Service error: %s", exc.message, extra=extra)
    elif _settings(request).log_client_errors:
        logger.warning("Service error: %s", exc.message, extra=extra)
    return envelope.to_json_response()


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Handle routing-level HTTP errors (unknown path, wrong method, ...)."""
    status = HttpStatus.from_code(exc.status_code) or HttpStatus.INTERNAL_SERVER_ERROR
    if isinstance(exc.detail, str):
        envelope = new_response(status, exc.detail)
    else:
        # structured details go to the payload
        envelope = new_response(status, data={"detail": exc.detail})
    response = envelope.to_json_response()
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    """Handle FastAPI / Pydantic RequestValidationError (422)."""
    field_errors = [
        {
            "field": " -> ".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    envelope = service_response(
        ServiceStatus.VALIDATION_ERROR,
        "Validation error",
        {"fields": field_errors},
    )
    if _settings(request).log_client_errors:
        logger.warning(
            "Request validation failed",
            extra=_log_context(request, envelope.status, envelope.error_code),
        )
    return envelope.to_json_response()


async def _unhandled_error_handler(request: Request, exc: Exception) -> Response:
    """Catch-all for unhandled exceptions: log traceback, return generic 500."""
    envelope = service_response(
        ServiceStatus.UNKNOWN_ERROR,
        str(exc) if _settings(request).expose_internal_errors else INTERNAL_ERROR_MESSAGE,
    )
    logger.error(
        "Unhandled exception: %s",
        exc,
        exc_info=(type(exc), exc, exc.__traceback__),
        extra=_log_context(request, envelope.status, envelope.error_code),
    )
    return envelope.to_json_response()


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(
    app: FastAPI, settings: ResponseKitSettings | None = None
) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.state.response_kit_settings = settings or ResponseKitSettings()
    app.add_exception_handler(ServiceError, _service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
