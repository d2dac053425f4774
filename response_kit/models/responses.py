"""Generic API response envelope model and its constructors.

Every handler response is wrapped in this envelope:
{ success: bool, status: int, message: str, data?: T, error_code?: str }

``data`` and ``error_code`` are left out of the rendered body when unset.
``status`` is rendered as the numeric HTTP code.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from response_kit.status.http_status import HttpStatus
from response_kit.status.service_status import ServiceStatus

T = TypeVar("T")

_OMIT_WHEN_NONE = ("data", "error_code")


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope for all API responses."""

    model_config = ConfigDict(frozen=True)

    success: bool
    status: HttpStatus
    message: str
    data: T | None = None
    error_code: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _status_from_code(cls, value: Any) -> Any:
        # Rendered envelopes carry the numeric code
        if isinstance(value, int) and not isinstance(value, bool):
            status = HttpStatus.from_code(value)
            if status is None:
                raise ValueError(f"unregistered HTTP status code: {value}")
            return status
        return value

    @field_serializer("status")
    def _status_to_code(self, status: HttpStatus) -> int:
        return status.code

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready body with unset optional fields omitted."""
        exclude = {name for name in _OMIT_WHEN_NONE if getattr(self, name) is None}
        return self.model_dump(mode="json", exclude=exclude)

    def to_json_response(self) -> Response:
        """Render as a FastAPI response carrying the envelope's HTTP status.

        A ``NO_CONTENT`` envelope becomes an empty 204 response, since a 204
        must not carry a body.
        """
        if self.status is HttpStatus.NO_CONTENT:
            return Response(status_code=self.status.code)
        return JSONResponse(status_code=self.status.code, content=self.to_dict())


# ---------------------------------------------------------------------------
# Base constructor
# ---------------------------------------------------------------------------


def new_response(
    status: HttpStatus,
    message: str | None = None,
    data: T | None = None,
    error_code: str | None = None,
) -> ApiResponse[T]:
    """Build an envelope; ``success`` is derived from the status error flag.

    Falls back to the status reason phrase when no message is given.
    """
    return ApiResponse(
        success=not status.is_error,
        status=status,
        message=message if message is not None else status.default_message,
        data=data,
        error_code=error_code,
    )


# ---------------------------------------------------------------------------
# Success helpers
# ---------------------------------------------------------------------------


def success_response(data: T, message: str | None = None) -> ApiResponse[T]:
    return new_response(HttpStatus.OK, message, data)


def created_response(data: T, message: str | None = None) -> ApiResponse[T]:
    return new_response(HttpStatus.CREATED, message, data)


def no_content_response(message: str | None = None) -> ApiResponse[Any]:
    return new_response(HttpStatus.NO_CONTENT, message)


# ---------------------------------------------------------------------------
# Error helpers
# ---------------------------------------------------------------------------


def bad_request_response(message: str | None = None) -> ApiResponse[Any]:
    """400: malformed request, invalid parameters or missing data."""
    return new_response(HttpStatus.BAD_REQUEST, message)


def unauthorized_response(message: str | None = None) -> ApiResponse[Any]:
    """401: missing authentication or invalid token."""
    return new_response(HttpStatus.UNAUTHORIZED, message)


def forbidden_response(message: str | None = None) -> ApiResponse[Any]:
    """403: authenticated but not allowed to access the resource."""
    return new_response(HttpStatus.FORBIDDEN, message)


def not_found_response(message: str | None = None) -> ApiResponse[Any]:
    """404: resource not found."""
    return new_response(HttpStatus.NOT_FOUND, message)


def method_not_allowed_response(message: str | None = None) -> ApiResponse[Any]:
    """405: HTTP method not allowed on this endpoint."""
    return new_response(HttpStatus.METHOD_NOT_ALLOWED, message)


def conflict_response(message: str | None = None) -> ApiResponse[Any]:
    """409: conflicts with the current resource state (e.g. email already taken)."""
    return new_response(HttpStatus.CONFLICT, message)


def unprocessable_response(message: str | None = None) -> ApiResponse[Any]:
    """422: well-formed data rejected by business rules."""
    return new_response(HttpStatus.UNPROCESSABLE, message)


def too_many_requests_response(message: str | None = None) -> ApiResponse[Any]:
    """429: rate limit exceeded."""
    return new_response(HttpStatus.TOO_MANY_REQUESTS, message)


def internal_server_error_response(message: str | None = None) -> ApiResponse[Any]:
    """500: internal server error."""
    return new_response(HttpStatus.INTERNAL_SERVER_ERROR, message)


def not_implemented_response(message: str | None = None) -> ApiResponse[Any]:
    """501: functionality not implemented."""
    return new_response(HttpStatus.NOT_IMPLEMENTED, message)


def bad_gateway_response(message: str | None = None) -> ApiResponse[Any]:
    """502: upstream gateway or proxy failure."""
    return new_response(HttpStatus.BAD_GATEWAY, message)


def service_unavailable_response(message: str | None = None) -> ApiResponse[Any]:
    """503: service temporarily unavailable."""
    return new_response(HttpStatus.SERVICE_UNAVAILABLE, message)


def gateway_timeout_response(message: str | None = None) -> ApiResponse[Any]:
    """504: upstream gateway or proxy timed out."""
    return new_response(HttpStatus.GATEWAY_TIMEOUT, message)


def error_response(message: str | None, status: HttpStatus) -> ApiResponse[Any]:
    """Generic helper for any status, without a payload."""
    return new_response(status, message)


# ---------------------------------------------------------------------------
# Service outcomes
# ---------------------------------------------------------------------------


def service_response(
    service_status: ServiceStatus,
    message: str | None = None,
    data: T | None = None,
) -> ApiResponse[T]:
    """Wrap a service-layer outcome in an envelope.

    The HTTP status comes from the service status mapping; error outcomes
    also carry their service error code.
    """
    error_code = service_status.error_code if service_status.is_error else None
    return new_response(service_status.http_status, message, data, error_code=error_code)
