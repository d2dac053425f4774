"""HTTP status enumeration backed by a central registry.

Each ``HttpStatus`` member resolves to a numeric code and an error flag via
``_HTTP_STATUS_REGISTRY``. Lookups never raise: keys missing from the
registry (unhashable ones included) resolve to code ``0`` and are treated
as errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus as _StdHTTPStatus

UNKNOWN_HTTP_CODE = 0


class HttpStatus(str, Enum):
    """Transport-level statuses an API handler can respond with."""

    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNPROCESSABLE = "unprocessable"
    TOO_MANY_REQUESTS = "too_many_requests"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    NOT_IMPLEMENTED = "not_implemented"
    BAD_GATEWAY = "bad_gateway"
    SERVICE_UNAVAILABLE = "service_unavailable"
    GATEWAY_TIMEOUT = "gateway_timeout"
    METHOD_NOT_ALLOWED = "method_not_allowed"

    @property
    def code(self) -> int:
        """Numeric HTTP code, ``0`` if the member is not registered."""
        return http_status_code(self)

    @property
    def is_error(self) -> bool:
        """Whether responses with this status are failures."""
        return http_status_is_error(self)

    @property
    def default_message(self) -> str:
        """Standard reason phrase for the code, e.g. ``"Not Found"``."""
        return http_status_default_message(self)

    @classmethod
    def from_code(cls, code: int) -> HttpStatus | None:
        """Reverse lookup by numeric code."""
        return _CODE_INDEX.get(code)


@dataclass(frozen=True)
class HttpStatusMeta:
    """Registry entry: numeric code and error flag only."""

    code: int
    is_error: bool


_HTTP_STATUS_REGISTRY: dict[HttpStatus, HttpStatusMeta] = {
    HttpStatus.OK: HttpStatusMeta(200, False),
    HttpStatus.CREATED: HttpStatusMeta(201, False),
    HttpStatus.NO_CONTENT: HttpStatusMeta(204, False),
    HttpStatus.BAD_REQUEST: HttpStatusMeta(400, True),
    HttpStatus.UNAUTHORIZED: HttpStatusMeta(401, True),
    HttpStatus.FORBIDDEN: HttpStatusMeta(403, True),
    HttpStatus.NOT_FOUND: HttpStatusMeta(404, True),
    HttpStatus.METHOD_NOT_ALLOWED: HttpStatusMeta(405, True),
    HttpStatus.CONFLICT: HttpStatusMeta(409, True),
    HttpStatus.UNPROCESSABLE: HttpStatusMeta(422, True),
    HttpStatus.TOO_MANY_REQUESTS: HttpStatusMeta(429, True),
    HttpStatus.INTERNAL_SERVER_ERROR: HttpStatusMeta(500, True),
    HttpStatus.NOT_IMPLEMENTED: HttpStatusMeta(501, True),
    HttpStatus.BAD_GATEWAY: HttpStatusMeta(502, True),
    HttpStatus.SERVICE_UNAVAILABLE: HttpStatusMeta(503, True),
    HttpStatus.GATEWAY_TIMEOUT: HttpStatusMeta(504, True),
}

_CODE_INDEX: dict[int, HttpStatus] = {
    meta.code: status for status, meta in _HTTP_STATUS_REGISTRY.items()
}


def _lookup(status: object) -> HttpStatusMeta | None:
    try:
        return _HTTP_STATUS_REGISTRY.get(status)  # type: ignore[call-overload]
    except TypeError:
        # unhashable keys are never registered
        return None


def http_status_code(status: object) -> int:
    """Return the registered numeric code for *status*, or ``0``."""
    meta = _lookup(status)
    if meta is None:
        return UNKNOWN_HTTP_CODE
    return meta.code


def http_status_is_error(status: object) -> bool:
    """Return the registered error flag for *status*; unknown keys are errors."""
    meta = _lookup(status)
    if meta is None:
        return True
    return meta.is_error


def http_status_default_message(status: object) -> str:
    """Return the reason phrase for *status*, or ``""`` if it is not registered."""
    code = http_status_code(status)
    if code == UNKNOWN_HTTP_CODE:
        return ""
    return _StdHTTPStatus(code).phrase
