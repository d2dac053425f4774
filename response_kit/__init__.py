"""Uniform API response envelopes and service-status codes for FastAPI backends."""

from response_kit.bootstrap import setup_app
from response_kit.models import (
    ApiResponse,
    bad_gateway_response,
    bad_request_response,
    conflict_response,
    created_response,
    error_response,
    forbidden_response,
    gateway_timeout_response,
    internal_server_error_response,
    method_not_allowed_response,
    new_response,
    no_content_response,
    not_found_response,
    not_implemented_response,
    service_response,
    service_unavailable_response,
    success_response,
    too_many_requests_response,
    unauthorized_response,
    unprocessable_response,
)
from response_kit.status import HttpStatus, ServiceStatus

__all__ = [
    "ApiResponse",
    "HttpStatus",
    "ServiceStatus",
    "bad_gateway_response",
    "bad_request_response",
    "conflict_response",
    "created_response",
    "error_response",
    "forbidden_response",
    "gateway_timeout_response",
    "internal_server_error_response",
    "method_not_allowed_response",
    "new_response",
    "no_content_response",
    "not_found_response",
    "not_implemented_response",
    "service_response",
    "service_unavailable_response",
    "setup_app",
    "success_response",
    "too_many_requests_response",
    "unauthorized_response",
    "unprocessable_response",
]
