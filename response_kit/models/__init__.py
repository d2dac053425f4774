"""Public models for the response envelope."""

from response_kit.models.responses import (
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

__all__ = [
    "ApiResponse",
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
    "success_response",
    "too_many_requests_response",
    "unauthorized_response",
    "unprocessable_response",
]
