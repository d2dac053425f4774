"""Unit tests for the ApiResponse envelope and its constructors."""

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

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
from response_kit.status.http_status import HttpStatus
from response_kit.status.service_status import ServiceStatus


class TestSuccessHelpers:
    def test_success_response(self):
        resp = success_response({"id": 1}, "Fetched")
        assert resp.success is True
        assert resp.status is HttpStatus.OK
        assert resp.message == "Fetched"
        assert resp.data == {"id": 1}
        assert resp.error_code is None

    def test_created_response(self):
        resp = created_response([1, 2], "Created")
        assert resp.success is True
        assert resp.status is HttpStatus.CREATED
        assert resp.data == [1, 2]

    def test_no_content_response(self):
        resp = no_content_response("Deleted")
        assert resp.success is True
        assert resp.status is HttpStatus.NO_CONTENT
        assert resp.data is None

    def test_falsy_payload_is_kept(self):
        resp = success_response(0, "zero")
        assert resp.data == 0
        assert resp.to_dict()["data"] == 0


class TestErrorHelpers:
    @pytest.mark.parametrize(
        "helper,status",
        [
            (bad_request_response, HttpStatus.BAD_REQUEST),
            (unauthorized_response, HttpStatus.UNAUTHORIZED),
            (forbidden_response, HttpStatus.FORBIDDEN),
            (not_found_response, HttpStatus.NOT_FOUND),
            (method_not_allowed_response, HttpStatus.METHOD_NOT_ALLOWED),
            (conflict_response, HttpStatus.CONFLICT),
            (unprocessable_response, HttpStatus.UNPROCESSABLE),
            (too_many_requests_response, HttpStatus.TOO_MANY_REQUESTS),
            (internal_server_error_response, HttpStatus.INTERNAL_SERVER_ERROR),
            (not_implemented_response, HttpStatus.NOT_IMPLEMENTED),
            (bad_gateway_response, HttpStatus.BAD_GATEWAY),
            (service_unavailable_response, HttpStatus.SERVICE_UNAVAILABLE),
            (gateway_timeout_response, HttpStatus.GATEWAY_TIMEOUT),
        ],
    )
    def test_helper_status(self, helper, status):
        resp = helper("something went wrong")
        assert resp.success is False
        assert resp.status is status
        assert resp.message == "something went wrong"
        assert resp.data is None

    def test_error_response_uses_given_status(self):
        resp = error_response("locked out", HttpStatus.FORBIDDEN)
        assert resp.status is HttpStatus.FORBIDDEN
        assert resp.success is False
        assert resp.message == "locked out"

    def test_error_response_with_success_status(self):
        # success always follows the status flag
        resp = error_response("fine", HttpStatus.OK)
        assert resp.success is True

    def test_default_message(self):
        assert not_found_response().message == "Not Found"
        assert new_response(HttpStatus.OK).message == "OK"

    def test_empty_message_is_kept(self):
        assert not_found_response("").message == ""


class TestServiceResponse:
    def test_error_outcome(self):
        resp = service_response(ServiceStatus.DATA_NOT_FOUND, "User 42 not found")
        assert resp.success is False
        assert resp.status is HttpStatus.NOT_FOUND
        assert resp.error_code == "DATA_NOT_FOUND"
        assert resp.message == "User 42 not found"

    def test_success_outcome(self):
        resp = service_response(ServiceStatus.SUCCESS, data={"id": 7})
        assert resp.success is True
        assert resp.status is HttpStatus.OK
        assert resp.error_code is None
        assert resp.data == {"id": 7}
        assert resp.message == "OK"

    def test_duplicate_entry_is_conflict(self):
        resp = service_response(ServiceStatus.DUPLICATE_ENTRY, "Email already exists")
        assert resp.status is HttpStatus.CONFLICT
        assert resp.to_dict()["error_code"] == "DUPLICATE_ENTRY"


class TestSerialization:
    def test_to_dict_renders_numeric_status(self):
        body = success_response({"id": 1}, "ok").to_dict()
        assert body == {
            "success": True,
            "status": 200,
            "message": "ok",
            "data": {"id": 1},
        }

    def test_to_dict_omits_unset_fields(self):
        body = not_found_response("missing").to_dict()
        assert body == {"success": False, "status": 404, "message": "missing"}
        assert "data" not in body
        assert "error_code" not in body

    def test_validates_numeric_status(self):
        resp = ApiResponse.model_validate(
            {"success": False, "status": 404, "message": "missing"}
        )
        assert resp.status is HttpStatus.NOT_FOUND

    def test_validates_enum_value(self):
        resp = ApiResponse.model_validate(
            {"success": True, "status": "created", "message": "made"}
        )
        assert resp.status is HttpStatus.CREATED

    def test_rejects_unregistered_code(self):
        with pytest.raises(PydanticValidationError):
            ApiResponse.model_validate(
                {"success": False, "status": 418, "message": "teapot"}
            )

    def test_rendered_body_validates_back(self):
        original = service_response(ServiceStatus.TIMEOUT_ERROR, "slow", {"after": 30})
        restored = ApiResponse.model_validate(original.to_dict())
        assert restored.to_dict() == original.to_dict()
        assert restored.status is HttpStatus.GATEWAY_TIMEOUT

    def test_typed_payload_is_validated(self):
        with pytest.raises(PydanticValidationError):
            ApiResponse[int](success=True, status=HttpStatus.OK, message="", data="x")

    def test_envelope_is_immutable(self):
        resp = success_response(1, "ok")
        with pytest.raises(PydanticValidationError):
            resp.message = "changed"


class TestJsonResponse:
    def test_status_and_body(self):
        resp = conflict_response("taken").to_json_response()
        assert resp.status_code == 409
        assert json.loads(resp.body) == {
            "success": False,
            "status": 409,
            "message": "taken",
        }

    def test_no_content_has_empty_body(self):
        resp = no_content_response("gone").to_json_response()
        assert resp.status_code == 204
        assert resp.body == b""
