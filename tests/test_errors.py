"""Tests for yookassa_sdk.models.errors."""

from __future__ import annotations

import httpx

from yookassa_sdk.models.errors import (
    APIError,
    AuthenticationError,
    DiscriminatorMismatchError,
    ErrorCode,
    FieldMissingError,
    NotFoundError,
    RateLimitError,
    ShapeUnsupportedError,
    TransportError,
    VariantError,
    YooKassaError,
)


class TestYooKassaError:
    def test_defaults(self):
        err = YooKassaError("boom")
        assert err.message == "boom"
        assert err.code == ErrorCode.UNKNOWN_ERROR.value
        assert err.details == {}
        assert err.request_id is None

    def test_str_includes_code(self):
        assert str(YooKassaError("boom", code="X")) == "[X] boom"

    def test_to_dict_shape(self):
        err = YooKassaError(
            message="m",
            code="CUSTOM",
            details={"k": "v"},
            request_id="req_1",
        )
        as_dict = err.to_dict()
        assert as_dict["error"]["code"] == "CUSTOM"
        assert as_dict["error"]["message"] == "m"
        assert as_dict["error"]["details"] == {"k": "v"}
        assert as_dict["error"]["request_id"] == "req_1"


class TestAPIError:
    def test_from_response_with_error_body(self):
        err = APIError.from_response(
            400,
            {
                "type": "error",
                "id": "ab56f5e4-6e4b-4a1e-8c1f-3b6e0e6b3d7a",
                "code": "invalid_request",
                "description": "Idempotence key duplicated",
                "parameter": "Idempotence-Key",
            },
        )
        assert type(err) is APIError
        assert err.status_code == 400
        assert err.message == "Idempotence key duplicated"
        assert err.code == "invalid_request"
        assert err.details["parameter"] == "Idempotence-Key"
        assert err.request_id == "ab56f5e4-6e4b-4a1e-8c1f-3b6e0e6b3d7a"

    def test_from_response_with_non_dict_body(self):
        err = APIError.from_response(502, "Bad Gateway")
        assert err.status_code == 502
        assert err.message == "Bad Gateway"
        assert err.code == ErrorCode.API_ERROR.value

    def test_from_response_with_empty_body(self):
        err = APIError.from_response(500, None)
        assert err.message == "Unknown error"

    def test_status_mapping(self):
        assert isinstance(APIError.from_response(401, {}), AuthenticationError)
        assert isinstance(APIError.from_response(404, {}), NotFoundError)
        assert isinstance(APIError.from_response(429, {"retry_after": 1800}), RateLimitError)


class TestAuthenticationError:
    def test_defaults(self):
        err = AuthenticationError()
        assert err.status_code == 401
        assert err.code == ErrorCode.AUTHENTICATION_ERROR.value


class TestNotFoundError:
    def test_defaults(self):
        err = NotFoundError()
        assert err.status_code == 404
        assert err.code == ErrorCode.NOT_FOUND.value
        assert err.message == "Resource not found"


class TestRateLimitError:
    def test_retry_after_kept(self):
        err = APIError.from_response(429, {"description": "Too many requests", "retry_after": 1800})
        assert err.status_code == 429
        assert err.details["retry_after"] == 1800


class TestVariantErrors:
    def test_hierarchy(self):
        err = FieldMissingError("invoice_id")
        assert isinstance(err, VariantError)
        assert isinstance(err, YooKassaError)
        assert err.code == ErrorCode.FIELD_MISSING.value
        assert err.message == "invoice_id not found"

    def test_discriminator_details(self):
        err = DiscriminatorMismatchError("type", "sbp", "bank_card")
        assert err.details == {"field": "type", "expected": "sbp", "actual": "bank_card"}

    def test_shape_message_names_target(self):
        err = ShapeUnsupportedError("str", "SbpPaymentMethod")
        assert "str" in err.message
        assert "SbpPaymentMethod" in err.message


class TestTransportError:
    def test_is_httpx_transport_error(self):
        assert TransportError is httpx.TransportError
        assert issubclass(httpx.ConnectError, TransportError)
