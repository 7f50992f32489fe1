"""Error models for YooKassa SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import httpx


class ErrorCode(str, Enum):
    """Error codes raised by the SDK itself."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    API_ERROR = "API_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    SHAPE_UNSUPPORTED = "SHAPE_UNSUPPORTED"
    DISCRIMINATOR_MISMATCH = "DISCRIMINATOR_MISMATCH"
    FIELD_MISSING = "FIELD_MISSING"
    FIELD_TYPE_MISMATCH = "FIELD_TYPE_MISMATCH"
    FIELD_EMPTY = "FIELD_EMPTY"
    VARIANT_DECODE_ERROR = "VARIANT_DECODE_ERROR"
    RESPONSE_DECODE_ERROR = "RESPONSE_DECODE_ERROR"


# Network failures are raised by httpx and never wrapped.
TransportError = httpx.TransportError


class YooKassaError(Exception):
    """Base exception for YooKassa SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or ErrorCode.UNKNOWN_ERROR.value
        self.details = details or {}
        self.request_id = request_id

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "request_id": self.request_id,
            }
        }


# ==================== Variant resolution ====================


class VariantError(YooKassaError):
    """A polymorphic field could not be materialized as the requested shape."""


class ShapeUnsupportedError(VariantError):
    """The source value is neither a variant instance nor a generic mapping."""

    def __init__(self, shape: str, target: Optional[str] = None):
        message = f"unsupported source shape: {shape}"
        if target:
            message = f"{message} (expected mapping or {target})"
        super().__init__(
            message,
            code=ErrorCode.SHAPE_UNSUPPORTED.value,
            details={"shape": shape, "target": target},
        )
        self.shape = shape
        self.target = target


class DiscriminatorMismatchError(VariantError):
    """The decoded discriminator names a different variant."""

    def __init__(self, field: str, expected: str, actual: Any):
        super().__init__(
            f"{field} mismatch: expected {expected!r}, got {actual!r}",
            code=ErrorCode.DISCRIMINATOR_MISMATCH.value,
            details={"field": field, "expected": expected, "actual": actual},
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class FieldMissingError(VariantError):
    """A named field is absent from the mapping."""

    def __init__(self, field: str):
        super().__init__(
            f"{field} not found",
            code=ErrorCode.FIELD_MISSING.value,
            details={"field": field},
        )
        self.field = field


class FieldTypeMismatchError(VariantError):
    """A named field is present but holds the wrong primitive type."""

    def __init__(self, field: str, expected: str, actual: str):
        super().__init__(
            f"{field} is not a {expected}, got {actual}",
            code=ErrorCode.FIELD_TYPE_MISMATCH.value,
            details={"field": field, "expected": expected, "actual": actual},
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class FieldEmptyError(VariantError):
    """A named string field is empty."""

    def __init__(self, field: str):
        super().__init__(
            f"{field} is empty",
            code=ErrorCode.FIELD_EMPTY.value,
            details={"field": field},
        )
        self.field = field


class VariantDecodeError(VariantError):
    """A mapping could not be decoded into the requested variant."""

    def __init__(self, target: str, reason: str):
        super().__init__(
            f"failed to decode {target}: {reason}",
            code=ErrorCode.VARIANT_DECODE_ERROR.value,
            details={"target": target, "reason": reason},
        )
        self.target = target
        self.reason = reason


# ==================== API responses ====================


class APIError(YooKassaError):
    """Error from API response."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message, code or ErrorCode.API_ERROR.value, details, request_id)
        self.status_code = status_code

    @classmethod
    def from_response(cls, status_code: int, body: Any) -> "APIError":
        """Create APIError from an HTTP error response.

        The API answers errors with
        ``{"type": "error", "id": ..., "code": ..., "description": ..., "parameter": ...}``.
        """
        if not isinstance(body, dict):
            body = {"description": str(body)} if body else {}

        message = body.get("description") or body.get("message") or "Unknown error"
        code = body.get("code")
        request_id = body.get("id")
        details = {k: v for k, v in body.items() if k in ("parameter", "retry_after", "type")}

        if status_code == 401:
            return AuthenticationError(message, code=code, details=details, request_id=request_id)
        if status_code == 404:
            return NotFoundError(message, code=code, details=details, request_id=request_id)
        if status_code == 429:
            return RateLimitError(message, code=code, details=details, request_id=request_id)
        return cls(
            message=message,
            status_code=status_code,
            code=code,
            details=details,
            request_id=request_id,
        )


class ResponseDecodeError(APIError):
    """A successful response whose body is not a JSON object."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(
            f"failed to decode response body: {reason}",
            status_code=status_code,
            code=ErrorCode.RESPONSE_DECODE_ERROR.value,
            details={"reason": reason},
        )
        self.reason = reason


class AuthenticationError(APIError):
    """Authentication error."""

    def __init__(
        self,
        message: str = "Invalid account id or secret key",
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=401,
            code=code or ErrorCode.AUTHENTICATION_ERROR.value,
            details=details,
            request_id=request_id,
        )


class NotFoundError(APIError):
    """Resource not found error."""

    def __init__(
        self,
        message: str = "Resource not found",
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=404,
            code=code or ErrorCode.NOT_FOUND.value,
            details=details,
            request_id=request_id,
        )


class RateLimitError(APIError):
    """Rate limit exceeded error."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=429,
            code=code or ErrorCode.RATE_LIMIT_EXCEEDED.value,
            details=details,
            request_id=request_id,
        )


__all__ = [
    "ErrorCode",
    "TransportError",
    "YooKassaError",
    "VariantError",
    "ShapeUnsupportedError",
    "DiscriminatorMismatchError",
    "FieldMissingError",
    "FieldTypeMismatchError",
    "FieldEmptyError",
    "VariantDecodeError",
    "APIError",
    "ResponseDecodeError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
]
