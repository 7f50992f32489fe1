"""
YooKassa Python SDK

Client for the YooKassa payment API with safe idempotent dispatch and
on-demand resolution of polymorphic response fields.
"""

from .client import AsyncYooKassaClient, YooKassaClient
from .config import YooKassaSettings, load_settings
from .idempotency import IdempotencyKeySlot, new_idempotency_key
from .models.errors import (
    APIError,
    AuthenticationError,
    DiscriminatorMismatchError,
    FieldEmptyError,
    FieldMissingError,
    FieldTypeMismatchError,
    NotFoundError,
    RateLimitError,
    ResponseDecodeError,
    ShapeUnsupportedError,
    TransportError,
    VariantDecodeError,
    VariantError,
    YooKassaError,
)
from .models.payment import Payment, PaymentList, PaymentStatus
from .resources.payments import AsyncPaymentHandler, PaymentHandler
from .variants import (
    confirmation_variant,
    extract_string_field,
    payment_method_variant,
    resolve_variant,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "YooKassaClient",
    "AsyncYooKassaClient",
    "YooKassaSettings",
    "load_settings",
    # Handlers
    "PaymentHandler",
    "AsyncPaymentHandler",
    # Idempotency
    "IdempotencyKeySlot",
    "new_idempotency_key",
    # Variants
    "resolve_variant",
    "payment_method_variant",
    "confirmation_variant",
    "extract_string_field",
    # Errors
    "YooKassaError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ResponseDecodeError",
    "TransportError",
    "VariantError",
    "ShapeUnsupportedError",
    "DiscriminatorMismatchError",
    "FieldMissingError",
    "FieldTypeMismatchError",
    "FieldEmptyError",
    "VariantDecodeError",
    # Payment models
    "Payment",
    "PaymentList",
    "PaymentStatus",
]
