"""Payment models for YooKassa SDK."""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator

from .base import Description, YooKassaModel
from .common import Amount, CancellationDetails, Receipt, Recipient
from .confirmation import Confirmation
from .payment_method import BasePaymentMethod, PaymentMethodWithCard, SbpPaymentMethod
from ..variants import (
    confirmation_variant,
    extract_string_field,
    payment_method_variant,
    resolve_variant,
)

MAX_METADATA_KEYS = 16
MAX_METADATA_KEY_LENGTH = 32
MAX_METADATA_VALUE_LENGTH = 512


class PaymentStatus(str, Enum):
    """Payment status."""

    PENDING = "pending"
    WAITING_FOR_CAPTURE = "waiting_for_capture"
    SUCCEEDED = "succeeded"
    CANCELED = "canceled"


class ThreeDSecure(YooKassaModel):
    applied: bool


class AuthorizationDetails(YooKassaModel):
    """Payment authorization details."""

    rrn: Optional[str] = None
    auth_code: Optional[str] = None
    three_d_secure: Optional[ThreeDSecure] = None


class Transfer(YooKassaModel):
    """Part of the payment routed to another store."""

    account_id: str
    amount: Amount
    status: Optional[str] = None
    platform_fee_amount: Optional[Amount] = None
    description: Optional[Description] = None
    metadata: Optional[dict[str, Any]] = None


class Settlement(YooKassaModel):
    type: str
    amount: Amount


class Deal(YooKassaModel):
    """The deal within which the payment is carried out."""

    id: str
    settlements: list[Settlement] = Field(default_factory=list)


def validate_metadata(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Check the API limits on metadata: key count, key length, value length."""
    if len(value) > MAX_METADATA_KEYS:
        raise ValueError(f"metadata may hold at most {MAX_METADATA_KEYS} keys, got {len(value)}")
    for key, item in value.items():
        if not isinstance(key, str):
            raise ValueError(f"metadata keys must be strings, got {type(key).__name__}")
        if len(key) > MAX_METADATA_KEY_LENGTH:
            raise ValueError(f"metadata key {key[:MAX_METADATA_KEY_LENGTH]!r}... exceeds {MAX_METADATA_KEY_LENGTH} characters")
        if isinstance(item, str) and len(item) > MAX_METADATA_VALUE_LENGTH:
            raise ValueError(f"metadata value for {key!r} exceeds {MAX_METADATA_VALUE_LENGTH} characters")
    return value


class Payment(YooKassaModel):
    """
    A payment.

    ``payment_method``, ``confirmation`` and ``metadata`` are polymorphic and
    kept exactly as decoded (usually plain dicts). Use the ``get_*`` accessors
    to materialize a concrete variant; they never write back to the payment.
    """

    id: Optional[str] = None
    status: Optional[PaymentStatus] = None
    amount: Optional[Amount] = None
    # Amount minus the YooMoney commission.
    income_amount: Optional[Amount] = None
    capture: Optional[bool] = None
    description: Optional[Description] = None
    recipient: Optional[Recipient] = None
    receipt: Optional[Receipt] = None
    payment_method: Optional[Any] = None
    payment_method_id: Optional[str] = None
    save_payment_method: Optional[bool] = None
    captured_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    # Payments in waiting_for_capture are canceled automatically at this time.
    expires_at: Optional[datetime] = None
    confirmation: Optional[Any] = None
    test: Optional[bool] = None
    refunded_amount: Optional[Amount] = None
    paid: Optional[bool] = None
    refundable: Optional[bool] = None
    receipt_registration: Optional[str] = None
    metadata: Optional[Any] = None
    cancellation_details: Optional[CancellationDetails] = None
    authorization_details: Optional[AuthorizationDetails] = None
    transfers: Optional[list[Transfer]] = None
    deal: Optional[Deal] = None
    merchant_customer_id: Optional[str] = Field(default=None, max_length=200)

    @field_validator("metadata")
    @classmethod
    def check_metadata_limits(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            validate_metadata(v)
        return v

    # ==================== Payment method ====================

    def get_base_payment_method(self) -> BasePaymentMethod:
        """Payment method fields shared by every method type."""
        return resolve_variant(self.payment_method, BasePaymentMethod)

    def get_payment_method_with_card(self) -> PaymentMethodWithCard:
        """Bank card payment method, including card details."""
        return resolve_variant(self.payment_method, PaymentMethodWithCard)

    def get_sbp_payment_method(self) -> SbpPaymentMethod:
        """Fast Payment System method; fails unless ``type == "sbp"``."""
        return resolve_variant(self.payment_method, SbpPaymentMethod)

    def get_payment_method_variant(self) -> BasePaymentMethod:
        """Variant named by ``payment_method.type`` (RawPaymentMethod if unknown)."""
        return payment_method_variant(self.payment_method)

    # ==================== Confirmation ====================

    def get_confirmation_variant(self) -> Confirmation:
        """Variant named by ``confirmation.type`` (RawConfirmation if unknown)."""
        return confirmation_variant(self.confirmation)

    def get_confirmation_token(self) -> str:
        """Token of an embedded confirmation."""
        return extract_string_field(self.confirmation, "confirmation_token")

    # ==================== Metadata ====================

    def get_metadata_value(self, key: str) -> str:
        """Required, non-empty string value from metadata."""
        return extract_string_field(self.metadata, key)

    def get_invoice_id_from_metadata(self) -> str:
        return self.get_metadata_value("invoice_id")


class PaymentList(YooKassaModel):
    """A page of payments."""

    type: str = "list"
    items: list[Payment] = Field(default_factory=list)
    next_cursor: Optional[str] = None


class CapturePaymentRequest(YooKassaModel):
    """Request to capture a payment in waiting_for_capture."""

    amount: Optional[Amount] = None  # If None, capture the full amount
    receipt: Optional[Receipt] = None
    transfers: Optional[list[Transfer]] = None
    deal: Optional[Deal] = None
