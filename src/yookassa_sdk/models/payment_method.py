"""Payment method variants for YooKassa SDK.

``Payment.payment_method`` is kept as it was decoded. These classes are
read-only projections of it, materialized through
``yookassa_sdk.variants.resolve_variant``.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Optional

from pydantic import ConfigDict

from .base import YooKassaModel


class PaymentMethodType(str, Enum):
    """Known values of ``payment_method.type``."""

    BANK_CARD = "bank_card"
    SBP = "sbp"
    YOO_MONEY = "yoo_money"
    SBERBANK = "sberbank"
    TINKOFF_BANK = "tinkoff_bank"
    CASH = "cash"
    MOBILE_BALANCE = "mobile_balance"


class BasePaymentMethod(YooKassaModel):
    """Fields shared by every payment method."""

    discriminator_field: ClassVar[str] = "type"
    discriminator_value: ClassVar[Optional[str]] = None

    type: str
    id: Optional[str] = None
    saved: Optional[bool] = None
    title: Optional[str] = None


class Card(YooKassaModel):
    """Bank card details."""

    first6: Optional[str] = None
    last4: str
    expiry_month: str
    expiry_year: str
    card_type: Optional[str] = None
    issuer_country: Optional[str] = None
    issuer_name: Optional[str] = None


class PaymentMethodWithCard(BasePaymentMethod):
    """A bank card payment method."""

    discriminator_value: ClassVar[Optional[str]] = PaymentMethodType.BANK_CARD.value

    card: Optional[Card] = None


class PayerBankDetails(YooKassaModel):
    """Bank the payer used for an SBP transfer."""

    bank_id: Optional[str] = None
    bic: Optional[str] = None


class SbpPaymentMethod(BasePaymentMethod):
    """Fast Payment System (SBP) payment method."""

    discriminator_value: ClassVar[Optional[str]] = PaymentMethodType.SBP.value

    sbp_operation_id: Optional[str] = None
    payer_bank_details: Optional[PayerBankDetails] = None


class RawPaymentMethod(BasePaymentMethod):
    """Payment method with a type this SDK does not model; keeps every field."""

    model_config = ConfigDict(extra="allow")

    # Tag kept as decoded, even when absent or not a string.
    type: Any = None


PAYMENT_METHOD_VARIANTS: dict[str, type[BasePaymentMethod]] = {
    PaymentMethodType.BANK_CARD.value: PaymentMethodWithCard,
    PaymentMethodType.SBP.value: SbpPaymentMethod,
}
