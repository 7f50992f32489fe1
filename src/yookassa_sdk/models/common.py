"""Shared value objects for YooKassa SDK."""
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import Field

from .base import Description, YooKassaModel


class Amount(YooKassaModel):
    """Monetary amount. The value travels as a decimal string, e.g. ``"100.00"``."""

    value: Decimal
    currency: str = "RUB"


class Item(YooKassaModel):
    """A receipt line item."""

    # Name of the product or service, cut to 128 characters when encoded.
    description: Description
    quantity: int = 1
    amount: Amount
    vat_code: int = 1
    measure: Optional[str] = None
    payment_subject: Optional[str] = None
    payment_mode: Optional[str] = None


class Customer(YooKassaModel):
    """Receipt recipient."""

    full_name: Optional[str] = None
    inn: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class Receipt(YooKassaModel):
    """Fiscal receipt attached to a payment."""

    customer: Optional[Customer] = None
    items: list[Item] = Field(default_factory=list)
    tax_system_code: Optional[int] = None


class Recipient(YooKassaModel):
    """Payment recipient."""

    account_id: Optional[str] = None
    gateway_id: Optional[str] = None


class CancellationDetails(YooKassaModel):
    """Who canceled a payment and why."""

    party: str
    reason: str
