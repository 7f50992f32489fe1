"""
Payment operations for YooKassa SDK.

This module provides both async and sync handlers for payment operations.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from ..models.payment import CapturePaymentRequest, Payment, PaymentList
from .base import AsyncOperationHandler, OperationHandler

PAYMENTS_ENDPOINT = "payments"

PaymentBody = Union[Payment, Mapping[str, Any]]


def _payment_path(payment_id: str, action: Optional[str] = None) -> str:
    if not payment_id:
        raise ValueError("Payment ID is required")
    path = f"{PAYMENTS_ENDPOINT}/{payment_id}"
    return f"{path}/{action}" if action else path


class PaymentHandler(OperationHandler):
    """Sync handler for payment operations.

    Example:
        ```python
        with YooKassaClient(account_id="...", secret_key="...") as client:
            handler = PaymentHandler(client)

            # Create a payment under a caller-chosen key
            payment = handler.set_idempotency_key(key).create_payment(payment)

            # Capture it once the order is confirmed
            payment = handler.capture_payment(payment.id)
        ```
    """

    def create_payment(self, payment: PaymentBody) -> Payment:
        """Create a payment.

        Args:
            payment: Payment to create (amount, confirmation, metadata, ...)

        Returns:
            The created Payment
        """
        response = self._post(PAYMENTS_ENDPOINT, payment)
        return Payment.model_validate(response)

    def find_payment(self, payment_id: str) -> Payment:
        """Get a payment by ID."""
        response = self._get(_payment_path(payment_id))
        return Payment.model_validate(response)

    def capture_payment(
        self,
        payment_id: str,
        request: Optional[CapturePaymentRequest] = None,
    ) -> Payment:
        """Capture a payment in waiting_for_capture.

        Args:
            payment_id: Payment to capture
            request: Optional partial amount, receipt, transfers or deal

        Returns:
            The updated Payment
        """
        response = self._post(_payment_path(payment_id, "capture"), request)
        return Payment.model_validate(response)

    def cancel_payment(self, payment_id: str) -> Payment:
        """Cancel a payment in waiting_for_capture."""
        response = self._post(_payment_path(payment_id, "cancel"))
        return Payment.model_validate(response)

    def find_payments(self, **filters: Any) -> PaymentList:
        """List payments.

        Args:
            **filters: Query filters such as ``status``, ``limit`` or ``cursor``.
                Dotted filters go through a dict, e.g.
                ``**{"created_at.gte": since}``; datetimes are sent in ISO 8601.

        Returns:
            PaymentList with ``items`` and ``next_cursor``
        """
        response = self._get(PAYMENTS_ENDPOINT, params=filters or None)
        return PaymentList.model_validate(response)


class AsyncPaymentHandler(AsyncOperationHandler):
    """Async handler for payment operations.

    Example:
        ```python
        async with AsyncYooKassaClient(account_id="...", secret_key="...") as client:
            handler = AsyncPaymentHandler(client)
            payment = await handler.create_payment(payment)
        ```
    """

    async def create_payment(self, payment: PaymentBody) -> Payment:
        """Create a payment."""
        response = await self._post(PAYMENTS_ENDPOINT, payment)
        return Payment.model_validate(response)

    async def find_payment(self, payment_id: str) -> Payment:
        """Get a payment by ID."""
        response = await self._get(_payment_path(payment_id))
        return Payment.model_validate(response)

    async def capture_payment(
        self,
        payment_id: str,
        request: Optional[CapturePaymentRequest] = None,
    ) -> Payment:
        """Capture a payment in waiting_for_capture."""
        response = await self._post(_payment_path(payment_id, "capture"), request)
        return Payment.model_validate(response)

    async def cancel_payment(self, payment_id: str) -> Payment:
        """Cancel a payment in waiting_for_capture."""
        response = await self._post(_payment_path(payment_id, "cancel"))
        return Payment.model_validate(response)

    async def find_payments(self, **filters: Any) -> PaymentList:
        """List payments."""
        response = await self._get(PAYMENTS_ENDPOINT, params=filters or None)
        return PaymentList.model_validate(response)


__all__ = [
    "AsyncPaymentHandler",
    "PaymentHandler",
]
