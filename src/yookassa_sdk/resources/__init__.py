"""YooKassa SDK operation handlers."""
from .base import AsyncOperationHandler, OperationHandler
from .payments import AsyncPaymentHandler, PaymentHandler

__all__ = [
    "AsyncOperationHandler",
    "OperationHandler",
    "AsyncPaymentHandler",
    "PaymentHandler",
]
