"""YooKassa SDK Models."""
from .base import MAX_DESCRIPTION_LENGTH, YooKassaModel
from .common import Amount, CancellationDetails, Customer, Item, Receipt, Recipient
from .confirmation import (
    Confirmation,
    ConfirmationType,
    EmbeddedConfirmation,
    ExternalConfirmation,
    MobileApplicationConfirmation,
    QRConfirmation,
    RawConfirmation,
    RedirectConfirmation,
)
from .payment_method import (
    BasePaymentMethod,
    Card,
    PayerBankDetails,
    PaymentMethodType,
    PaymentMethodWithCard,
    RawPaymentMethod,
    SbpPaymentMethod,
)
from .payment import (
    AuthorizationDetails,
    CapturePaymentRequest,
    Deal,
    Payment,
    PaymentList,
    PaymentStatus,
    Settlement,
    ThreeDSecure,
    Transfer,
)
from .errors import (
    APIError,
    DiscriminatorMismatchError,
    FieldEmptyError,
    FieldMissingError,
    FieldTypeMismatchError,
    ShapeUnsupportedError,
    VariantDecodeError,
    VariantError,
    YooKassaError,
)

__all__ = [
    "YooKassaModel",
    "MAX_DESCRIPTION_LENGTH",
    "Amount",
    "CancellationDetails",
    "Customer",
    "Item",
    "Receipt",
    "Recipient",
    "Confirmation",
    "ConfirmationType",
    "EmbeddedConfirmation",
    "ExternalConfirmation",
    "MobileApplicationConfirmation",
    "QRConfirmation",
    "RawConfirmation",
    "RedirectConfirmation",
    "BasePaymentMethod",
    "Card",
    "PayerBankDetails",
    "PaymentMethodType",
    "PaymentMethodWithCard",
    "RawPaymentMethod",
    "SbpPaymentMethod",
    "AuthorizationDetails",
    "CapturePaymentRequest",
    "Deal",
    "Payment",
    "PaymentList",
    "PaymentStatus",
    "Settlement",
    "ThreeDSecure",
    "Transfer",
    "YooKassaError",
    "APIError",
    "VariantError",
    "ShapeUnsupportedError",
    "DiscriminatorMismatchError",
    "FieldMissingError",
    "FieldTypeMismatchError",
    "FieldEmptyError",
    "VariantDecodeError",
]
