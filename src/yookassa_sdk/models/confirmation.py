"""Confirmation scenario variants for YooKassa SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Optional

from pydantic import ConfigDict

from .base import YooKassaModel


class ConfirmationType(str, Enum):
    """Known values of ``confirmation.type``."""

    REDIRECT = "redirect"
    EMBEDDED = "embedded"
    EXTERNAL = "external"
    QR = "qr"
    MOBILE_APPLICATION = "mobile_application"


class Confirmation(YooKassaModel):
    """Fields shared by every confirmation scenario."""

    discriminator_field: ClassVar[str] = "type"
    discriminator_value: ClassVar[Optional[str]] = None

    type: str
    locale: Optional[str] = None


class RedirectConfirmation(Confirmation):
    """The user confirms the payment on a YooMoney page."""

    discriminator_value: ClassVar[Optional[str]] = ConfirmationType.REDIRECT.value

    confirmation_url: Optional[str] = None
    return_url: Optional[str] = None
    enforce: Optional[bool] = None


class EmbeddedConfirmation(Confirmation):
    """The payment is confirmed through the checkout widget."""

    discriminator_value: ClassVar[Optional[str]] = ConfirmationType.EMBEDDED.value

    confirmation_token: Optional[str] = None


class ExternalConfirmation(Confirmation):
    """The payment is confirmed outside YooMoney (e.g. by SMS)."""

    discriminator_value: ClassVar[Optional[str]] = ConfirmationType.EXTERNAL.value


class QRConfirmation(Confirmation):
    """The user scans a QR code."""

    discriminator_value: ClassVar[Optional[str]] = ConfirmationType.QR.value

    confirmation_data: Optional[str] = None


class MobileApplicationConfirmation(Confirmation):
    """The user confirms the payment in a banking app."""

    discriminator_value: ClassVar[Optional[str]] = ConfirmationType.MOBILE_APPLICATION.value

    confirmation_url: Optional[str] = None
    return_url: Optional[str] = None


class RawConfirmation(Confirmation):
    """Confirmation with a type this SDK does not model; keeps every field."""

    model_config = ConfigDict(extra="allow")

    type: Any = None


CONFIRMATION_VARIANTS: dict[str, type[Confirmation]] = {
    ConfirmationType.REDIRECT.value: RedirectConfirmation,
    ConfirmationType.EMBEDDED.value: EmbeddedConfirmation,
    ConfirmationType.EXTERNAL.value: ExternalConfirmation,
    ConfirmationType.QR.value: QRConfirmation,
    ConfirmationType.MOBILE_APPLICATION.value: MobileApplicationConfirmation,
}
