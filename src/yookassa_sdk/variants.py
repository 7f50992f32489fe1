"""
Variant resolution for polymorphic response fields.

Fields such as ``payment_method``, ``confirmation`` and ``metadata`` are
decoded without a target type, so they usually arrive as plain dicts. This
module turns such a value into one concrete variant on demand:

    method = resolve_variant(payment.payment_method, SbpPaymentMethod)
    token = extract_string_field(payment.confirmation, "confirmation_token")

Resolution order:
    1. the value already is an instance of the requested variant;
    2. the value is another model instance (dumped to a mapping first);
    3. the value is a mapping: encoded to canonical JSON bytes and decoded
       into the requested variant;
    4. anything else raises ShapeUnsupportedError.

A variant that declares ``discriminator_value`` is checked after decoding;
a mismatch raises DiscriminatorMismatchError instead of returning a
mislabelled variant.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from .models.confirmation import CONFIRMATION_VARIANTS, Confirmation, RawConfirmation
from .models.errors import (
    DiscriminatorMismatchError,
    FieldEmptyError,
    FieldMissingError,
    FieldTypeMismatchError,
    ShapeUnsupportedError,
    VariantDecodeError,
)
from .models.payment_method import (
    PAYMENT_METHOD_VARIANTS,
    BasePaymentMethod,
    RawPaymentMethod,
)

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=BaseModel)


def _shape_name(value: Any) -> str:
    return type(value).__name__


def json_default(value: Any) -> Any:
    """``json.dumps`` hook: models, decimals, datetimes and enums."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {_shape_name(value)} is not JSON serializable")


def canonical_json(mapping: Mapping[str, Any]) -> bytes:
    """Encode a mapping as compact JSON with sorted keys."""
    return json.dumps(
        dict(mapping),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=json_default,
    ).encode("utf-8")


def _as_mapping(value: Any) -> Optional[Mapping[str, Any]]:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return value
    return None


def _decode(mapping: Mapping[str, Any], variant_cls: type[V]) -> V:
    try:
        raw = canonical_json(mapping)
    except (TypeError, ValueError) as e:
        raise VariantDecodeError(variant_cls.__name__, str(e)) from e
    try:
        return variant_cls.model_validate_json(raw)
    except ValidationError as e:
        raise VariantDecodeError(variant_cls.__name__, str(e)) from e


def _check_discriminator(variant: V, variant_cls: type[V]) -> None:
    expected = getattr(variant_cls, "discriminator_value", None)
    if expected is None:
        return
    field = getattr(variant_cls, "discriminator_field", "type")
    actual = getattr(variant, field, None)
    if actual != expected:
        raise DiscriminatorMismatchError(field, expected, actual)


def resolve_variant(value: Any, variant_cls: type[V]) -> V:
    """Materialize ``value`` as ``variant_cls``.

    Args:
        value: Decoded field value (variant instance, model, or mapping)
        variant_cls: Requested variant model

    Returns:
        A ``variant_cls`` instance; the source value is never modified

    Raises:
        ShapeUnsupportedError: value is neither a model nor a mapping
        VariantDecodeError: the mapping does not fit the variant's shape
        DiscriminatorMismatchError: the discriminator names another variant
    """
    if isinstance(value, variant_cls):
        variant = value
    else:
        mapping = _as_mapping(value)
        if mapping is None:
            raise ShapeUnsupportedError(_shape_name(value), variant_cls.__name__)
        variant = _decode(mapping, variant_cls)

    _check_discriminator(variant, variant_cls)
    return variant


def resolve_tagged(
    value: Any,
    registry: Mapping[str, type[V]],
    fallback: type[V],
    tag_field: str = "type",
) -> V:
    """Pick the variant named by ``value[tag_field]``, or ``fallback`` for unknown tags."""
    mapping = _as_mapping(value)
    if mapping is None:
        raise ShapeUnsupportedError(_shape_name(value), fallback.__name__)
    tag = mapping.get(tag_field)
    variant_cls = registry.get(tag, fallback) if isinstance(tag, str) else fallback
    if variant_cls is fallback:
        logger.debug("No variant registered for %s=%r, keeping raw", tag_field, tag)
    return resolve_variant(mapping, variant_cls)


def payment_method_variant(value: Any) -> BasePaymentMethod:
    """Resolve a payment method to its registered variant or RawPaymentMethod."""
    if isinstance(value, BasePaymentMethod) and not isinstance(value, RawPaymentMethod):
        return value
    return resolve_tagged(value, PAYMENT_METHOD_VARIANTS, RawPaymentMethod)


def confirmation_variant(value: Any) -> Confirmation:
    """Resolve a confirmation to its registered variant or RawConfirmation."""
    if isinstance(value, Confirmation) and not isinstance(value, RawConfirmation):
        return value
    return resolve_tagged(value, CONFIRMATION_VARIANTS, RawConfirmation)


def extract_string_field(value: Any, field: str) -> str:
    """Read a required, non-empty string field out of a generic mapping.

    Raises:
        ShapeUnsupportedError: value is not a mapping
        FieldMissingError: the field is absent
        FieldTypeMismatchError: the field is not a string
        FieldEmptyError: the field is an empty string
    """
    mapping = _as_mapping(value)
    if mapping is None:
        raise ShapeUnsupportedError(_shape_name(value), "mapping")
    if field not in mapping:
        raise FieldMissingError(field)
    raw = mapping[field]
    if not isinstance(raw, str):
        raise FieldTypeMismatchError(field, "string", _shape_name(raw))
    if raw == "":
        raise FieldEmptyError(field)
    return raw


__all__ = [
    "canonical_json",
    "json_default",
    "confirmation_variant",
    "extract_string_field",
    "payment_method_variant",
    "resolve_tagged",
    "resolve_variant",
]
