"""
Idempotency key handling for YooKassa operations.

The API recognises a retried mutating request by its ``Idempotence-Key``
header and processes it at most once. Every operation handler owns exactly
one key slot: the caller may pin a key before a request, otherwise a fresh
one is generated at dispatch time. Either way the slot is emptied as soon as
the key is handed to a request, so a handler never replays a stale key onto
an unrelated operation.

Retrying the same logical operation means setting the SAME key again before
re-issuing the call:

    handler = PaymentHandler(client)
    key = new_idempotency_key()
    try:
        handler.set_idempotency_key(key).create_payment(payment)
    except httpx.TransportError:
        handler.set_idempotency_key(key).create_payment(payment)
"""
from __future__ import annotations

import logging
import uuid

logger = logging.getLogger(__name__)


def new_idempotency_key() -> str:
    """Generate a new 128-bit random idempotency key."""
    return str(uuid.uuid4())


class IdempotencyKeySlot:
    """
    Single-use holder for one pending idempotency key.

    Not safe for concurrent use: give every in-flight logical operation its
    own handler (and therefore its own slot).
    """

    __slots__ = ("_key",)

    def __init__(self) -> None:
        self._key = ""

    @property
    def key(self) -> str:
        """Currently stored key, or an empty string."""
        return self._key

    def is_empty(self) -> bool:
        return not self._key

    def set(self, key: str) -> bool:
        """
        Store ``key`` if the slot is empty.

        An unconsumed key is never overwritten.

        Returns:
            True if the key was stored, False if the call was ignored
        """
        if self._key:
            logger.debug("Idempotency key already pending, ignoring new key")
            return False
        self._key = key
        return True

    def consume_or_generate(self) -> str:
        """Return the pending key (or a fresh one) and empty the slot."""
        key = self._key or new_idempotency_key()
        self._key = ""
        return key

    def __repr__(self) -> str:
        return f"IdempotencyKeySlot(key={self._key!r})"


__all__ = [
    "IdempotencyKeySlot",
    "new_idempotency_key",
]
