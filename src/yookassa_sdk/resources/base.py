"""
Base operation handler classes for YooKassa SDK.

A handler is cheap, mutable and NOT thread-safe: it carries the pending
idempotency key of the next request. Create one handler per logical
operation; the client underneath may be shared freely.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, TypeVar, Union

import httpx
from pydantic import BaseModel

from ..idempotency import IdempotencyKeySlot
from ..models.errors import APIError, ResponseDecodeError
from ..variants import json_default

if TYPE_CHECKING:
    from ..client import AsyncYooKassaClient, YooKassaClient

H = TypeVar("H", bound="_HandlerBase")

Body = Union[BaseModel, Mapping[str, Any], None]


def encode_body(body: Body) -> Optional[bytes]:
    """Serialize a request body to JSON bytes."""
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump_json(exclude_none=True, by_alias=True).encode("utf-8")
    return json.dumps(dict(body), ensure_ascii=False, default=json_default).encode("utf-8")


def parse_response(response: httpx.Response) -> dict[str, Any]:
    """Decode a response body, raising APIError for non-2xx statuses."""
    if not response.is_success:
        try:
            body = response.json()
        except ValueError:
            body = {"description": response.text}
        raise APIError.from_response(response.status_code, body)
    if not response.content:
        return {}
    try:
        body = response.json()
    except ValueError as e:
        raise ResponseDecodeError(response.status_code, str(e)) from e
    if not isinstance(body, dict):
        raise ResponseDecodeError(response.status_code, f"expected an object, got {type(body).__name__}")
    return body


class _HandlerBase:
    """Idempotency slot shared by sync and async handlers."""

    def __init__(self) -> None:
        self._idempotency = IdempotencyKeySlot()

    @property
    def idempotency_key(self) -> str:
        """Key that the next request will carry, or an empty string."""
        return self._idempotency.key

    def set_idempotency_key(self: H, key: str) -> H:
        """Pin the idempotency key for the next request.

        Ignored while an earlier key is still pending. Returns this same
        handler (not a copy), so calls can be chained:

            handler.set_idempotency_key(key).create_payment(payment)
        """
        self._idempotency.set(key)
        return self


class OperationHandler(_HandlerBase):
    """Base class for sync operation handlers.

    Attributes:
        _client: The sync client instance
    """

    def __init__(self, client: "YooKassaClient") -> None:
        super().__init__()
        self._client = client

    def _dispatch(
        self,
        method: str,
        path: str,
        body: Body = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """Send one request, consuming the pending idempotency key."""
        payload = encode_body(body)
        key = self._idempotency.consume_or_generate()
        response = self._client.dispatch(
            method,
            path,
            body=payload,
            params=params,
            idempotency_key=key,
        )
        return parse_response(response)

    def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._dispatch("GET", path, params=params)

    def _post(self, path: str, data: Body = None) -> dict[str, Any]:
        return self._dispatch("POST", path, body=data if data is not None else {})


class AsyncOperationHandler(_HandlerBase):
    """Base class for async operation handlers.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncYooKassaClient") -> None:
        super().__init__()
        self._client = client

    async def _dispatch(
        self,
        method: str,
        path: str,
        body: Body = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """Send one request, consuming the pending idempotency key."""
        payload = encode_body(body)
        key = self._idempotency.consume_or_generate()
        response = await self._client.dispatch(
            method,
            path,
            body=payload,
            params=params,
            idempotency_key=key,
        )
        return parse_response(response)

    async def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return await self._dispatch("GET", path, params=params)

    async def _post(self, path: str, data: Body = None) -> dict[str, Any]:
        return await self._dispatch("POST", path, body=data if data is not None else {})


__all__ = [
    "AsyncOperationHandler",
    "OperationHandler",
    "encode_body",
    "parse_response",
]
