"""
YooKassa Python SDK

Example usage:
    ```python
    from yookassa_sdk import YooKassaClient, PaymentHandler
    from yookassa_sdk.models import Amount, Payment

    with YooKassaClient(account_id="123456", secret_key="test_...") as client:
        handler = PaymentHandler(client)
        payment = handler.create_payment(
            Payment(amount=Amount(value="100.00", currency="RUB"), capture=True)
        )
        print(payment.get_confirmation_token())
    ```

The client is constructed explicitly and passed to every handler; there is
no process-wide default instance. One client (and its connection pool) can
be shared by any number of handlers.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

import httpx

from .config import DEFAULT_BASE_URL, YooKassaSettings, load_settings
from .idempotency import new_idempotency_key

logger = logging.getLogger(__name__)

IDEMPOTENCE_KEY_HEADER = "Idempotence-Key"
MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})
USER_AGENT = "yookassa-sdk-python/0.1.0"


def format_query_value(value: Any) -> str:
    """Render one query parameter value the same way every time."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_params(params: Optional[Mapping[str, Any]]) -> Optional[list[tuple[str, str]]]:
    """Turn a parameter mapping into query pairs, dropping ``None`` values."""
    if not params:
        return None
    return [
        (name, format_query_value(value))
        for name, value in params.items()
        if value is not None
    ]


class _BaseYooKassaClient:
    """Credential handling and request preparation shared by both clients."""

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        account_id: Optional[str] = None,
        secret_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if not account_id:
            raise ValueError("Account ID is required")
        if not secret_key:
            raise ValueError("Secret key is required")

        self._account_id = account_id
        self._secret_key = secret_key
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._timeout = httpx.Timeout(timeout)
        self._auth = httpx.BasicAuth(account_id, secret_key)

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, path: str) -> str:
        """Join the base URL and an endpoint path."""
        return f"{self._base_url}{path.lstrip('/')}"

    @staticmethod
    def is_mutating(method: str) -> bool:
        return method.upper() in MUTATING_METHODS

    def _prepare_headers(self, method: str, idempotency_key: str) -> dict[str, str]:
        """Headers for one request; only mutating requests carry a key."""
        headers = {"User-Agent": USER_AGENT}
        if self.is_mutating(method):
            headers["Content-Type"] = "application/json"
            headers[IDEMPOTENCE_KEY_HEADER] = idempotency_key or new_idempotency_key()
        return headers

    @classmethod
    def _settings_kwargs(cls, settings: Optional[YooKassaSettings]) -> dict[str, Any]:
        settings = settings or load_settings()
        return {
            "account_id": settings.account_id,
            "secret_key": settings.secret_key.get_secret_value(),
            "base_url": settings.base_url,
            "timeout": settings.timeout,
        }


class YooKassaClient(_BaseYooKassaClient):
    """
    Synchronous YooKassa API client.

    Args:
        account_id: Shop ID, used as the Basic auth user name
        secret_key: Secret key, used as the Basic auth password
        base_url: API base URL (default: https://api.yookassa.ru/v3/)
        timeout: Request timeout in seconds (default: 30)
        transport: Optional httpx transport (proxies, custom TLS, tests)
    """

    def __init__(
        self,
        account_id: Optional[str] = None,
        secret_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = _BaseYooKassaClient.DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(account_id, secret_key, base_url, timeout)
        self._client = httpx.Client(
            auth=self._auth,
            timeout=self._timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[YooKassaSettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "YooKassaClient":
        """Create a client from YOOKASSA_* settings."""
        return cls(**cls._settings_kwargs(settings), transport=transport)

    def dispatch(
        self,
        method: str,
        path: str,
        body: Optional[bytes] = None,
        params: Optional[Mapping[str, Any]] = None,
        idempotency_key: str = "",
    ) -> httpx.Response:
        """Send one authenticated request and return the raw response.

        The request is sent exactly once. Status codes are not interpreted
        and httpx transport errors propagate unchanged.

        Args:
            method: HTTP method
            path: Endpoint path relative to the base URL
            body: Serialized JSON body
            params: Query parameters
            idempotency_key: Key for mutating requests; generated when empty

        Returns:
            The httpx response
        """
        method = method.upper()
        headers = self._prepare_headers(method, idempotency_key)
        request = self._client.build_request(
            method,
            self.build_url(path),
            content=body,
            params=encode_params(params),
            headers=headers,
        )
        logger.debug(
            "Dispatching %s %s (idempotent=%s)",
            method,
            request.url,
            IDEMPOTENCE_KEY_HEADER in headers,
        )
        response = self._client.send(request)
        logger.debug("Received %s for %s %s", response.status_code, method, request.url.path)
        return response

    def close(self) -> None:
        """Close the HTTP client."""
        if not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "YooKassaClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncYooKassaClient(_BaseYooKassaClient):
    """
    Asynchronous YooKassa API client.

    Same contract as YooKassaClient, backed by ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        account_id: Optional[str] = None,
        secret_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = _BaseYooKassaClient.DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(account_id, secret_key, base_url, timeout)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[YooKassaSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AsyncYooKassaClient":
        """Create a client from YOOKASSA_* settings."""
        return cls(**cls._settings_kwargs(settings), transport=transport)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                auth=self._auth,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def dispatch(
        self,
        method: str,
        path: str,
        body: Optional[bytes] = None,
        params: Optional[Mapping[str, Any]] = None,
        idempotency_key: str = "",
    ) -> httpx.Response:
        """Send one authenticated request and return the raw response."""
        client = await self._get_client()
        method = method.upper()
        headers = self._prepare_headers(method, idempotency_key)
        request = client.build_request(
            method,
            self.build_url(path),
            content=body,
            params=encode_params(params),
            headers=headers,
        )
        logger.debug(
            "Dispatching %s %s (idempotent=%s)",
            method,
            request.url,
            IDEMPOTENCE_KEY_HEADER in headers,
        )
        response = await client.send(request)
        logger.debug("Received %s for %s %s", response.status_code, method, request.url.path)
        return response

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncYooKassaClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


__all__ = [
    "AsyncYooKassaClient",
    "IDEMPOTENCE_KEY_HEADER",
    "MUTATING_METHODS",
    "YooKassaClient",
    "encode_params",
    "format_query_value",
]
