"""
Pytest configuration and fixtures for YooKassa SDK tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from yookassa_sdk import AsyncYooKassaClient, YooKassaClient

BASE_URL = "https://api.yookassa.ru/v3/"


@dataclass
class _MockEntry:
    method: str
    url: str
    status_code: int = 200
    content: bytes = b""
    headers: Optional[dict[str, str]] = None
    exception: Optional[Exception] = None


class _HTTPXMock:
    """Queue of canned responses served through ``httpx.MockTransport``.

    Every request that reaches the transport is recorded, so tests can
    inspect headers, query strings and bodies exactly as sent.
    """

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers = {"content-type": "application/json"}
            if headers:
                response_headers.update(headers)
        else:
            response_headers = headers or {}

        self._entries.append(
            _MockEntry(
                method=method.upper(),
                url=url,
                status_code=status_code,
                content=content or b"",
                headers=response_headers,
            )
        )

    def add_exception(
        self,
        exception: Exception,
        *,
        url: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, exception=exception)
        )

    def get_request(self) -> httpx.Request:
        """The single request sent so far."""
        assert len(self.requests) == 1, f"Expected one request, got {len(self.requests)}"
        return self.requests[0]

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        match = self._pop_match(request.method, str(request.url))
        if match.exception is not None:
            raise match.exception
        return httpx.Response(
            status_code=match.status_code,
            headers=match.headers,
            content=match.content,
            request=request,
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def httpx_mock() -> _HTTPXMock:
    """Transport-level HTTP mock."""
    return _HTTPXMock()


# Mock response data
MOCK_RESPONSES = {
    "payment": {
        "id": "2d6f5c4e-000f-5000-9000-1b68e7b15f3f",
        "status": "pending",
        "paid": False,
        "amount": {"value": "100.00", "currency": "RUB"},
        "confirmation": {
            "type": "embedded",
            "confirmation_token": "ct-2d6f5c4e-000f-5000-9000-1b68e7b15f3f",
        },
        "created_at": "2025-01-20T10:00:00.000Z",
        "description": "Order No. 72",
        "metadata": {"invoice_id": "inv_1001", "order_id": "72"},
        "payment_method": {
            "type": "bank_card",
            "id": "2d6f5c4e-000f-5000-9000-1b68e7b15f3f",
            "saved": False,
            "card": {
                "first6": "555555",
                "last4": "4444",
                "expiry_month": "07",
                "expiry_year": "2030",
                "card_type": "MasterCard",
            },
        },
        "recipient": {"account_id": "100500", "gateway_id": "100700"},
        "refundable": False,
        "test": True,
    },
    "sbp_payment": {
        "id": "2d6f6a1b-000f-5000-8000-1a4e3f2b0c9d",
        "status": "succeeded",
        "paid": True,
        "amount": {"value": "250.00", "currency": "RUB"},
        "payment_method": {
            "type": "sbp",
            "id": "2d6f6a1b-000f-5000-8000-1a4e3f2b0c9d",
            "saved": False,
            "sbp_operation_id": "1027088AE4CB48CB81287833347A8777",
            "payer_bank_details": {"bank_id": "100000000111", "bic": "044525225"},
        },
        "confirmation": {
            "type": "qr",
            "confirmation_data": "https://qr.nspk.ru/AD100004BAL7227F9BNP6KNE007J9B3K",
        },
        "created_at": "2025-01-20T10:05:00.000Z",
        "test": True,
    },
    "waiting_for_capture": {
        "id": "2d6f5c4e-000f-5000-9000-1b68e7b15f3f",
        "status": "waiting_for_capture",
        "paid": True,
        "amount": {"value": "100.00", "currency": "RUB"},
        "expires_at": "2025-01-27T10:00:00.000Z",
        "created_at": "2025-01-20T10:00:00.000Z",
    },
    "not_found": {
        "type": "error",
        "id": "0d5a4b16-1f40-4d2c-9e1c-b4a4f5a1b7e2",
        "code": "not_found",
        "description": "Payment doesn't exist or access denied",
        "parameter": "payment_id",
    },
}


@pytest.fixture
def account_id() -> str:
    """Test shop ID."""
    return "100500"


@pytest.fixture
def secret_key() -> str:
    """Test secret key."""
    return "test_secret_key"


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return BASE_URL


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES


@pytest.fixture
def client(account_id: str, secret_key: str, httpx_mock: _HTTPXMock) -> YooKassaClient:
    """Create a sync test client wired to the mock transport."""
    client = YooKassaClient(
        account_id=account_id,
        secret_key=secret_key,
        transport=httpx_mock.transport,
    )
    yield client
    client.close()


@pytest.fixture
async def async_client(account_id: str, secret_key: str, httpx_mock: _HTTPXMock) -> AsyncYooKassaClient:
    """Create an async test client wired to the mock transport."""
    client = AsyncYooKassaClient(
        account_id=account_id,
        secret_key=secret_key,
        transport=httpx_mock.transport,
    )
    yield client
    await client.close()
