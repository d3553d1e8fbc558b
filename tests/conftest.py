"""
Pytest configuration and fixtures for 1Shot SDK tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from oneshot_sdk import OneShotClient
from oneshot_sdk.resources import ContractEventsResource, WalletsResource

from .helpers import BASE_URL, MOCK_RESPONSES, RecordingTransport


# ==================== Recording transport ====================


@pytest.fixture
def transport() -> RecordingTransport:
    """A fresh recording transport."""
    return RecordingTransport()


@pytest.fixture
def wallets(transport: RecordingTransport) -> WalletsResource:
    return WalletsResource(transport)


@pytest.fixture
def contract_events(transport: RecordingTransport) -> ContractEventsResource:
    return ContractEventsResource(transport)


# ==================== httpx mock ====================


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None


class _LocalHTTPXMock:
    """Minimal pytest-httpx-compatible mock."""

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[Dict[str, Any]] = []

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

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content or b"",
            request=request,
        )
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, response=response)
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

    def add_token(self, expires_in: Optional[int] = 3600) -> None:
        """Queue a successful client-credentials token exchange."""
        payload: Dict[str, Any] = {"access_token": "test-token", "token_type": "Bearer"}
        if expires_in is not None:
            payload["expires_in"] = expires_in
        self.add_response(url=f"{BASE_URL}/token", method="POST", json=payload)

    def requests_to(self, path: str) -> list[Dict[str, Any]]:
        return [r for r in self.requests if urlsplit(r["url"]).path.endswith(path)]

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def httpx_mock(monkeypatch):
    """`httpx_mock` fixture that intercepts ``httpx.AsyncClient.request``."""
    mock = _LocalHTTPXMock()

    async def _async_request(self, method, url, **kwargs):
        full_url = str(self._merge_url(url))
        mock.requests.append({"method": method.upper(), "url": full_url, **kwargs})
        match = mock._pop_match(method, full_url)
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response

    monkeypatch.setattr(httpx.AsyncClient, "request", _async_request)
    return mock


@pytest.fixture
def no_sleep(monkeypatch):
    """Make retry back-off instantaneous and record the requested delays."""
    delays: list[float] = []

    async def _sleep(delay):
        delays.append(delay)

    monkeypatch.setattr("oneshot_sdk.client.asyncio.sleep", _sleep)
    return delays


# ==================== Canned gateway payloads ====================


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data (deep-copied per test)."""
    return json.loads(json.dumps(MOCK_RESPONSES))


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def api_secret() -> str:
    return "test-api-secret"


@pytest.fixture
async def client(api_key: str, api_secret: str) -> OneShotClient:
    """Create a test client."""
    client = OneShotClient(api_key=api_key, api_secret=api_secret, base_url=BASE_URL)
    yield client
    await client.close()
