"""
1Shot Python SDK client.

Example usage:
    ```python
    from oneshot_sdk import OneShotClient

    async with OneShotClient(
        api_key="your-api-key",
        api_secret="your-api-secret",
    ) as client:
        wallets = await client.wallets.list(business_id, chain_id=8453)

        event = await client.contract_events.get(contract_event_id)
        logs = await client.contract_events.search_logs(event.id)
    ```
"""
from __future__ import annotations

import asyncio
import logging
import math
import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Optional

import httpx

from .models.errors import (
    APIError,
    AuthenticationError,
    ConnectionError,
    FieldError,
    RateLimitError,
    ResponseValidationError,
    TimeoutError,
)
from .resources.contract_events import ContractEventsResource
from .resources.wallets import WalletsResource

logger = logging.getLogger(__name__)

USER_AGENT = "oneshot-sdk-python/0.1.0"


class OneShotClient:
    """
    1Shot API client.

    Provides access to all API resources:
    - wallets: Escrow wallets, delegations and transfer signatures
    - contract_events: Contract event definitions and log search

    It also implements the transport capability the resources depend on:
    ``await client.request(method, path, body=None)``.

    Args:
        api_key: Your API key (OAuth client ID)
        api_secret: Your API secret (OAuth client secret)
        base_url: 1Shot API base URL
        timeout: Request timeout in seconds (default: 30)
        max_retries: Maximum attempts for rate-limited or unreachable
            requests (default: 3)
    """

    DEFAULT_BASE_URL = "https://api.1shotapi.com/v0"
    DEFAULT_TIMEOUT = 30
    DEFAULT_MAX_RETRIES = 3
    # Refresh the access token this many seconds before it expires.
    TOKEN_EXPIRY_MARGIN = 60

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        if not api_key:
            raise ValueError("API key is required")
        if not api_secret:
            raise ValueError("API secret is required")
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")

        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._api_secret = api_secret
        self._timeout = timeout
        self._max_retries = max_retries
        self._client: Optional[httpx.AsyncClient] = None
        self._access_token: Optional[str] = None
        self._token_expires_at: Optional[float] = None

        # Initialize resources
        self.wallets = WalletsResource(self)
        self.contract_events = ContractEventsResource(self)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "Accept": "application/json",
                    "User-Agent": USER_AGENT,
                },
                timeout=self._timeout,
            )
        return self._client

    # ==================== Authentication ====================

    def _token_is_valid(self) -> bool:
        if self._access_token is None:
            return False
        if self._token_expires_at is None:
            return True
        return time.monotonic() < self._token_expires_at - self.TOKEN_EXPIRY_MARGIN

    async def _get_access_token(self) -> str:
        """Return a bearer token, exchanging the client credentials if needed."""
        if self._token_is_valid():
            return self._access_token  # type: ignore[return-value]

        client = await self._get_client()
        try:
            response = await client.post(
                "/token",
                data={
                    "grant_type": "client_credentials",
                    "client_id": self._api_key,
                    "client_secret": self._api_secret,
                },
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Token request timed out: {e}") from e
        except httpx.RequestError as e:
            raise ConnectionError(f"Token request failed: {e}") from e

        if response.status_code >= 400:
            raise AuthenticationError(
                "Could not obtain an access token",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise AuthenticationError("Token response was not valid JSON") from e
        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            raise AuthenticationError("Token response did not include an access token")

        self._access_token = token
        expires_in = payload.get("expires_in")
        self._token_expires_at = (
            time.monotonic() + float(expires_in) if expires_in is not None else None
        )
        logger.debug("Obtained access token (expires_in=%s)", expires_in)
        return token

    # ==================== Transport ====================

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make an authenticated API request.

        Args:
            method: ``GET``, ``POST``, ``PUT`` or ``DELETE``
            path: Path relative to the base URL, optionally with a query string
            body: JSON body

        Returns:
            The decoded JSON response (``{}`` for an empty body)

        Raises:
            AuthenticationError: 401/403
            NotFoundError: 404
            RateLimitError: 429 after exhausting retries
            APIError: any other error status
            TimeoutError: the request timed out
            ConnectionError: the gateway could not be reached, or the
                connection failed after the request was sent
            ResponseValidationError: a success response whose body is not JSON
        """
        client = await self._get_client()

        for attempt in range(self._max_retries):
            token = await self._get_access_token()
            last_attempt = attempt == self._max_retries - 1

            try:
                response = await client.request(
                    method=method,
                    url=path,
                    json=body,
                    headers={"Authorization": f"Bearer {token}"},
                )
            except (httpx.ConnectError, httpx.PoolTimeout) as e:
                # Never left the client, so resending cannot duplicate it.
                if not last_attempt:
                    delay = 2 ** attempt
                    logger.warning(
                        "%s %s failed (%s), retrying in %ss", method, path, e, delay
                    )
                    await asyncio.sleep(delay)
                    continue
                raise ConnectionError(f"{method} {path} failed: {e}") from e
            except httpx.TimeoutException as e:
                # The gateway may have acted on the request; never resend it.
                raise TimeoutError(f"{method} {path} timed out") from e
            except httpx.RequestError as e:
                raise ConnectionError(f"{method} {path} failed: {e}") from e

            logger.debug("%s %s -> %s", method, path, response.status_code)

            # Handle rate limiting
            if response.status_code == 429:
                retry_after = _retry_after(response.headers.get("Retry-After"), attempt)
                if not last_attempt:
                    logger.warning(
                        "Rate limited on %s %s, retrying in %ss", method, path, retry_after
                    )
                    await asyncio.sleep(retry_after)
                    continue
                raise RateLimitError(retry_after=retry_after)

            if response.status_code == 401:
                # Drop the token so the next call re-authenticates.
                self._access_token = None

            if response.status_code >= 400:
                raise APIError.from_response(
                    response.status_code,
                    _json_or_text(response),
                    request_id=response.headers.get("X-Request-Id"),
                )

            if not response.content:
                return {}
            try:
                return response.json()
            except ValueError as e:
                raise ResponseValidationError(
                    f"Gateway returned a non-JSON body for {method} {path}",
                    [FieldError("", "Response body is not valid JSON")],
                ) from e

        raise RuntimeError("Unexpected error in request retry loop")

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "OneShotClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()


def _retry_after(header: Optional[str], attempt: int) -> float:
    """Seconds to wait before retrying a 429.

    ``Retry-After`` may be delay-seconds or an HTTP-date; anything unparseable
    falls back to exponential backoff.
    """
    if header:
        try:
            seconds = float(header)
        except ValueError:
            seconds = None
        if seconds is not None:
            return max(0.0, seconds) if math.isfinite(seconds) else float(2 ** attempt)
        try:
            when = parsedate_to_datetime(header)
        except (TypeError, ValueError):
            when = None
        if when is not None:
            if when.tzinfo is None:
                when = when.replace(tzinfo=timezone.utc)
            return max(0.0, (when - datetime.now(timezone.utc)).total_seconds())
    return float(2 ** attempt)


def _json_or_text(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {"message": response.text}
