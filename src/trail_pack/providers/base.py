"""Shared plumbing for the HTTP collaborators.

Providers wrap the public APIs the trip planner depends on and translate
their responses into our own models:

### OpenStreetMap Nominatim (nominatim.openstreetmap.org)
- Endpoint: https://nominatim.openstreetmap.org/search
- Auth: User-Agent header required (no API key)
- Rate limit: 1 request/second, no bulk geocoding
- Key response fields: [].lat, [].lon, [].display_name (strings)

### Open-Meteo Archive (archive-api.open-meteo.com)
- Endpoint: https://archive-api.open-meteo.com/v1/archive
- Auth: None required for basic use
- Rate limit: 10,000 requests/day (non-commercial)
- Key response path: daily.time[], daily.temperature_2m_mean[],
  daily.precipitation_sum[], daily.snowfall_sum[]

Transport failures (timeouts, dropped connections) are retried with
exponential backoff. HTTP error statuses are not retried.
"""

from __future__ import annotations

from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

DEFAULT_USER_AGENT = "trail-pack/0.1.0"

# Failures worth another attempt
TRANSIENT_ERRORS = (httpx.TimeoutException, httpx.NetworkError)


class ProviderError(Exception):
    """A collaborator could not be reached or answered with an error."""

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.response_body = response_body


class RateLimitError(ProviderError):
    """The collaborator answered 429 Too Many Requests."""

    def __init__(self, provider: str, retry_after: int | None = None):
        super().__init__(f"{provider} is rate limiting requests", provider, status_code=429)
        self.retry_after = retry_after


class DataUnavailableError(ProviderError):
    """The collaborator answered but had nothing usable for the request."""


class HttpProvider:
    """Base class for JSON-over-HTTP collaborators.

    Subclasses set `name` and `base_url` and call `_fetch_json`. One
    `httpx.AsyncClient` is opened lazily and reused until `aclose`.

    Example:
        ```python
        class Elevation(HttpProvider):
            name = "elevation"
            base_url = "https://api.example.com/elevation"

            async def lookup(self, coordinates):
                return await self._fetch_json(self.base_url, params={"at": str(coordinates)})
        ```
    """

    name: str = "http"
    base_url: str = ""

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Set up the provider.

        Args:
            base_url: Endpoint to use instead of the public one
            user_agent: User-Agent sent with every request
            timeout: Request timeout in seconds
            transport: httpx transport to send requests through (tests use
                `httpx.MockTransport`)
        """
        if base_url:
            self.base_url = base_url
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> HttpProvider:
        self._client_or_new()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client, if one was opened."""
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    def _client_or_new(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            )
        return self._client

    def _check_status(self, response: httpx.Response) -> None:
        """Turn an error status into the matching ProviderError."""
        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After", "")
            raise RateLimitError(
                self.name, retry_after=int(retry_after) if retry_after.isdigit() else None
            )
        if response.is_error:
            raise ProviderError(
                f"{self.name} answered HTTP {response.status_code}",
                self.name,
                status_code=response.status_code,
                response_body=response.text,
            )

    @retry(
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def _get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        response = await self._client_or_new().get(url, params=params, headers=headers)
        self._check_status(response)
        return response

    async def _fetch_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET a URL and decode its JSON body.

        Raises:
            RateLimitError: On HTTP 429
            ProviderError: On any other error status, on a transport failure
                that outlived the retries, or on a body that is not JSON
        """
        try:
            response = await self._get(url, params=params, headers=headers)
        except TRANSIENT_ERRORS as e:
            raise ProviderError(f"{self.name} unreachable: {e}", self.name) from e

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                f"Failed to parse {self.name} response: {e}",
                self.name,
                response_body=response.text,
            ) from e
