"""httpx-backed transports.

This module implements the HTTP transports used by the failover executor.
Each call is a single exchange against one host; transport-level failures
and unreadable responses are wrapped in AlgoliaConnectionError so the
executor can move on to the next host.
"""

import httpx

from .exceptions import AlgoliaConnectionError
from .transport import TransportResponse

DEFAULT_TIMEOUT = 30.0
DEFAULT_HEADERS = {"Accept": "application/json"}
JSON_CONTENT_TYPE = {"Content-Type": "application/json"}


def _request_headers(content: bytes | None) -> dict[str, str]:
    if content is None:
        return {}
    return dict(JSON_CONTENT_TYPE)


def _connection_error(url: str, exc: httpx.RequestError) -> AlgoliaConnectionError:
    host = httpx.URL(url).host or None
    if isinstance(exc, httpx.TimeoutException):
        return AlgoliaConnectionError(f"Request timeout to {url}: {exc}", host)
    if isinstance(exc, httpx.TransportError):
        return AlgoliaConnectionError(f"Cannot connect to {url}: {exc}", host)
    return AlgoliaConnectionError(f"Unreadable response from {url}: {exc}", host)


class HTTPTransport:
    """Synchronous transport over httpx.Client.

    The underlying client is created here, once, and released by close().
    A client passed in by the caller is used as-is and left open.

    Usage:
        transport = HTTPTransport(timeout=10.0)
        response = transport.send("GET", "https://host/1/indexes/", auth=auth)
        transport.close()

    Or as context manager:
        with HTTPTransport() as transport:
            ...
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: httpx.Client | None = None):
        """Initialize HTTP transport.

        Args:
            timeout: Per-request timeout in seconds (bounds one host attempt)
            client: Optional pre-configured httpx client (for testing/advanced use)
        """
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, headers=DEFAULT_HEADERS)

    @property
    def client(self) -> httpx.Client:
        return self._client

    def __enter__(self) -> "HTTPTransport":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close client."""
        self.close()

    def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()

    def send(
        self,
        method: str,
        url: str,
        content: bytes | None = None,
        auth: httpx.Auth | None = None,
    ) -> TransportResponse:
        """Execute one request and return its status and body.

        Raises:
            AlgoliaConnectionError: If no response was obtained
        """
        try:
            response = self._client.request(
                method,
                url,
                content=content,
                headers={**DEFAULT_HEADERS, **_request_headers(content)},
                auth=auth,
            )
        except httpx.RequestError as e:
            raise _connection_error(url, e) from e
        return TransportResponse(response.status_code, response.content)


class AsyncHTTPTransport:
    """Asynchronous transport over httpx.AsyncClient.

    Same ownership rules as HTTPTransport; release with aclose().
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: httpx.AsyncClient | None = None):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, headers=DEFAULT_HEADERS)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close HTTP client and release resources."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def send(
        self,
        method: str,
        url: str,
        content: bytes | None = None,
        auth: httpx.Auth | None = None,
    ) -> TransportResponse:
        """Execute one request and return its status and body.

        Raises:
            AlgoliaConnectionError: If no response was obtained
        """
        try:
            response = await self._client.request(
                method,
                url,
                content=content,
                headers={**DEFAULT_HEADERS, **_request_headers(content)},
                auth=auth,
            )
        except httpx.RequestError as e:
            raise _connection_error(url, e) from e
        return TransportResponse(response.status_code, response.content)
