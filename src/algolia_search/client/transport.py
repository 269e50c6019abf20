"""Transport protocol for Algolia API communication.

This module defines the interface the failover executor talks to. A transport
performs exactly one HTTP exchange against one fully-qualified URL; it knows
nothing about host pools, retries or status classification.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body of one HTTP exchange."""

    status_code: int
    body: bytes = b""


@runtime_checkable
class AlgoliaTransport(Protocol):
    """Protocol defining the synchronous transport interface.

    Transports are responsible for:
    - Sending one request to one URL with the given auth
    - Returning the status code and body as-is, for every status
    - Raising AlgoliaConnectionError when no response was obtained
    """

    def send(
        self,
        method: str,
        url: str,
        content: bytes | None = None,
        auth: httpx.Auth | None = None,
    ) -> TransportResponse:
        """Execute one HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            url: Absolute URL including scheme, host, path and query
            content: Encoded body, or None
            auth: Identity auth to attach

        Returns:
            The response status code and body

        Raises:
            AlgoliaConnectionError: On timeout, refused connection, DNS failure
        """
        ...

    def close(self) -> None:
        """Clean up resources (connection pools, clients, etc.).

        Safe to call multiple times.
        """
        ...


@runtime_checkable
class AsyncAlgoliaTransport(Protocol):
    """Protocol defining the asynchronous transport interface."""

    async def send(
        self,
        method: str,
        url: str,
        content: bytes | None = None,
        auth: httpx.Auth | None = None,
    ) -> TransportResponse:
        """Execute one HTTP request. Same contract as AlgoliaTransport.send."""
        ...

    async def aclose(self) -> None:
        """Clean up resources. Safe to call multiple times."""
        ...
