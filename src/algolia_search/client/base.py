"""Shared construction and request plumbing for clients and indexes."""

import json
import random
from collections.abc import Iterable
from typing import Any

from .config import AlgoliaConfig
from .credentials import Credentials
from .exceptions import AlgoliaError
from .executor import AsyncFailoverExecutor, FailoverExecutor
from .hosts import HostPool
from .http import DEFAULT_TIMEOUT, AsyncHTTPTransport, HTTPTransport
from .request import RequestDescriptor
from .transport import AlgoliaTransport, AsyncAlgoliaTransport


def _pool(hosts: Iterable[str] | HostPool | None, rng: random.Random | None) -> HostPool:
    if isinstance(hosts, HostPool):
        return hosts
    return HostPool(hosts, rng)


def _decode(body: bytes) -> dict[str, Any]:
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except ValueError as e:
        raise AlgoliaError(f"Response is not valid JSON: {e}") from e


def encode_record(record: dict[str, Any]) -> bytes:
    """JSON-encode a record for a request body."""
    return json.dumps(record).encode("utf-8")


def config_kwargs(config: AlgoliaConfig | None) -> dict[str, Any]:
    """Constructor arguments taken from configuration (environment if None)."""
    config = config or AlgoliaConfig()
    config.validate_config()
    return {
        "application_id": config.application_id,
        "api_key": config.api_key,
        "hosts": config.hosts,
        "timeout": config.timeout,
    }


class BaseClient:
    """Holds credentials, host pool, transport and the failover executor.

    A transport created here is owned and closed by close(); one passed in
    by the caller is shared and left open.
    """

    def __init__(
        self,
        application_id: str,
        api_key: str,
        hosts: Iterable[str] | HostPool,
        *,
        transport: AlgoliaTransport | None = None,
        rng: random.Random | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.credentials = Credentials(application_id, api_key)
        self.hosts = _pool(hosts, rng)
        self._owns_transport = transport is None
        self._transport = transport or HTTPTransport(timeout=timeout)
        self._executor = FailoverExecutor(self.hosts, self.credentials, self._transport)

    @property
    def transport(self) -> AlgoliaTransport:
        return self._transport

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False

    def close(self) -> None:
        """Release the transport if this object created it."""
        if self._owns_transport:
            self._transport.close()

    def _request(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        request = RequestDescriptor(method, path, body=body, params=params)
        return _decode(self._executor.execute(request))


class AsyncBaseClient:
    """Async counterpart of BaseClient."""

    def __init__(
        self,
        application_id: str,
        api_key: str,
        hosts: Iterable[str] | HostPool,
        *,
        transport: AsyncAlgoliaTransport | None = None,
        rng: random.Random | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.credentials = Credentials(application_id, api_key)
        self.hosts = _pool(hosts, rng)
        self._owns_transport = transport is None
        self._transport = transport or AsyncHTTPTransport(timeout=timeout)
        self._executor = AsyncFailoverExecutor(self.hosts, self.credentials, self._transport)

    @property
    def transport(self) -> AsyncAlgoliaTransport:
        return self._transport

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False

    async def aclose(self) -> None:
        """Release the transport if this object created it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        request = RequestDescriptor(method, path, body=body, params=params)
        return _decode(await self._executor.execute(request))
