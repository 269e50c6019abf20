"""Multi-host failover request executor.

Walks the host pool in its frozen order, one host at a time, until a host
answers with success or with a definitive error (403/404). Transport failures
and other statuses advance to the next host; when the pool is exhausted the
call fails with AlgoliaUnreachableError.
"""

import json
import logging
from collections.abc import Iterator

from tenacity import RetryError

from .credentials import Credentials
from .exceptions import AlgoliaUnreachableError, raise_for_status
from .hosts import HostPool
from .request import RequestDescriptor
from .retry import async_failover_retrying, failover_retrying
from .transport import AlgoliaTransport, AsyncAlgoliaTransport, TransportResponse

logger = logging.getLogger("algolia-search")


def _error_message(body: bytes) -> str | None:
    """Extract the API's error message from a response body, if any."""
    try:
        data = json.loads(body)
    except (ValueError, TypeError):
        text = body.decode("utf-8", errors="replace").strip()
        return text or None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None


class _BaseExecutor:
    def __init__(self, hosts: HostPool, credentials: Credentials, scheme: str = "https"):
        self.hosts = hosts
        self.credentials = credentials
        self.scheme = scheme

    def url_for(self, host: str, request: RequestDescriptor) -> str:
        return f"{self.scheme}://{host}{request.target}"

    def _next_host(self, hosts: Iterator[str], tried: list[str], request: RequestDescriptor) -> str:
        host = next(hosts)
        tried.append(host)
        logger.debug(
            f"{request.method.value} {request.target} -> {host} "
            f"(attempt {len(tried)}/{len(self.hosts)})"
        )
        return host

    def _check(self, host: str, response: TransportResponse) -> bytes:
        raise_for_status(response.status_code, _error_message(response.body), host)
        return response.body

    def _unreachable(self, tried: list[str], error: RetryError) -> AlgoliaUnreachableError:
        last = error.last_attempt.exception()
        logger.warning(f"All {len(tried)} hosts failed, last error: {last}")
        return AlgoliaUnreachableError(hosts_tried=tuple(tried))


class FailoverExecutor(_BaseExecutor):
    """Synchronous failover executor.

    Usage:
        executor = FailoverExecutor(pool, credentials, HTTPTransport())
        body = executor.execute(RequestDescriptor("GET", "/1/indexes/"))
    """

    def __init__(
        self,
        hosts: HostPool,
        credentials: Credentials,
        transport: AlgoliaTransport,
        scheme: str = "https",
    ):
        super().__init__(hosts, credentials, scheme)
        self.transport = transport

    def execute(self, request: RequestDescriptor) -> bytes:
        """Run one logical call against the pool.

        Args:
            request: The call to perform

        Returns:
            Raw body of the first successful response

        Raises:
            AlgoliaAuthError: A host answered 403
            AlgoliaNotFoundError: A host answered 404
            AlgoliaUnreachableError: Every host failed transiently
        """
        hosts = iter(self.hosts)
        tried: list[str] = []
        try:
            return failover_retrying(len(self.hosts))(self._attempt, hosts, tried, request)
        except RetryError as e:
            raise self._unreachable(tried, e) from e.last_attempt.exception()

    def _attempt(self, hosts: Iterator[str], tried: list[str], request: RequestDescriptor) -> bytes:
        host = self._next_host(hosts, tried, request)
        response = self.transport.send(
            request.method.value,
            self.url_for(host, request),
            content=request.content,
            auth=self.credentials.auth,
        )
        return self._check(host, response)


class AsyncFailoverExecutor(_BaseExecutor):
    """Asynchronous failover executor.

    Each host is awaited to completion before the next is tried.
    """

    def __init__(
        self,
        hosts: HostPool,
        credentials: Credentials,
        transport: AsyncAlgoliaTransport,
        scheme: str = "https",
    ):
        super().__init__(hosts, credentials, scheme)
        self.transport = transport

    async def execute(self, request: RequestDescriptor) -> bytes:
        """Run one logical call against the pool. See FailoverExecutor.execute."""
        hosts = iter(self.hosts)
        tried: list[str] = []
        try:
            return await async_failover_retrying(len(self.hosts))(self._attempt, hosts, tried, request)
        except RetryError as e:
            raise self._unreachable(tried, e) from e.last_attempt.exception()

    async def _attempt(self, hosts: Iterator[str], tried: list[str], request: RequestDescriptor) -> bytes:
        host = self._next_host(hosts, tried, request)
        response = await self.transport.send(
            request.method.value,
            self.url_for(host, request),
            content=request.content,
            auth=self.credentials.auth,
        )
        return self._check(host, response)
