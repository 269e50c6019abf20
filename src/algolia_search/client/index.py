"""Record operations scoped to a single index."""

import random
from collections.abc import Iterable
from typing import Any

from .base import AsyncBaseClient, BaseClient, config_kwargs, encode_record
from .config import AlgoliaConfig
from .credentials import require_text
from .hosts import HostPool
from .http import DEFAULT_TIMEOUT
from .request import Method, index_path
from .transport import AlgoliaTransport, AsyncAlgoliaTransport


def _has_object_id(object_id: str | None) -> bool:
    return object_id is not None and bool(object_id.strip())


class Index(BaseClient):
    """Operations on the records of one index.

    Usage:
        index = Index("APP_ID", "API_KEY", hosts, "movies")
        index.add_object({"title": "Alien"}, object_id="x1")
        results = index.search("alien")

        # Share a client's hosts and transport
        index = client.init_index("movies")
    """

    def __init__(
        self,
        application_id: str,
        api_key: str,
        hosts: Iterable[str] | HostPool,
        index_name: str,
        *,
        transport: AlgoliaTransport | None = None,
        rng: random.Random | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize an index handle.

        Args:
            application_id: Algolia application ID
            api_key: API key
            hosts: Candidate hosts (shuffled once) or an existing HostPool
            index_name: Name of the index
            transport: Optional transport; left open by close() when given
            rng: Random source for the host shuffle
            timeout: Per-host request timeout when the transport is created here

        Raises:
            AlgoliaConstructionError: If any argument is empty
        """
        require_text("index_name", index_name, "An index name is required.")
        super().__init__(
            application_id, api_key, hosts, transport=transport, rng=rng, timeout=timeout
        )
        self.index_name = index_name
        self._path = index_path(index_name)

    @classmethod
    def from_config(cls, index_name: str, config: AlgoliaConfig | None = None) -> "Index":
        """Build an index handle from AlgoliaConfig (environment if None)."""
        return cls(index_name=index_name, **config_kwargs(config))

    def add_object(self, record: dict[str, Any], object_id: str | None = None) -> dict[str, Any]:
        """Add a record to the index.

        Without an object ID the server generates one (POST); with one the
        record is stored under that ID (PUT).

        Args:
            record: Record attributes
            object_id: Optional caller-supplied object ID

        Returns:
            Server acknowledgement (objectID, taskID, ...)
        """
        body = encode_record(record)
        if _has_object_id(object_id):
            return self._request(Method.PUT, index_path(self.index_name, object_id), body)
        return self._request(Method.POST, self._path, body)

    def search(self, query: str) -> dict[str, Any]:
        """Full-text search in the index.

        Args:
            query: Query text

        Returns:
            Search response with hits
        """
        return self._request(Method.GET, self._path, params={"query": query})

    def get_object(self, object_id: str, attributes_to_retrieve: list[str] | None = None) -> dict[str, Any]:
        """Fetch a single record. Not supported yet."""
        raise NotImplementedError("get_object is not supported yet")

    def __repr__(self) -> str:
        return f"Index({self.index_name!r}, hosts={list(self.hosts.hosts)!r})"


class AsyncIndex(AsyncBaseClient):
    """Async counterpart of Index."""

    def __init__(
        self,
        application_id: str,
        api_key: str,
        hosts: Iterable[str] | HostPool,
        index_name: str,
        *,
        transport: AsyncAlgoliaTransport | None = None,
        rng: random.Random | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        require_text("index_name", index_name, "An index name is required.")
        super().__init__(
            application_id, api_key, hosts, transport=transport, rng=rng, timeout=timeout
        )
        self.index_name = index_name
        self._path = index_path(index_name)

    @classmethod
    def from_config(cls, index_name: str, config: AlgoliaConfig | None = None) -> "AsyncIndex":
        return cls(index_name=index_name, **config_kwargs(config))

    async def add_object(self, record: dict[str, Any], object_id: str | None = None) -> dict[str, Any]:
        body = encode_record(record)
        if _has_object_id(object_id):
            return await self._request(Method.PUT, index_path(self.index_name, object_id), body)
        return await self._request(Method.POST, self._path, body)

    async def search(self, query: str) -> dict[str, Any]:
        return await self._request(Method.GET, self._path, params={"query": query})

    async def get_object(
        self, object_id: str, attributes_to_retrieve: list[str] | None = None
    ) -> dict[str, Any]:
        raise NotImplementedError("get_object is not supported yet")

    def __repr__(self) -> str:
        return f"AsyncIndex({self.index_name!r}, hosts={list(self.hosts.hosts)!r})"
