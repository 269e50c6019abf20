"""Cluster-wide API operations.

This module provides the main client interface: listing and deleting
indexes, and handing out Index objects that share the client's hosts,
credentials and transport.
"""

from typing import Any

from .base import AsyncBaseClient, BaseClient, config_kwargs
from .config import AlgoliaConfig
from .index import AsyncIndex, Index
from .request import INDEXES_PATH, Method, index_path


class SearchClient(BaseClient):
    """Client for cluster-wide Algolia operations.

    Every call is tried against the hosts in a fixed, randomly shuffled
    order; 403/404 stop immediately, anything else moves on to the next
    host until one succeeds or all have failed.

    Usage:
        with SearchClient("APP_ID", "API_KEY", ["app-1.algolia.io", "app-2.algolia.io"]) as client:
            indexes = client.list_indexes()

        # Auto-configure from environment
        client = SearchClient.from_config()

        # Inject custom transport (for testing)
        client = SearchClient("APP_ID", "API_KEY", hosts, transport=mock_transport)
    """

    @classmethod
    def from_config(cls, config: AlgoliaConfig | None = None) -> "SearchClient":
        """Build a client from AlgoliaConfig (environment if None).

        Raises:
            ValueError: If credentials or hosts are missing
        """
        return cls(**config_kwargs(config))

    def list_indexes(self) -> dict[str, Any]:
        """List all indexes.

        Returns:
            Dictionary with 'items' list
        """
        return self._request(Method.GET, INDEXES_PATH)

    def delete_index(self, index_name: str) -> dict[str, Any]:
        """Delete an index.

        Args:
            index_name: Name of the index to delete

        Returns:
            Deletion task details
        """
        return self._request(Method.DELETE, index_path(index_name))

    def init_index(self, index_name: str) -> Index:
        """Index handle sharing this client's hosts, credentials and transport.

        The transport stays owned by the client; closing the index is a no-op.
        """
        return Index(
            self.credentials.application_id,
            self.credentials.api_key,
            self.hosts,
            index_name,
            transport=self._transport,
        )

    def __repr__(self) -> str:
        return f"SearchClient({self.credentials.application_id!r}, hosts={list(self.hosts.hosts)!r})"


class AsyncSearchClient(AsyncBaseClient):
    """Async counterpart of SearchClient.

    Usage:
        async with AsyncSearchClient("APP_ID", "API_KEY", hosts) as client:
            indexes = await client.list_indexes()
    """

    @classmethod
    def from_config(cls, config: AlgoliaConfig | None = None) -> "AsyncSearchClient":
        return cls(**config_kwargs(config))

    async def list_indexes(self) -> dict[str, Any]:
        return await self._request(Method.GET, INDEXES_PATH)

    async def delete_index(self, index_name: str) -> dict[str, Any]:
        return await self._request(Method.DELETE, index_path(index_name))

    def init_index(self, index_name: str) -> AsyncIndex:
        return AsyncIndex(
            self.credentials.application_id,
            self.credentials.api_key,
            self.hosts,
            index_name,
            transport=self._transport,
        )

    def __repr__(self) -> str:
        return f"AsyncSearchClient({self.credentials.application_id!r}, hosts={list(self.hosts.hosts)!r})"
