"""Algolia search API client.

This package provides the client library for the Algolia REST API. Every
call is sent to a pool of interchangeable hosts, shuffled once per client:

- 2xx: the response is returned
- 403 / 404: AlgoliaAuthError / AlgoliaNotFoundError, no other host is tried
- anything else (timeouts, refused connections, 5xx, 429): next host
- pool exhausted: AlgoliaUnreachableError

Usage:
    from algolia_search.client import SearchClient

    client = SearchClient("APP_ID", "API_KEY", ["app-1.algolia.io", "app-2.algolia.io"])
    index = client.init_index("movies")
    index.add_object({"title": "Alien"}, object_id="x1")
    results = index.search("alien")
    client.close()

    # Async
    async with AsyncSearchClient("APP_ID", "API_KEY", hosts) as client:
        await client.list_indexes()
"""

from .api import AsyncSearchClient, SearchClient
from .classifier import Classification, classify
from .config import AlgoliaConfig
from .credentials import Credentials
from .exceptions import (
    AlgoliaAPIError,
    AlgoliaAuthError,
    AlgoliaConnectionError,
    AlgoliaConstructionError,
    AlgoliaError,
    AlgoliaNotFoundError,
    AlgoliaUnreachableError,
)
from .executor import AsyncFailoverExecutor, FailoverExecutor
from .hosts import HostPool
from .http import AsyncHTTPTransport, HTTPTransport
from .index import AsyncIndex, Index
from .request import Method, RequestDescriptor
from .transport import AlgoliaTransport, AsyncAlgoliaTransport, TransportResponse

__all__ = [
    # Main API
    "SearchClient",
    "AsyncSearchClient",
    "Index",
    "AsyncIndex",
    "AlgoliaConfig",
    # Failover core
    "HostPool",
    "Credentials",
    "Method",
    "RequestDescriptor",
    "FailoverExecutor",
    "AsyncFailoverExecutor",
    "Classification",
    "classify",
    # Transport protocol and implementations
    "AlgoliaTransport",
    "AsyncAlgoliaTransport",
    "TransportResponse",
    "HTTPTransport",
    "AsyncHTTPTransport",
    # Exceptions
    "AlgoliaAPIError",
    "AlgoliaAuthError",
    "AlgoliaConnectionError",
    "AlgoliaConstructionError",
    "AlgoliaError",
    "AlgoliaNotFoundError",
    "AlgoliaUnreachableError",
]
