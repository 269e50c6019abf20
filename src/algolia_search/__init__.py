"""Algolia Search - failover client library and CLI for the Algolia REST API."""

from algolia_search.client import AsyncIndex, AsyncSearchClient, Index, SearchClient
from algolia_search.client.config import AlgoliaConfig
from algolia_search.client.exceptions import (
    AlgoliaAuthError,
    AlgoliaConstructionError,
    AlgoliaError,
    AlgoliaNotFoundError,
    AlgoliaUnreachableError,
)

try:
    from importlib.metadata import version
    __version__ = version("algolia-search")
except Exception:
    __version__ = "0.1.0"  # Fallback for development

__all__ = [
    "AlgoliaAuthError",
    "AlgoliaConfig",
    "AlgoliaConstructionError",
    "AlgoliaError",
    "AlgoliaNotFoundError",
    "AlgoliaUnreachableError",
    "AsyncIndex",
    "AsyncSearchClient",
    "Index",
    "SearchClient",
    "__version__",
]
