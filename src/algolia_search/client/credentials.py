"""Application credentials and the identity auth attached to each request."""

from dataclasses import dataclass, field

import httpx
from httpx_auth import HeaderApiKey

from .exceptions import AlgoliaConstructionError

APPLICATION_ID_HEADER = "X-Algolia-Application-Id"
API_KEY_HEADER = "X-Algolia-API-Key"


def require_text(argument: str, value: str | None, message: str) -> str:
    """Return value unchanged, or raise if it is None, empty or whitespace."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise AlgoliaConstructionError(argument, message)
    return value


@dataclass(frozen=True)
class Credentials:
    """Application ID and API key, validated once.

    The API key is kept out of repr().
    """

    application_id: str
    api_key: str = field(repr=False)

    def __post_init__(self):
        require_text("application_id", self.application_id, "An application ID is required.")
        require_text("api_key", self.api_key, "An API key is required.")

    @property
    def auth(self) -> httpx.Auth:
        """httpx auth that sets both identity headers on a request."""
        return HeaderApiKey(self.application_id, header_name=APPLICATION_ID_HEADER) + HeaderApiKey(
            self.api_key, header_name=API_KEY_HEADER
        )
