"""Request descriptors and path helpers."""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

API_VERSION_PREFIX = "/1"
INDEXES_PATH = f"{API_VERSION_PREFIX}/indexes/"


class Method(str, Enum):
    """HTTP verbs understood by the failover executor."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def carries_body(self) -> bool:
        return self in (Method.POST, Method.PUT)


def encode_segment(value: str) -> str:
    """Percent-encode a caller-supplied path segment or query value."""
    return quote(value, safe="")


def index_path(index_name: str, object_id: str | None = None) -> str:
    """Build /1/indexes/{index}[/{objectId}] with both parts encoded."""
    path = INDEXES_PATH + encode_segment(index_name)
    if object_id is not None:
        path += "/" + encode_segment(object_id)
    return path


@dataclass(frozen=True)
class RequestDescriptor:
    """One logical API call: verb, path, optional body and query.

    Attributes:
        method: HTTP method (strings are normalized to Method)
        path: URL path, path segments already percent-encoded
        body: Encoded request payload (sent for POST/PUT only)
        params: Query parameters (values are encoded when building target)
    """

    method: Method
    path: str
    body: bytes | None = None
    params: dict[str, str] | None = None

    def __post_init__(self):
        try:
            method = Method(self.method.upper() if isinstance(self.method, str) else self.method)
        except ValueError:
            raise ValueError(
                f"Unsupported method: {self.method!r}. "
                f"Must be one of {[m.value for m in Method]}"
            ) from None
        object.__setattr__(self, "method", method)

        if not self.path.startswith("/"):
            raise ValueError(f"Path must start with '/': {self.path!r}")

    @property
    def target(self) -> str:
        """Path plus encoded query string."""
        if not self.params:
            return self.path
        query = "&".join(
            f"{encode_segment(key)}={encode_segment(value)}"
            for key, value in self.params.items()
        )
        return f"{self.path}?{query}"

    @property
    def content(self) -> bytes | None:
        """Body to send; GET and DELETE never carry one."""
        if self.method.carries_body:
            return self.body
        return None
