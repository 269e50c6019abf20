"""Custom exceptions for the Algolia search client."""

from .classifier import Classification, classify

AUTH_ERROR_MESSAGE = "Invalid application ID or API Key"
NOT_FOUND_MESSAGE = "Resource does not exist."
UNREACHABLE_MESSAGE = "Hosts unreachable."


class AlgoliaError(Exception):
    """Base exception for all Algolia client errors."""

    def __init__(self, message: str, host: str | None = None):
        self.message = message
        self.host = host
        super().__init__(message)

    def __str__(self) -> str:
        if self.host:
            return f"{self.message} (host: {self.host})"
        return self.message


class AlgoliaConstructionError(AlgoliaError, ValueError):
    """Invalid constructor argument (empty credentials, hosts or index name)."""

    def __init__(self, argument: str, message: str):
        super().__init__(message)
        self.argument = argument

    def __str__(self) -> str:
        return f"{self.argument}: {self.message}"


class AlgoliaConnectionError(AlgoliaError):
    """A single host could not be reached (timeout, refused, DNS)."""
    pass


class AlgoliaAuthError(AlgoliaError):
    """Credentials rejected by a reachable host (403)."""

    status_code = 403


class AlgoliaNotFoundError(AlgoliaError):
    """Addressed resource absent on a reachable host (404)."""

    status_code = 404


class AlgoliaAPIError(AlgoliaError):
    """Any other non-2xx answer from a single host."""

    def __init__(self, message: str, status_code: int, host: str | None = None):
        super().__init__(message, host)
        self.status_code = status_code

    def __str__(self) -> str:
        base = f"HTTP {self.status_code}: {self.message}"
        if self.host:
            return f"{base} (host: {self.host})"
        return base


class AlgoliaUnreachableError(AlgoliaError):
    """Every host in the pool was tried and none could service the request."""

    def __init__(self, message: str = UNREACHABLE_MESSAGE, hosts_tried: tuple[str, ...] = ()):
        super().__init__(message)
        self.hosts_tried = hosts_tried

    def __str__(self) -> str:
        if self.hosts_tried:
            return f"{self.message} (tried: {', '.join(self.hosts_tried)})"
        return self.message


def raise_for_status(status_code: int, message: str | None = None, host: str | None = None) -> None:
    """Raise appropriate exception based on HTTP status code.

    403 and 404 are definitive and raise the matching terminal error with the
    fixed client message. Any other non-2xx status raises AlgoliaAPIError,
    which the failover loop treats as transient.
    """
    classification = classify(status_code)
    if classification is Classification.SUCCESS:
        return
    if classification is Classification.AUTH_ERROR:
        raise AlgoliaAuthError(AUTH_ERROR_MESSAGE, host)
    elif classification is Classification.NOT_FOUND:
        raise AlgoliaNotFoundError(NOT_FOUND_MESSAGE, host)
    else:
        raise AlgoliaAPIError(message or f"HTTP {status_code}", status_code, host)
