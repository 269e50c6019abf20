"""Outcome classification for a single host attempt."""

from enum import Enum


class Classification(str, Enum):
    """What the failover loop should do with one host's answer."""

    SUCCESS = "success"
    AUTH_ERROR = "auth_error"
    NOT_FOUND = "not_found"
    TRANSIENT = "transient"

    @property
    def is_definitive(self) -> bool:
        """True for outcomes that would be identical on every host."""
        return self in (Classification.AUTH_ERROR, Classification.NOT_FOUND)


def classify(
    status_code: int | None,
    transport_error: BaseException | None = None,
) -> Classification:
    """Classify a host attempt by transport failure and status code.

    Rules, in priority order:
    - no response obtained (transport failure) -> TRANSIENT
    - 2xx -> SUCCESS
    - 403 -> AUTH_ERROR
    - 404 -> NOT_FOUND
    - anything else -> TRANSIENT

    Args:
        status_code: HTTP status code, or None when no response was obtained
        transport_error: Exception raised by the transport, if any

    Returns:
        The classification for this attempt
    """
    if transport_error is not None or status_code is None:
        return Classification.TRANSIENT
    if 200 <= status_code < 300:
        return Classification.SUCCESS
    if status_code == 403:
        return Classification.AUTH_ERROR
    if status_code == 404:
        return Classification.NOT_FOUND
    # 429 and 5xx included: the next host may answer
    return Classification.TRANSIENT
