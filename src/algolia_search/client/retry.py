"""Failover retry policy shared by the sync and async executors.

Retrying here means "advance to the next host": there is no backoff and no
retry budget beyond the size of the host pool.
"""

import logging

from tenacity import (
    AsyncRetrying,
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_none,
)

from .classifier import Classification, classify
from .exceptions import AlgoliaAPIError, AlgoliaConnectionError

logger = logging.getLogger("algolia-search")


def is_transient(exception: BaseException) -> bool:
    """Check if a host attempt failure should advance to the next host.

    Transient conditions:
    - AlgoliaConnectionError (no response from this host)
    - AlgoliaAPIError (non-2xx status other than 403/404)

    Args:
        exception: The exception to check

    Returns:
        True if the next host should be tried
    """
    if isinstance(exception, AlgoliaConnectionError):
        return classify(None, exception) is Classification.TRANSIENT
    if isinstance(exception, AlgoliaAPIError):
        return classify(exception.status_code) is Classification.TRANSIENT
    return False


def _failover_config(attempts: int) -> dict:
    return {
        "stop": stop_after_attempt(attempts),
        "wait": wait_none(),
        "retry": retry_if_exception(is_transient),
        "before_sleep": before_sleep_log(logger, logging.WARNING),
        "reraise": False,
    }


def failover_retrying(attempts: int) -> Retrying:
    """Create a Retrying controller that allows one attempt per host.

    Exhaustion raises tenacity.RetryError; a non-transient failure is
    re-raised unchanged on the attempt that produced it.

    Example:
        body = failover_retrying(len(pool))(attempt_one_host, request)
    """
    return Retrying(**_failover_config(attempts))


def async_failover_retrying(attempts: int) -> AsyncRetrying:
    """Async counterpart of failover_retrying (call with a coroutine function)."""
    return AsyncRetrying(**_failover_config(attempts))
