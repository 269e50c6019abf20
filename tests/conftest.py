"""Pytest configuration and fixtures."""

import random
from typing import NamedTuple
from unittest.mock import MagicMock

import httpx
import pytest

from algolia_search.client.config import AlgoliaConfig
from algolia_search.client.transport import TransportResponse


class SentRequest(NamedTuple):
    method: str
    url: str
    content: bytes | None
    auth: httpx.Auth | None

    @property
    def host(self) -> str:
        return httpx.URL(self.url).host


class ScriptedTransport:
    """Transport answering per host from a script.

    Each host maps to a status code, a TransportResponse, or an exception to
    raise. Unscripted hosts answer 200.
    """

    def __init__(self, outcomes: dict | None = None):
        self.outcomes = outcomes or {}
        self.calls: list[SentRequest] = []
        self.closed = False

    def _answer(self, method, url, content, auth) -> TransportResponse:
        sent = SentRequest(method, url, content, auth)
        self.calls.append(sent)
        outcome = self.outcomes.get(sent.host, 200)
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, TransportResponse):
            return outcome
        return TransportResponse(outcome, f'{{"host": "{sent.host}"}}'.encode())

    @property
    def hosts_contacted(self) -> list[str]:
        return [call.host for call in self.calls]

    def send(self, method, url, content=None, auth=None) -> TransportResponse:
        return self._answer(method, url, content, auth)

    def close(self) -> None:
        self.closed = True


class AsyncScriptedTransport(ScriptedTransport):
    """Async flavour of ScriptedTransport."""

    async def send(self, method, url, content=None, auth=None) -> TransportResponse:
        return self._answer(method, url, content, auth)

    async def aclose(self) -> None:
        self.closed = True


class KeepOrder(random.Random):
    """Random source whose shuffle leaves the input order alone."""

    def shuffle(self, x):
        pass


@pytest.fixture
def config():
    """Create a complete test config."""
    return AlgoliaConfig(
        application_id="test-app",
        api_key="test-key",
        hosts=["test-app-1.algolia.io", "test-app-2.algolia.io", "test-app-3.algolia.io"],
        timeout=5.0,
    )


@pytest.fixture
def keep_order():
    """Random source that keeps hosts in the given order."""
    return KeepOrder()


@pytest.fixture
def make_transport():
    """Factory for scripted sync transports."""
    return ScriptedTransport


@pytest.fixture
def make_async_transport():
    """Factory for scripted async transports."""
    return AsyncScriptedTransport


@pytest.fixture
def mock_transport():
    """Create a generic mock transport answering 200 with an empty object."""
    transport = MagicMock()
    transport.send.return_value = TransportResponse(200, b"{}")
    return transport
