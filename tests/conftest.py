"""Pytest configuration and fixtures for huelights tests."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from huelights.bridge.connection import BridgeConnection
from huelights.bridge.transport import BridgeTransport
from huelights.client import LightClient

BRIDGE_BASE = "http://bridge.test/api/testuser/"
API_PREFIX = "/api/testuser/"

SUCCESS_BODY = '[{"success": {"/lights/1/state/on": true}}]'


class FakeBridge:
    """Stand-in bridge behind ``httpx.MockTransport``.

    Records every request and the highest number of requests in flight at
    once. Routes are keyed by method and path below the API base.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], tuple[int, str]] = {}
        self.delay = 0.0
        self.in_flight = 0
        self.max_in_flight = 0
        self.completed = 0

    def respond(
        self,
        method: str,
        path: str,
        payload: Any = None,
        *,
        text: str | None = None,
        status: int = 200,
    ) -> None:
        """Register the response for a route."""
        body = text if text is not None else json.dumps(payload)
        self.routes[(method, path)] = (status, body)

    def paths(self, method: str | None = None) -> list[str]:
        """Paths requested so far, in arrival order."""
        return [
            request.url.path.removeprefix(API_PREFIX)
            for request in self.requests
            if method is None or request.method == method
        ]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            path = request.url.path.removeprefix(API_PREFIX)
            status, body = self.routes.get((request.method, path), (200, SUCCESS_BODY))
            return httpx.Response(status, text=body)
        finally:
            self.in_flight -= 1
            self.completed += 1


@pytest.fixture
def bridge() -> FakeBridge:
    """A fake bridge with no routes registered."""
    return FakeBridge()


@pytest.fixture
def connection() -> BridgeConnection:
    return BridgeConnection(BRIDGE_BASE)


@pytest.fixture
def transport(bridge: FakeBridge) -> BridgeTransport:
    """Transport wired to the fake bridge."""
    return BridgeTransport(httpx.AsyncClient(transport=httpx.MockTransport(bridge.handler)))


@pytest.fixture
def client(connection: BridgeConnection, transport: BridgeTransport) -> LightClient:
    """Initialized client talking to the fake bridge."""
    return LightClient(connection, transport=transport, parallel_requests=2)


@pytest.fixture
def uninitialized_client(transport: BridgeTransport) -> LightClient:
    return LightClient(transport=transport)
