"""
Shared pytest fixtures for CodeAuth tests.

This module provides common fixtures including:
- RemoteAuthMocker: Fake CodeAuth service with canned responses per path
- httpx clients routed to the fake through httpx.MockTransport
- Initialized CodeAuth clients with and without the session cache
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx
import pytest

from codeauth import CodeAuth

TEST_ENDPOINT = "project.codeauth.test"
TEST_PROJECT_ID = "proj-123"


# =============================================================================
# Remote Service Mocking Infrastructure
# =============================================================================

@dataclass
class MockResponse:
    """Represents a canned response of the fake service."""
    status_code: int = 200
    json_body: Optional[Any] = None
    text: Optional[str] = None
    raise_error: Optional[Exception] = None

    def to_httpx(self, request: httpx.Request) -> httpx.Response:
        if self.raise_error is not None:
            raise self.raise_error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text, request=request)
        return httpx.Response(self.status_code, json=self.json_body, request=request)


@dataclass
class RecordedCall:
    """Record of a request received by the fake service."""
    path: str
    host: str
    body: Dict[str, Any] = field(default_factory=dict)


class RemoteAuthMocker:
    """
    Fake CodeAuth service used as an httpx.MockTransport handler.

    Usage:
        def test_signin(remote):
            remote.register("/signin/email", MockResponse(400, {"error": "bad_email"}))

            result = await client.sign_in_email("x")

            assert remote.call_count("/signin/email") == 1
    """

    def __init__(self):
        self._responses: Dict[str, List[MockResponse]] = {}
        self.calls: List[RecordedCall] = []
        self._default_response = MockResponse(status_code=404, json_body={"detail": "not mocked"})

    def register(self, path: str, *responses: MockResponse) -> "RemoteAuthMocker":
        """
        Queue responses for a path. The last one repeats once the queue is drained.

        Returns:
            self for chaining
        """
        self._responses.setdefault(path, []).extend(responses)
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        """MockTransport handler."""
        body = json.loads(request.content) if request.content else {}
        self.calls.append(RecordedCall(path=request.url.path, host=request.url.host, body=body))

        queued = self._responses.get(request.url.path)
        if not queued:
            return self._default_response.to_httpx(request)
        response = queued.pop(0) if len(queued) > 1 else queued[0]
        return response.to_httpx(request)

    def call_count(self, path: Optional[str] = None) -> int:
        if path is None:
            return len(self.calls)
        return sum(1 for c in self.calls if c.path == path)

    def last_body(self, path: str) -> Dict[str, Any]:
        for recorded in reversed(self.calls):
            if recorded.path == path:
                return recorded.body
        raise AssertionError(f"No call made to {path}")


def session_payload(token: str = "tok-1", email: str = "user@example.com",
                    expiration: int = 1_900_000_000, refresh_left: int = 5) -> Dict[str, Any]:
    """Body of a successful token-issuing response."""
    return {
        "session_token": token,
        "email": email,
        "expiration": expiration,
        "refresh_left": refresh_left,
    }


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def remote() -> RemoteAuthMocker:
    return RemoteAuthMocker()


@pytest.fixture
def http_client(remote):
    """httpx client whose requests all land on the fake service (no sockets to close)."""
    return httpx.AsyncClient(transport=httpx.MockTransport(remote.handle))


@pytest.fixture
def codeauth_client(http_client):
    """Initialized client with the session cache enabled."""
    client = CodeAuth(http_client=http_client)
    client.initialize(TEST_ENDPOINT, TEST_PROJECT_ID, use_cache=True, cache_duration=30)
    yield client
    client.shutdown()


@pytest.fixture
def uncached_client(http_client):
    """Initialized client with the session cache disabled."""
    client = CodeAuth(http_client=http_client)
    client.initialize(TEST_ENDPOINT, TEST_PROJECT_ID, use_cache=False)
    yield client
    client.shutdown()
