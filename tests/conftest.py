"""
Global pytest configuration and fixtures for zoomkit tests.

Network access is replaced by httpx.MockTransport; every request the engine
sends is recorded so tests can assert on method, URL, headers and body.
"""

import json
import os
from typing import Any, Callable, Dict, Generator, List, Optional

import httpx  # type: ignore
import pytest  # type: ignore

from zoomkit.config.settings import reset_settings
from zoomkit.sources.client.zoom.zoom import (
    ZoomClient,
    ZoomCredentials,
    ZoomRESTClientViaJWT,
)
from zoomkit.sources.external.zoom.zoom import ZoomDataSource

API_KEY = "test-api-key"
API_SECRET = "test-api-secret"
BASE_URL = "https://api.zoom.us/v2"


class RecordingHandler:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status: int = 200
        self.json_body: Any = None
        self.content: bytes = b""
        self.headers: Dict[str, str] = {}
        self.error: Optional[Exception] = None

    def respond(
        self,
        status: int = 200,
        json_body: Any = None,
        content: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.status = status
        self.json_body = json_body
        self.content = content
        self.headers = headers or {}

    def raise_error(self, error: Exception) -> None:
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.json_body is not None:
            return httpx.Response(self.status, headers=self.headers, json=self.json_body)
        return httpx.Response(self.status, headers=self.headers, content=self.content)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "No request was sent"
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content)


# ============================================================================
# Function-level fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """
    Reset environment state and cached settings around each test.
    """
    original_env: Dict[str, str] = os.environ.copy()
    reset_settings()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    reset_settings()


@pytest.fixture
def credentials() -> ZoomCredentials:
    return ZoomCredentials(API_KEY, API_SECRET)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def make_rest_client(handler: RecordingHandler) -> Callable[..., ZoomRESTClientViaJWT]:
    """
    Factory for a JWT REST client wired to the recording handler.

    Example:
        rest = make_rest_client(clock=lambda: 1_600_000_000)
    """
    def _make(clock: Optional[Callable[[], float]] = None, **kwargs: Any) -> ZoomRESTClientViaJWT:
        if clock is not None:
            kwargs["clock"] = clock
        return ZoomRESTClientViaJWT(
            API_KEY,
            API_SECRET,
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )
    return _make


@pytest.fixture
def zoom_client(make_rest_client: Callable[..., ZoomRESTClientViaJWT]) -> ZoomClient:
    return ZoomClient(make_rest_client())


@pytest.fixture
def data_source(zoom_client: ZoomClient) -> ZoomDataSource:
    return ZoomDataSource(zoom_client)
