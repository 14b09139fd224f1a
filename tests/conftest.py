# SPDX-License-Identifier: MIT
"""Shared pytest fixtures for sora2-mcp tests."""

import base64
import io
from collections.abc import Callable

import httpx
import pytest
from PIL import Image

from sora2_mcp.client import VideoAPIClient
from sora2_mcp.config import Settings

API_BASE = "https://api.test/v1"


class FakeUpstream:
    """Records every request and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._kwargs: dict = {"json": {}}

    def respond_with(self, status_code: int, **kwargs) -> None:
        """Answer every following request with this status and httpx.Response kwargs."""
        self._status = status_code
        self._kwargs = kwargs

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self._status, **self._kwargs)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="sk-test", api_base=API_BASE, server_name="sora2-test")


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def client(settings: Settings, upstream: FakeUpstream) -> VideoAPIClient:
    return VideoAPIClient(settings, transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def keyless_client(upstream: FakeUpstream) -> VideoAPIClient:
    """Client with no credential configured."""
    return VideoAPIClient(Settings(api_base=API_BASE), transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Build encoded image bytes in memory."""

    def _make(size: tuple[int, int] = (1280, 720), fmt: str = "PNG") -> bytes:
        buf = io.BytesIO()
        Image.new("RGB", size, color=(255, 0, 0)).save(buf, fmt)
        return buf.getvalue()

    return _make


@pytest.fixture
def png_base64(make_image) -> str:
    """Base64 of a 1280x720 PNG."""
    return base64.b64encode(make_image()).decode("ascii")


@pytest.fixture
def video_job() -> dict:
    """Sample video job object as returned by the API."""
    return {
        "id": "video_123",
        "object": "video",
        "status": "queued",
        "progress": 0,
        "model": "sora-2",
        "seconds": "8",
        "size": "1280x720",
        "created_at": 1234567890,
    }
