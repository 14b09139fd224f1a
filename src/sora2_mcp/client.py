# SPDX-License-Identifier: MIT
"""HTTP client for the OpenAI video API.

Every call opens a short-lived ``httpx.AsyncClient``; nothing is pooled
between tool invocations. Responses come back as a tagged union so callers
must say whether they expect JSON or media bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import httpx

from .config import Settings, logger
from .errors import UpstreamError

HttpMethod = Literal["GET", "POST", "DELETE"]

_BINARY_CONTENT_TYPES = ("video/", "image/", "application/octet-stream")


@dataclass(frozen=True)
class JsonPayload:
    """Decoded JSON body."""

    value: Any


@dataclass(frozen=True)
class BinaryPayload:
    """Raw media bytes (video, thumbnail or spritesheet)."""

    content: bytes
    content_type: str


RemotePayload = JsonPayload | BinaryPayload


@dataclass(frozen=True)
class FilePart:
    """A binary field in a multipart form."""

    filename: str
    content: bytes
    content_type: str


def _is_binary(content_type: str) -> bool:
    return any(marker in content_type for marker in _BINARY_CONTENT_TYPES)


class VideoAPIClient:
    """Issues single requests against the configured API base URL.

    Args:
        settings: Process configuration carrying the credential and base URL
        transport: Optional httpx transport, used by tests to fake the upstream
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport

    def _http_client(self, api_key: str) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._settings.api_base,
            headers={"Authorization": f"Bearer {api_key}"},
            transport=self._transport,
            timeout=None,
        )

    async def request(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        *,
        params: dict[str, str | int] | None = None,
        json: dict[str, Any] | None = None,
    ) -> RemotePayload:
        """Send a request with an optional JSON body.

        Args:
            endpoint: Path below the base URL, e.g. "/videos/vid_123"
            method: HTTP method
            params: Query parameters; omitted entirely when empty
            json: JSON request body

        Returns:
            BinaryPayload for video/image/octet-stream responses, JsonPayload otherwise

        Raises:
            MissingCredentialError: If no API key is configured (no request is sent)
            UpstreamError: If the upstream answers with a non-2xx status
        """
        api_key = self._settings.require_api_key()
        async with self._http_client(api_key) as http:
            response = await http.request(method, endpoint, params=params or None, json=json)
        logger.debug("%s %s -> %d", method, response.request.url, response.status_code)
        _raise_for_status(response)

        content_type = response.headers.get("content-type", "")
        if _is_binary(content_type):
            return BinaryPayload(content=response.content, content_type=content_type)
        return JsonPayload(value=response.json())

    async def request_multipart(self, endpoint: str, fields: dict[str, str | FilePart]) -> JsonPayload:
        """POST a multipart/form-data body and decode the JSON answer.

        String fields are sent as plain form fields, FilePart values as
        file uploads. The body is multipart even when no file is attached.

        Raises:
            MissingCredentialError: If no API key is configured (no request is sent)
            UpstreamError: If the upstream answers with a non-2xx status
        """
        api_key = self._settings.require_api_key()

        files: list[tuple[str, tuple[str | None, bytes] | tuple[str, bytes, str]]] = []
        for name, value in fields.items():
            if isinstance(value, FilePart):
                files.append((name, (value.filename, value.content, value.content_type)))
            else:
                files.append((name, (None, value.encode("utf-8"))))

        async with self._http_client(api_key) as http:
            response = await http.post(endpoint, files=files)
        logger.debug("POST %s (multipart) -> %d", response.request.url, response.status_code)
        _raise_for_status(response)
        return JsonPayload(value=response.json())


def _raise_for_status(response: httpx.Response) -> None:
    if not response.is_success:
        raise UpstreamError(response.status_code, response.text)
