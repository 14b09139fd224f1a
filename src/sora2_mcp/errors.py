# SPDX-License-Identifier: MIT
"""Exception types raised below the tool dispatch boundary."""


class Sora2MCPError(Exception):
    """Base class for sora2-mcp errors."""


class MissingCredentialError(Sora2MCPError):
    """No API key configured."""

    def __init__(self) -> None:
        super().__init__("SORA2_MCP_API_KEY or OPENAI_API_KEY environment variable is required")


class UpstreamError(Sora2MCPError):
    """The video API answered with a non-2xx status.

    The raw response body is kept verbatim.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"OpenAI API error ({status_code}): {body}")


class UnexpectedPayloadError(Sora2MCPError):
    """The upstream returned JSON where media was expected, or the reverse."""


class InvalidArgumentError(Sora2MCPError, ValueError):
    """A tool argument passed schema validation but is still unusable."""
