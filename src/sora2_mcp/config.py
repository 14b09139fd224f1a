# SPDX-License-Identifier: MIT
"""Configuration management for the sora2-mcp server.

This module handles:
- Environment variable loading into an immutable Settings object
- Credential validation
- Logging setup
"""

import logging
import os
import sys

from pydantic import BaseModel, Field

from .errors import MissingCredentialError

DEFAULT_API_BASE = "https://api.openai.com/v1"
DEFAULT_SERVER_NAME = "sora2-mcp"

logger = logging.getLogger("sora2_mcp")


def _env(name: str) -> str | None:
    value = os.getenv(name)
    if value and value.strip():
        return value.strip()
    return None


class Settings(BaseModel, frozen=True):
    """Process-wide configuration, built once at startup.

    The credential is optional here: a missing key does not stop the server
    from starting, it fails each tool call instead.
    """

    api_key: str | None = Field(default=None, repr=False)
    api_base: str = DEFAULT_API_BASE
    server_name: str = DEFAULT_SERVER_NAME

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables.

        Priority for the credential: SORA2_MCP_API_KEY > OPENAI_API_KEY.

        Returns:
            Settings with blank values treated as unset
        """
        api_key = _env("SORA2_MCP_API_KEY") or _env("OPENAI_API_KEY")
        api_base = (_env("SORA2_MCP_API_BASE") or DEFAULT_API_BASE).rstrip("/")
        server_name = _env("MCP_NAME") or DEFAULT_SERVER_NAME
        return cls(api_key=api_key, api_base=api_base, server_name=server_name)

    def require_api_key(self) -> str:
        """Return the bearer credential.

        Raises:
            MissingCredentialError: If neither SORA2_MCP_API_KEY nor OPENAI_API_KEY was set
        """
        if not self.api_key:
            raise MissingCredentialError()
        return self.api_key


# ---------- Logging configuration ----------
def configure_logging(server_name: str = DEFAULT_SERVER_NAME) -> None:
    """Send all log output to stderr, tagged with the server name.

    stdout carries the stdio MCP transport and must stay clean.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format=f"%(asctime)s [%(levelname)s] [{server_name}] %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
