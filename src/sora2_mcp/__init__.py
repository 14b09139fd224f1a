# SPDX-License-Identifier: MIT
"""sora2-mcp: MCP server exposing the OpenAI Sora video API as tools."""

__version__ = "1.0.0"
