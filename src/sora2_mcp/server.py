# SPDX-License-Identifier: MIT
"""sora2-mcp server - MCP stdio endpoint for the OpenAI Sora video API.

Registers the tool catalog and the call handler on a low-level MCP server.
Tool logic lives in dispatcher.py; the tool catalog in tools.py.
"""

import anyio
from dotenv import load_dotenv
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .client import VideoAPIClient
from .config import Settings, configure_logging, logger
from .dispatcher import call_tool
from .tools import list_tool_definitions


def create_server(settings: Settings, client: VideoAPIClient | None = None) -> Server:
    """Build the MCP server with list/call handlers bound to one API client.

    Args:
        settings: Process configuration
        client: API client override (defaults to one built from settings)

    Returns:
        Configured low-level MCP server, not yet attached to a transport
    """
    api_client = client or VideoAPIClient(settings)
    server: Server = Server(settings.server_name, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return list_tool_definitions()

    # Raw handler: McpError must reach the session as a JSON-RPC error, not an isError result
    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        blocks = await call_tool(api_client, req.params.name, req.params.arguments)
        return types.ServerResult(types.CallToolResult(content=blocks))

    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


async def serve(settings: Settings) -> None:
    """Run the server over stdio until the client disconnects."""
    server = create_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


# ==================== SERVER ENTRYPOINT ====================
def main() -> None:
    """Run the MCP server.

    A missing API key does not prevent startup; each tool call reports it.
    """
    load_dotenv()  # Load environment variables at runtime
    settings = Settings.from_env()
    configure_logging(settings.server_name)

    logger.info("Starting server...")
    if not settings.api_key:
        logger.warning("No API key configured; set SORA2_MCP_API_KEY or OPENAI_API_KEY")

    try:
        anyio.run(serve, settings)
    except Exception:
        logger.exception("Fatal error")
        raise SystemExit(1) from None


if __name__ == "__main__":
    main()
