
import logging
from typing import Any, Dict, List, Optional

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from .client import AgentlyClient
from .config import Settings
from .registry import ToolRegistry
from .tools.fetch_agents import FetchAgentsTool

logger = logging.getLogger(__name__)


def build_registry(settings: Settings) -> ToolRegistry:
    client = AgentlyClient(settings)
    return ToolRegistry([FetchAgentsTool(client)])


def create_server(settings: Settings, registry: Optional[ToolRegistry] = None) -> Server:
    """Wires the tool registry into an MCP server."""
    registry = registry or build_registry(settings)
    server = Server(settings.server_name, version=settings.server_version)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return registry.definitions()

    # Arguments are coerced and validated by the tools themselves, which
    # accept looser input (e.g. "2" for a number) than the advertised schema.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        return await registry.call(name, arguments)

    return server


async def serve(settings: Settings):
    """Entry point for the MCP Server over stdio."""
    server = create_server(settings)
    logger.info("Starting %s MCP server, catalog at %s", settings.server_name, settings.agents_endpoint)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
