
import logging
from typing import Any, Dict, List, Optional, Protocol

from mcp.types import CallToolResult, Tool

from .envelope import error_result
from .exceptions import UnknownToolError

logger = logging.getLogger(__name__)


class ServerTool(Protocol):
    TOOL_NAME: str

    @property
    def definition(self) -> Tool: ...

    async def execute(self, arguments: Optional[dict]) -> CallToolResult: ...


class ToolRegistry:
    """
    Routes tool calls to the tools this server exposes.

    The single boundary between the MCP transport and the tools: whatever
    happens inside a tool, the caller gets a CallToolResult back.
    """

    def __init__(self, tools: Optional[List[ServerTool]] = None):
        self._tools: Dict[str, ServerTool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: ServerTool):
        self._tools[tool.TOOL_NAME] = tool

    def definitions(self) -> List[Tool]:
        """Static capability listing, no external call involved."""
        return [tool.definition for tool in self._tools.values()]

    def get_tool(self, name: str) -> ServerTool:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    async def call(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        try:
            tool = self.get_tool(name)
        except UnknownToolError as e:
            logger.warning("Received call for unknown tool: %s", name)
            return error_result(str(e))

        try:
            return await tool.execute(arguments)
        except Exception as e:
            logger.exception("Tool %s crashed", name)
            return error_result(f"Tool {name} failed unexpectedly: {e}")
