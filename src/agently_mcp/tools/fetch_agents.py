
import logging
from typing import Any, Optional

from mcp.types import CallToolResult, Tool

from ..categories import CATEGORIES
from ..client import AgentlyClient
from ..envelope import build_envelope, error_result
from ..exceptions import AgentlyError
from ..query import build_query_string
from ..schema import MAX_FILTER_ITEMS, MAX_LIMIT, MAX_SEARCH_TERM_LENGTH, parse_agent_query

logger = logging.getLogger(__name__)


def _filter_property(description: str, **items: Any) -> dict:
    return {
        "type": "array",
        "items": {"type": "string", **items},
        "description": description,
        "maxItems": MAX_FILTER_ITEMS,
    }


def _sort_property(values: list, description: str) -> dict:
    return {"type": "string", "enum": values, "description": description}


INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "page": {"type": "number", "description": "Page number for pagination (min 1)", "default": 1},
        "limit": {
            "type": "number",
            "description": f"Number of items per page (min 1, max {MAX_LIMIT})",
            "default": 10,
        },
        "searchTerm": {
            "type": "string",
            "description": f"Text to search in agent names/descriptions (max {MAX_SEARCH_TERM_LENGTH} chars)",
            "maxLength": MAX_SEARCH_TERM_LENGTH,
        },
        "categories": _filter_property(
            "Filter by categories. Providing multiple values acts as an AND filter (narrows results). Max 20 items.",
            enum=list(CATEGORIES),
        ),
        "inputModes": _filter_property(
            "Filter by input MIME Types (e.g., 'text/plain'). "
            "Providing multiple values acts as an AND filter. Max 20 items."
        ),
        "outputModes": _filter_property(
            "Filter by output MIME Types (e.g., 'text/plain,image/png,video/mp4'). "
            "Providing multiple values acts as an AND filter. Max 20 items."
        ),
        "skillTags": _filter_property(
            "Filter by skill tags (e.g., 'language,translation,2025'). "
            "Providing multiple values acts as an AND filter. Max 20 items."
        ),
        "sortByName": _sort_property(["a-z", "z-a"], "Sort by name, A-Z or Z-A"),
        "sortByCreatedAt": _sort_property(["newest", "oldest"], "Sort by creation date"),
        "sortByUpdatedAt": _sort_property(["newest", "oldest"], "Sort by update date"),
        "sortBySuccessRate": _sort_property(["highest", "lowest"], "Sort by success rate"),
        "sortByUsage": _sort_property(["highest", "lowest"], "Sort by usage count"),
        "sortByRequestPrice": _sort_property(["highest", "lowest"], "Sort by average request price"),
        "sortByStreamingPrice": _sort_property(
            ["highest", "lowest"], "Sort by average streaming price per second"
        ),
        "isLocal": {
            "type": "boolean",
            "description": "Only return agents that run locally and need to be set up by the user",
        },
        "explanation": {"type": "string", "description": "Optional explanation for the request (free text)"},
    },
}


class FetchAgentsTool:
    """
    Implements the 'fetch_agents' tool: search the Agently catalog and return
    the matches wrapped as untrusted data.
    """

    TOOL_NAME = "fetch_agents"

    def __init__(self, client: AgentlyClient):
        self.client = client

    @property
    def definition(self) -> Tool:
        return Tool(
            name=self.TOOL_NAME,
            description="Fetches the public Agently agents based on filtering, sorting, and pagination criteria. "
                        "The most used agents with the highest success rates are usually the best.",
            inputSchema=INPUT_SCHEMA,
        )

    async def execute(self, arguments: Optional[dict]) -> CallToolResult:
        try:
            query = parse_agent_query(arguments).unwrap()
            catalog = await self.client.fetch_agents(build_query_string(query))
        except AgentlyError as e:
            logger.warning("%s failed: %s", self.TOOL_NAME, e)
            return error_result(str(e))

        return build_envelope(catalog, is_local=bool(query.is_local))
