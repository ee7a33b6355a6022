import asyncio
import json

import httpx
import pytest

from agently_mcp.categories import CATEGORIES
from agently_mcp.envelope import LOCAL_USAGE, NO_AGENTS_FOUND
from agently_mcp.registry import ToolRegistry
from agently_mcp.tools.fetch_agents import FetchAgentsTool


def text_of(result) -> str:
    return result.content[0].text


@pytest.fixture
def registry(client) -> ToolRegistry:
    return ToolRegistry([FetchAgentsTool(client)])


class TestToolListing:

    def test_single_tool(self, registry):
        definitions = registry.definitions()

        assert [tool.name for tool in definitions] == ["fetch_agents"]
        assert "Agently" in definitions[0].description

    def test_input_schema(self, registry):
        schema = registry.definitions()[0].inputSchema
        properties = schema["properties"]

        assert schema["type"] == "object"
        assert set(properties) == {
            "page", "limit", "searchTerm", "categories", "inputModes", "outputModes", "skillTags",
            "sortByName", "sortByCreatedAt", "sortByUpdatedAt", "sortBySuccessRate", "sortByUsage",
            "sortByRequestPrice", "sortByStreamingPrice", "isLocal", "explanation",
        }
        assert properties["page"]["default"] == 1
        assert properties["limit"]["default"] == 10
        assert properties["searchTerm"]["maxLength"] == 250
        assert properties["categories"]["items"]["enum"] == list(CATEGORIES)
        assert properties["categories"]["maxItems"] == 20
        assert "enum" not in properties["skillTags"]["items"]
        assert properties["sortByName"]["enum"] == ["a-z", "z-a"]
        assert properties["sortByUpdatedAt"]["enum"] == ["newest", "oldest"]
        assert properties["sortByRequestPrice"]["enum"] == ["highest", "lowest"]
        assert properties["isLocal"]["type"] == "boolean"

    def test_listing_makes_no_request(self, registry, catalog_api):
        registry.definitions()
        assert catalog_api.requests == []


class TestFetchAgents:

    @pytest.mark.asyncio
    async def test_success(self, registry, catalog_api, sample_agents, pagination):
        result = await registry.call("fetch_agents", {"searchTerm": "translate text", "limit": "5"})

        assert not result.isError
        assert result.meta == {"pagination": pagination}
        lines = text_of(result).split("\n")
        assert json.loads("\n".join(lines[2:-2])) == sample_agents
        assert catalog_api.requests[0].url.query == b"page=1&limit=5&searchTerm=translate+text"

    @pytest.mark.asyncio
    async def test_local_search(self, registry, catalog_api):
        result = await registry.call("fetch_agents", {"isLocal": "1"})

        assert text_of(result).endswith(LOCAL_USAGE)
        assert catalog_api.requests[0].url.query == b"page=1&limit=10&isLocal=true"

    @pytest.mark.asyncio
    async def test_empty_result(self, registry, catalog_api, pagination):
        catalog_api.json = {"found_agents": [], "pagination": pagination}

        result = await registry.call("fetch_agents", {})

        assert not result.isError
        assert text_of(result) == NO_AGENTS_FOUND
        assert result.meta == {"pagination": pagination}

    @pytest.mark.asyncio
    async def test_missing_arguments(self, registry, catalog_api):
        result = await registry.call("fetch_agents", None)

        assert not result.isError
        assert catalog_api.requests[0].url.query == b"page=1&limit=10"

    @pytest.mark.asyncio
    async def test_validation_error_skips_request(self, registry, catalog_api):
        result = await registry.call("fetch_agents", {"limit": 51, "categories": ["Nonsense"]})

        assert result.isError
        assert text_of(result).startswith("Invalid input parameters:")
        assert "limit" in text_of(result)
        assert "categories" in text_of(result)
        assert catalog_api.requests == []

    @pytest.mark.asyncio
    async def test_upstream_500(self, registry, catalog_api):
        catalog_api.status_code = 500
        catalog_api.text = "server error"

        result = await registry.call("fetch_agents", {})

        assert result.isError
        assert "500" in text_of(result)
        assert "server error" in text_of(result)

    @pytest.mark.asyncio
    async def test_transport_failure(self, registry, catalog_api):
        catalog_api.error = httpx.ConnectError("Name or service not known")

        result = await registry.call("fetch_agents", {})

        assert result.isError
        assert "Name or service not known" in text_of(result)

    @pytest.mark.asyncio
    async def test_shape_failure(self, registry, catalog_api):
        catalog_api.json = {"agents": []}

        result = await registry.call("fetch_agents", {})

        assert result.isError
        assert "unexpected format" in text_of(result)

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self, registry, catalog_api):
        first, second = await asyncio.gather(
            registry.call("fetch_agents", {"page": 1}),
            registry.call("fetch_agents", {"page": 2}),
        )

        assert len(catalog_api.requests) == 2
        assert text_of(first).split("\n")[1] != text_of(second).split("\n")[1]

    @pytest.mark.asyncio
    async def test_failure_does_not_affect_next_call(self, registry, catalog_api):
        catalog_api.status_code = 503
        catalog_api.text = "unavailable"
        assert (await registry.call("fetch_agents", {})).isError

        catalog_api.status_code = 200
        catalog_api.text = None
        assert not (await registry.call("fetch_agents", {})).isError


class TestRegistry:

    @pytest.mark.asyncio
    async def test_unknown_tool(self, registry, catalog_api):
        result = await registry.call("other_tool", {"page": 1})

        assert result.isError
        assert "other_tool" in text_of(result)
        assert catalog_api.requests == []

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_error_result(self, registry):
        class BrokenTool:
            TOOL_NAME = "broken"
            definition = None

            async def execute(self, arguments):
                raise RuntimeError("boom")

        registry.register(BrokenTool())
        result = await registry.call("broken", {})

        assert result.isError
        assert "boom" in text_of(result)
