"""
Tests for tool definitions and host registration.
"""
from unittest.mock import MagicMock

import pytest

from exa_search.mcp_client.exceptions import MCPTimeoutError
from exa_search.tools.registry import (
    TOOL_DEFINITIONS,
    PluginAPI,
    RegisteredTool,
    register_tools,
    wrap_execute,
)

from conftest import CannedClient, success_body

EXPECTED_NAMES = [
    "exa_web_search",
    "exa_code_search",
    "exa_company_research",
    "exa_twitter_search",
    "exa_people_search",
    "exa_financial_report_search",
]


class RecordingAPI:
    def __init__(self):
        self.tools: list[RegisteredTool] = []

    def register_tool(self, tool: RegisteredTool) -> None:
        self.tools.append(tool)


def test_registers_all_six_tools_in_order():
    api = RecordingAPI()
    registered = register_tools(api, CannedClient())

    assert isinstance(api, PluginAPI)
    assert [t.name for t in api.tools] == EXPECTED_NAMES
    assert registered == api.tools


def test_register_tool_called_once_per_definition():
    api = MagicMock()
    register_tools(api, CannedClient())
    assert api.register_tool.call_count == 6


def test_definitions_have_required_fields():
    for definition in TOOL_DEFINITIONS:
        assert definition.name
        assert definition.description
        assert definition.parameters["type"] == "object"
        assert definition.parameters["required"]
        for required in definition.parameters["required"]:
            assert required in definition.parameters["properties"]


def test_definition_names_are_unique():
    names = [d.name for d in TOOL_DEFINITIONS]
    assert len(names) == len(set(names))


@pytest.mark.asyncio
async def test_wrap_execute_success():
    async def handler(client, params):
        return f"found {params['query']}"

    execute = wrap_execute(handler, CannedClient())
    assert await execute("call-1", {"query": "mcp"}) == {"content": [{"type": "text", "text": "found mcp"}]}


@pytest.mark.asyncio
async def test_wrap_execute_turns_failures_into_error_text():
    async def handler(client, params):
        raise MCPTimeoutError(30)

    execute = wrap_execute(handler, CannedClient())
    result = await execute("call-2", {})
    assert result == {
        "content": [{"type": "text", "text": "Error: Exa request timed out after 30s"}],
        "isError": True,
    }


@pytest.mark.asyncio
async def test_registered_tool_calls_remote_tool():
    client = CannedClient(success_body("tweet one", "tweet two"))
    tools = {t.name: t for t in register_tools(RecordingAPI(), client)}

    result = await tools["exa_twitter_search"].execute("call-3", {"query": "launch"})

    assert result == {"content": [{"type": "text", "text": "tweet one\n\ntweet two"}]}
    assert client.sent[0]["params"] == {
        "name": "web_search_advanced_exa",
        "arguments": {"query": "launch", "category": "tweet", "numResults": 10},
    }


@pytest.mark.asyncio
async def test_registered_tool_reports_api_errors():
    client = CannedClient('{"jsonrpc":"2.0","id":1,"error":{"code":400,"message":"Bad request"}}')
    tools = {t.name: t for t in register_tools(RecordingAPI(), client)}

    result = await tools["exa_web_search"].execute("call-4", {"query": ""})

    assert result["isError"] is True
    text = result["content"][0]["text"]
    assert text.startswith("Error: ")
    assert "400" in text and "Bad request" in text
