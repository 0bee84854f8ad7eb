"""
Tool definitions and registration with a host tool registry.

Each definition pairs a search adapter with the JSON Schema the host shows to
its model. :func:`register_tools` binds the definitions to a client and hands
them to the host one by one.
"""
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, List, Protocol, runtime_checkable

import structlog

from ..mcp_client.base_client import BaseMCPClient
from ..models.common import BasePydanticModel
from ..models.mcp import ToolExecutionResult
from . import search

logger = structlog.get_logger(__name__)

ToolHandler = Callable[[BaseMCPClient, Mapping[str, Any]], Awaitable[str]]
ExecuteFn = Callable[[str, Mapping[str, Any]], Awaitable[dict[str, Any]]]


class ToolDefinition(BasePydanticModel):
    name: str
    description: str
    parameters: dict[str, Any]
    handler: ToolHandler


class RegisteredTool(BasePydanticModel):
    """What the host receives: a definition bound to a client."""
    name: str
    description: str
    parameters: dict[str, Any]
    execute: ExecuteFn


@runtime_checkable
class PluginAPI(Protocol):
    def register_tool(self, tool: RegisteredTool) -> None: ...


def wrap_execute(handler: ToolHandler, client: BaseMCPClient) -> ExecuteFn:
    """
    Adapt a handler to the host's ``execute(call_id, params)`` callback.

    This is the boundary where failures become data: any exception is turned
    into an ``Error: <message>`` text payload flagged with ``isError``.
    """
    async def execute(call_id: str, params: Mapping[str, Any]) -> dict[str, Any]:
        try:
            text = await handler(client, params)
        except Exception as e:
            logger.warning("Tool execution failed.", call_id=call_id, error_type=type(e).__name__, error=str(e))
            return ToolExecutionResult.from_error(str(e)).to_payload()
        return ToolExecutionResult.from_text(text).to_payload()

    return execute


def _object_schema(properties: dict[str, Any], required: List[str]) -> dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


def _number(description: str) -> dict[str, Any]:
    return {"type": "number", "description": description}


def _string(description: str, enum: List[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "string", "description": description}
    if enum is not None:
        schema["enum"] = enum
    return schema


TOOL_DEFINITIONS: List[ToolDefinition] = [
    ToolDefinition(
        name="exa_web_search",
        description=(
            "Search the web using Exa AI neural search. Find current information, news, facts, "
            "or answer questions about any topic. Returns clean, formatted content ready for LLM use."
        ),
        parameters=_object_schema(
            {
                "query": _string("Web search query"),
                "numResults": _number("Number of search results to return (default: 8)"),
                "type": _string(
                    "Search type - 'auto': balanced search (default), 'fast': quick results, "
                    "'deep': comprehensive research",
                    enum=["auto", "fast", "deep"],
                ),
                "livecrawl": _string(
                    "Live crawl mode - 'fallback': use live crawling as backup if cached unavailable, "
                    "'preferred': prioritize live crawling",
                    enum=["fallback", "preferred"],
                ),
            },
            ["query"],
        ),
        handler=search.web_search,
    ),
    ToolDefinition(
        name="exa_code_search",
        description=(
            "Find code examples, documentation, and programming solutions from GitHub, Stack Overflow, "
            "and official docs. Useful for API usage, library examples, code snippets, and debugging help."
        ),
        parameters=_object_schema(
            {
                "query": _string(
                    "Search query for code context - e.g., 'React useState hook examples', "
                    "'Python pandas dataframe filtering'"
                ),
                "tokensNum": _number(
                    "Number of tokens to return (1000-50000). Lower for focused queries, "
                    "higher for comprehensive docs (default: 5000)"
                ),
            },
            ["query"],
        ),
        handler=search.code_search,
    ),
    ToolDefinition(
        name="exa_company_research",
        description=(
            "Research any company to get business information, news, and insights. Returns information "
            "from trusted business sources about products, services, recent news, or industry position."
        ),
        parameters=_object_schema(
            {
                "companyName": _string("Name of the company to research"),
                "numResults": _number("Number of search results to return (default: 5)"),
            },
            ["companyName"],
        ),
        handler=search.company_research,
    ),
    ToolDefinition(
        name="exa_twitter_search",
        description=(
            "Search Twitter/X posts. Find tweets, discussions, and social commentary on any topic. "
            "Useful for tracking public sentiment, announcements, and trending discussions."
        ),
        parameters=_object_schema(
            {
                "query": _string("Search query for Twitter/X posts"),
                "numResults": _number("Number of tweets to return (default: 10)"),
                "startPublishedDate": _string(
                    "Filter tweets published after this date (ISO 8601 format, e.g., '2024-01-01T00:00:00.000Z')"
                ),
                "endPublishedDate": _string("Filter tweets published before this date (ISO 8601 format)"),
            },
            ["query"],
        ),
        handler=search.twitter_search,
    ),
    ToolDefinition(
        name="exa_people_search",
        description=(
            "Find people and their professional profiles. Search for individuals by name, role, company, "
            "or expertise. Returns public LinkedIn and professional profile data."
        ),
        parameters=_object_schema(
            {
                "query": _string(
                    "Search query for people - e.g., 'CTO at Anthropic', 'machine learning researchers Stanford'"
                ),
                "numResults": _number("Number of results to return (default: 5)"),
            },
            ["query"],
        ),
        handler=search.people_search,
    ),
    ToolDefinition(
        name="exa_financial_report_search",
        description=(
            "Search financial reports: 10-K, 10-Q, annual reports, quarterly earnings, "
            "and SEC filings for public companies."
        ),
        parameters=_object_schema(
            {
                "query": _string(
                    "Search query for financial reports - e.g., 'Apple 2024 Q4 earnings', 'Tesla annual report 2024'"
                ),
                "numResults": _number("Number of results to return (default: 10)"),
                "startPublishedDate": _string("Filter reports published after this date (ISO 8601 format)"),
                "endPublishedDate": _string("Filter reports published before this date (ISO 8601 format)"),
            },
            ["query"],
        ),
        handler=search.financial_search,
    ),
]


def bind_tool(definition: ToolDefinition, client: BaseMCPClient) -> RegisteredTool:
    return RegisteredTool(
        name=definition.name,
        description=definition.description,
        parameters=definition.parameters,
        execute=wrap_execute(definition.handler, client),
    )


def register_tools(api: PluginAPI, client: BaseMCPClient) -> List[RegisteredTool]:
    """Register every Exa tool on the host, in definition order."""
    registered: List[RegisteredTool] = []
    for definition in TOOL_DEFINITIONS:
        tool = bind_tool(definition, client)
        api.register_tool(tool)
        registered.append(tool)
    logger.info("Registered Exa tools.", count=len(registered), tools=[t.name for t in registered])
    return registered
