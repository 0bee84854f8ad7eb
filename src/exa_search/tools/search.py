"""
Search adapters: map caller parameters onto remote Exa tool arguments.

Arguments are forwarded without validation; the remote tool rejects bad input.
"""
from collections.abc import Mapping
from typing import Any

from ..mcp_client.base_client import BaseMCPClient

WEB_SEARCH_TOOL = "web_search_exa"
ADVANCED_SEARCH_TOOL = "web_search_advanced_exa"
CODE_CONTEXT_TOOL = "get_code_context_exa"
COMPANY_RESEARCH_TOOL = "company_research_exa"
PEOPLE_SEARCH_TOOL = "people_search_exa"

DEFAULT_CATEGORY_RESULTS = 10
DATE_FILTER_KEYS = ("startPublishedDate", "endPublishedDate")


async def web_search(client: BaseMCPClient, params: Mapping[str, Any]) -> str:
    return await client.call_tool(WEB_SEARCH_TOOL, params)


async def code_search(client: BaseMCPClient, params: Mapping[str, Any]) -> str:
    return await client.call_tool(CODE_CONTEXT_TOOL, params)


async def company_research(client: BaseMCPClient, params: Mapping[str, Any]) -> str:
    return await client.call_tool(COMPANY_RESEARCH_TOOL, params)


async def people_search(client: BaseMCPClient, params: Mapping[str, Any]) -> str:
    return await client.call_tool(PEOPLE_SEARCH_TOOL, params)


def category_search_arguments(params: Mapping[str, Any], category: str) -> dict[str, Any]:
    """Arguments for a category-restricted advanced search. Date filters are copied only when given."""
    num_results = params.get("numResults")
    args: dict[str, Any] = {"query": params["query"]} if "query" in params else {}
    args.update({
        "category": category,
        "numResults": DEFAULT_CATEGORY_RESULTS if num_results is None else num_results,
    })
    for key in DATE_FILTER_KEYS:
        if key in params:
            args[key] = params[key]
    return args


async def twitter_search(client: BaseMCPClient, params: Mapping[str, Any]) -> str:
    return await client.call_tool(ADVANCED_SEARCH_TOOL, category_search_arguments(params, "tweet"))


async def financial_search(client: BaseMCPClient, params: Mapping[str, Any]) -> str:
    return await client.call_tool(ADVANCED_SEARCH_TOOL, category_search_arguments(params, "financial report"))
