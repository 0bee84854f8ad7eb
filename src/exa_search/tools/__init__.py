"""
Exa search adapters and host registration.
"""
from .registry import (
    TOOL_DEFINITIONS,
    PluginAPI,
    RegisteredTool,
    ToolDefinition,
    register_tools,
    wrap_execute,
)
from .search import (
    code_search,
    company_research,
    financial_search,
    people_search,
    twitter_search,
    web_search,
)

__all__ = [
    "PluginAPI",
    "RegisteredTool",
    "TOOL_DEFINITIONS",
    "ToolDefinition",
    "code_search",
    "company_research",
    "financial_search",
    "people_search",
    "register_tools",
    "twitter_search",
    "web_search",
    "wrap_execute",
]
