"""Exa Search - client and tool plugin for the hosted Exa MCP endpoint.

Calls Exa's search tools over JSON-RPC/HTTPS and returns their text content,
whether the endpoint answers with buffered JSON or an event stream.
"""

__version__ = "0.3.0"

from .config import Config

__all__ = ["Config"]
