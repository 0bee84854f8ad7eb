"""
MCP Protocol Client Implementation.

This module provides the JSONRPC 2.0 client for calling tools on the hosted
Exa MCP endpoint over HTTPS, accepting JSON or event-stream responses.
"""

from .base_client import BaseMCPClient, RequestIdCounter, generate_jsonrpc_request
from .content import extract_text_content
from .decoder import DecodeKind, DecodeOutcome, decode_response, parse_sse_response
from .exceptions import (
    MCPAPIError,
    MCPClientError,
    MCPConnectionError,
    MCPHTTPError,
    MCPNoContentError,
    MCPNoDataFieldError,
    MCPProtocolError,
    MCPTimeoutError,
)
from .http_client import HTTPMCPClient

__all__ = [
    "BaseMCPClient",
    "DecodeKind",
    "DecodeOutcome",
    "HTTPMCPClient",
    "MCPAPIError",
    "MCPClientError",
    "MCPConnectionError",
    "MCPHTTPError",
    "MCPNoContentError",
    "MCPNoDataFieldError",
    "MCPProtocolError",
    "MCPTimeoutError",
    "RequestIdCounter",
    "decode_response",
    "extract_text_content",
    "generate_jsonrpc_request",
    "parse_sse_response",
]
