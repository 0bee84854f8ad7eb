"""
Custom exceptions for the Exa MCP client.

Messages carry stable substrings ("timed out", "No data:", "No content",
the HTTP status, the API error code) that callers match on after the
failure has been flattened to "Error: <message>" text.
"""
from typing import Any, Optional

class MCPClientError(Exception):
    """Base class for all MCP client errors."""
    pass

class MCPConnectionError(MCPClientError):
    """Raised when the HTTP exchange with the MCP server fails."""
    pass

class MCPTimeoutError(MCPConnectionError):
    """Raised when a request does not complete before its deadline."""
    def __init__(self, timeout_seconds: float):
        super().__init__(f"Exa request timed out after {timeout_seconds:g}s")
        self.timeout_seconds = timeout_seconds

class MCPHTTPError(MCPConnectionError):
    """Raised when the server answers with a non-2xx status."""
    def __init__(self, status: int, reason: Optional[str] = None):
        super().__init__(f"HTTP error: {status} {reason or ''}".rstrip())
        self.status = status
        self.reason = reason

class MCPProtocolError(MCPClientError):
    """Raised when a response body cannot be decoded into a JSON-RPC envelope."""
    pass

class MCPNoDataFieldError(MCPProtocolError):
    """Raised when an event-stream body carries no 'data:' lines."""
    def __init__(self) -> None:
        super().__init__("No data: field found in SSE response")

class MCPNoContentError(MCPProtocolError):
    """Raised when a successful result has no 'content' field at all."""
    def __init__(self) -> None:
        super().__init__("No content in response")

class MCPAPIError(MCPClientError):
    """Raised when the server returns a JSON-RPC error envelope."""
    def __init__(self, code: int, message: str, data: Optional[Any] = None):
        super().__init__(f"Exa API error: {code} - {message}")
        self.code = code
        self.original_message = message
        self.data = data
