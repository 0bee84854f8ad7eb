"""
Text extraction from decoded response envelopes.
"""
from ..models.mcp import JsonRpcFailure, JsonRpcSuccess
from .exceptions import MCPAPIError, MCPNoContentError

TEXT_SEPARATOR = "\n\n"


def extract_text_content(response: JsonRpcSuccess | JsonRpcFailure) -> str:
    """
    Join the text items of a successful result with a blank line between them.

    An empty ``content`` list means zero hits and yields ``""``; a missing
    ``content`` field is an unexpected response shape.

    Raises:
        MCPAPIError: the envelope is a JSON-RPC error.
        MCPNoContentError: the result, or its ``content`` field, is missing or null.
    """
    if isinstance(response, JsonRpcFailure):
        raise MCPAPIError(response.error.code, response.error.message, response.error.data)

    content = response.result.content if response.result is not None else None
    if content is None:
        raise MCPNoContentError()

    return TEXT_SEPARATOR.join(
        item.text for item in content if item.type == "text" and isinstance(item.text, str)
    )
