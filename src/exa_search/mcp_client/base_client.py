"""
Base MCP Client Abstract Class.
"""
import abc
import threading
from collections.abc import Mapping
from typing import Any, List

import structlog
from pydantic import ValidationError

from ..models.mcp import (
    JsonRpcFailure,
    JsonRpcRequest,
    JsonRpcSuccess,
    RemoteToolDescriptor,
    parse_response_envelope,
)
from .content import extract_text_content
from .decoder import DecodeKind, decode_response
from .exceptions import MCPAPIError, MCPNoDataFieldError, MCPProtocolError

TOOLS_CALL_METHOD = "tools/call"
TOOLS_LIST_METHOD = "tools/list"


class RequestIdCounter:
    """Strictly increasing JSON-RPC ids, safe to share between threads and tasks."""

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def current(self) -> int:
        return self._value


def generate_jsonrpc_request(method: str, params: Mapping[str, Any] | None, request_id: int) -> JsonRpcRequest:
    """Generates a JSONRPC 2.0 request envelope."""
    return JsonRpcRequest(
        id=request_id,
        method=method,
        params=dict(params) if params is not None else None,
    )


class BaseMCPClient(abc.ABC):
    """
    Abstract Base Class for an MCP (Model Context Protocol) client.

    Owns the request-id counter and the decode/validate/extract pipeline;
    transport-specific subclasses only implement :meth:`_send_request_raw`.
    Ids serve protocol conformance only: every call is an independent
    exchange and responses are never routed back by id.
    """

    def __init__(self) -> None:
        self._ids = RequestIdCounter()
        self.logger = structlog.get_logger(__name__)

    def build_request(self, method: str, params: Mapping[str, Any] | None = None) -> JsonRpcRequest:
        """Wrap a method and its params in an envelope with a fresh id."""
        return generate_jsonrpc_request(method, params, self._ids.next())

    @abc.abstractmethod
    async def _send_request_raw(self, request_payload: dict[str, Any]) -> str:
        """
        Sends a serialized JSON-RPC request and returns the raw response body.
        The body is returned unparsed: it may be plain JSON or an event stream.
        Implementations raise MCPTimeoutError when the deadline elapses and
        MCPHTTPError on a non-2xx status.
        """
        pass

    @abc.abstractmethod
    async def close(self) -> None:
        """Release transport resources owned by this client."""
        pass

    async def send_request(self, method: str, params: Mapping[str, Any] | None = None) -> JsonRpcSuccess | JsonRpcFailure:
        """
        Builds an envelope, sends it and decodes the response envelope.
        JSON-RPC error responses are returned, not raised; classifying them is
        left to the caller.
        """
        request = self.build_request(method, params)
        log = self.logger.bind(method=method, request_id=request.id)
        log.debug("Sending request.")

        raw = await self._send_request_raw(request.to_payload())

        try:
            outcome = decode_response(raw)
        except MCPNoDataFieldError:
            log.error("Response is neither JSON nor an event stream with data lines.", response_text=raw[:500])
            raise
        log.debug("Decoded response body.", decode_kind=outcome.kind.value)

        if outcome.kind is DecodeKind.UNPARSEABLE:
            log.error("Failed to decode JSON response", error=outcome.error, response_text=raw[:500])
            raise MCPProtocolError(f"Failed to decode JSON response from server: {outcome.error}")

        try:
            return parse_response_envelope(outcome.payload)
        except ValidationError as e:
            log.error("Malformed JSON-RPC response envelope", errors=e.error_count(), response_text=outcome.raw[:500])
            raise MCPProtocolError(f"Malformed response envelope: {e.error_count()} validation error(s)") from e

    async def call_tool(self, tool_name: str, arguments: Mapping[str, Any]) -> str:
        """
        Invokes a remote tool via ``tools/call`` and returns its text content.
        Client-side validation of the arguments is the caller's job.
        """
        response = await self.send_request(
            TOOLS_CALL_METHOD,
            {"name": tool_name, "arguments": dict(arguments)},
        )
        if isinstance(response, JsonRpcFailure):
            self.logger.warning("Tool call returned a JSON-RPC error.", tool=tool_name, code=response.error.code, msg=response.error.message)
        return extract_text_content(response)

    async def list_tools(self) -> List[RemoteToolDescriptor]:
        """Lists the tools the server exposes via ``tools/list``."""
        response = await self.send_request(TOOLS_LIST_METHOD)
        if isinstance(response, JsonRpcFailure):
            raise MCPAPIError(response.error.code, response.error.message, response.error.data)
        if response.result is None:
            return []
        return list(response.result.tools or [])

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
