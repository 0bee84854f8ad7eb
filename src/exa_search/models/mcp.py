"""
JSON-RPC 2.0 envelopes and MCP payloads exchanged with the Exa endpoint.

Responses are a tagged union: an object with an ``error`` member is a
:class:`JsonRpcFailure`, anything else a :class:`JsonRpcSuccess`.
"""
from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag, TypeAdapter

from .common import BasePydanticModel, WireModel

JSONRPC_VERSION = "2.0"


class JsonRpcRequest(BasePydanticModel):
    jsonrpc: str = JSONRPC_VERSION
    id: int = Field(..., gt=0)
    method: str
    params: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Wire representation; ``params`` is left out entirely when unset."""
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id, "method": self.method}
        if self.params is not None:
            payload["params"] = self.params
        return payload


class ContentItem(WireModel):
    # Only text items are read; other kinds pass through with whatever shape the server sent
    type: str | None = None
    text: Any = None


class RemoteToolDescriptor(WireModel):
    name: str
    description: str = ""
    input_schema: dict[str, Any] | None = Field(None, alias="inputSchema")


class ToolCallResult(WireModel):
    # None means the server omitted the field, which is distinct from an empty list
    content: list[ContentItem] | None = None
    tools: list[RemoteToolDescriptor] | None = None


class JsonRpcErrorDetail(WireModel):
    code: int
    message: str
    data: Any = None


class JsonRpcSuccess(WireModel):
    jsonrpc: str = JSONRPC_VERSION
    id: int | str | None = None
    result: ToolCallResult | None = None


class JsonRpcFailure(WireModel):
    jsonrpc: str = JSONRPC_VERSION
    id: int | str | None = None
    error: JsonRpcErrorDetail


def _response_kind(value: Any) -> str | None:
    if isinstance(value, dict):
        return "failure" if "error" in value else "success"
    if isinstance(value, JsonRpcFailure):
        return "failure"
    if isinstance(value, JsonRpcSuccess):
        return "success"
    return None


JsonRpcResponse = Annotated[
    Union[
        Annotated[JsonRpcSuccess, Tag("success")],
        Annotated[JsonRpcFailure, Tag("failure")],
    ],
    Discriminator(_response_kind),
]

_response_adapter: TypeAdapter[JsonRpcSuccess | JsonRpcFailure] = TypeAdapter(JsonRpcResponse)


def parse_response_envelope(data: Any) -> JsonRpcSuccess | JsonRpcFailure:
    """Validate decoded JSON into a response envelope.

    Raises ``pydantic.ValidationError`` when the value fits neither variant.
    """
    return _response_adapter.validate_python(data)


class ToolExecutionResult(BasePydanticModel):
    """Payload handed back to a host tool registry after an execute call."""
    content: list[ContentItem]
    is_error: bool | None = Field(None, alias="isError")

    @classmethod
    def from_text(cls, text: str) -> "ToolExecutionResult":
        return cls(content=[ContentItem(type="text", text=text)])

    @classmethod
    def from_error(cls, message: str) -> "ToolExecutionResult":
        return cls(content=[ContentItem(type="text", text=f"Error: {message}")], is_error=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
