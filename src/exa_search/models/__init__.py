"""
Pydantic models for Exa Search.
"""
from .common import BasePydanticModel, WireModel
from .mcp import (
    ContentItem,
    JsonRpcErrorDetail,
    JsonRpcFailure,
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcSuccess,
    RemoteToolDescriptor,
    ToolCallResult,
    ToolExecutionResult,
    parse_response_envelope,
)

__all__ = [
    "BasePydanticModel",
    "ContentItem",
    "JsonRpcErrorDetail",
    "JsonRpcFailure",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcSuccess",
    "RemoteToolDescriptor",
    "ToolCallResult",
    "ToolExecutionResult",
    "WireModel",
    "parse_response_envelope",
]
