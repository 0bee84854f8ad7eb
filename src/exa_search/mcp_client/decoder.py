"""
Response body decoding.

The endpoint answers either with a single JSON document or with a
``text/event-stream`` body, depending on server-side buffering. Decoding is a
two-stage pipeline: strict JSON first, then recovery of the JSON payload from
the stream's ``data:`` lines.
"""
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import MCPNoDataFieldError

SSE_DATA_MARKER = "data:"


class DecodeKind(str, Enum):
    JSON = "json"
    SSE = "sse"
    UNPARSEABLE = "unparseable"


@dataclass(frozen=True)
class DecodeOutcome:
    kind: DecodeKind
    payload: Any = None # Parsed JSON value; None when UNPARSEABLE
    raw: str = "" # Text that was handed to the final JSON parse
    error: str | None = None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def _loads(text: str) -> Any:
    """Strict RFC 8259 parse: NaN and Infinity are not JSON."""
    return json.loads(text, parse_constant=_reject_constant)


def _try_json(text: str) -> tuple[bool, Any]:
    try:
        return True, _loads(text)
    except ValueError:
        return False, None


def sse_data_lines(text: str) -> list[str]:
    """Payloads of every ``data:`` line, in stream order. Other SSE fields are ignored."""
    candidates: list[str] = []
    for line in text.split("\n"):
        line = line.rstrip("\r")
        if not line.startswith(SSE_DATA_MARKER):
            continue
        value = line[len(SSE_DATA_MARKER):]
        if value.startswith(" "):
            value = value[1:]
        candidates.append(value)
    return candidates


def parse_sse_response(text: str) -> str:
    """
    Recover the JSON-RPC message carried by an event-stream body.

    Later events supersede earlier partial ones, so candidates are scanned from
    last to first and the first syntactically valid JSON payload wins. When no
    payload parses, all of them are concatenated in stream order and returned;
    the caller's JSON parse of that string is then expected to fail.

    Raises:
        MCPNoDataFieldError: the body has no ``data:`` lines.
    """
    candidates = sse_data_lines(text)
    if not candidates:
        raise MCPNoDataFieldError()
    for candidate in reversed(candidates):
        ok, _ = _try_json(candidate)
        if ok:
            return candidate
    return "".join(candidates)


def decode_response(text: str) -> DecodeOutcome:
    """Decode a raw response body into a three-way :class:`DecodeOutcome`."""
    ok, payload = _try_json(text)
    if ok:
        return DecodeOutcome(DecodeKind.JSON, payload, text)

    recovered = parse_sse_response(text)
    try:
        return DecodeOutcome(DecodeKind.SSE, _loads(recovered), recovered)
    except ValueError as e:
        return DecodeOutcome(DecodeKind.UNPARSEABLE, None, recovered, str(e))
