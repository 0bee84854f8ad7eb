"""
Unit tests for response body decoding (plain JSON vs. event stream).
"""
import json

import pytest

from exa_search.mcp_client.decoder import (
    DecodeKind,
    decode_response,
    parse_sse_response,
    sse_data_lines,
)
from exa_search.mcp_client.exceptions import MCPNoDataFieldError, MCPProtocolError


def test_parse_sse_single_data_line_returns_payload_exactly():
    sse = 'event: message\ndata: {"jsonrpc":"2.0","id":1,"result":{}}\n\n'
    assert parse_sse_response(sse) == '{"jsonrpc":"2.0","id":1,"result":{}}'


def test_parse_sse_without_data_lines_raises():
    with pytest.raises(MCPNoDataFieldError, match="No data: field found"):
        parse_sse_response("event: message\n")


def test_no_data_field_is_a_protocol_error():
    with pytest.raises(MCPProtocolError):
        parse_sse_response("")


def test_parse_sse_prefers_last_valid_json_line():
    first = '{"jsonrpc":"2.0","id":1,"result":{"content":[]}}'
    last = '{"jsonrpc":"2.0","id":1,"result":{"content":[{"type":"text","text":"final"}]}}'
    result = parse_sse_response(f"data: {first}\ndata: {last}\n")
    assert json.loads(result)["result"]["content"][0]["text"] == "final"


def test_parse_sse_skips_trailing_invalid_lines():
    # The last parseable candidate wins, not the last candidate overall
    sse = 'data: {"a": 1}\ndata: {"b": 2}\ndata: not-json\n'
    assert parse_sse_response(sse) == '{"b": 2}'


def test_parse_sse_falls_back_to_concatenation():
    sse = "data: not-json-a\ndata: not-json-b\n"
    assert parse_sse_response(sse) == "not-json-anot-json-b"


def test_sse_data_lines_ignores_other_fields_and_crlf():
    sse = "id: 7\r\nevent: message\r\ndata: {\"x\": 1}\r\nretry: 100\r\ndata:{\"y\": 2}\r\n"
    assert sse_data_lines(sse) == ['{"x": 1}', '{"y": 2}']


def test_decode_response_plain_json():
    body = '{"jsonrpc":"2.0","id":3,"result":{"content":[]}}'
    outcome = decode_response(body)
    assert outcome.kind is DecodeKind.JSON
    assert outcome.payload["id"] == 3


def test_decode_response_event_stream():
    body = 'event: message\ndata: {"jsonrpc":"2.0","id":1,"result":{"content":[{"type":"text","text":"sse"}]}}\n\n'
    outcome = decode_response(body)
    assert outcome.kind is DecodeKind.SSE
    assert outcome.payload["result"]["content"][0]["text"] == "sse"


def test_decode_response_unparseable_stream():
    outcome = decode_response("data: nope\ndata: still nope\n")
    assert outcome.kind is DecodeKind.UNPARSEABLE
    assert outcome.payload is None
    assert outcome.raw == "nopestill nope"
    assert outcome.error


def test_decode_response_propagates_missing_data_field():
    with pytest.raises(MCPNoDataFieldError):
        decode_response("<html>Bad Gateway</html>")


def test_parse_sse_skips_non_standard_constants():
    assert parse_sse_response('data: {"a": 1}\ndata: NaN\n') == '{"a": 1}'
    assert parse_sse_response('data: {"a": 1}\ndata: -Infinity\n') == '{"a": 1}'


def test_decode_response_rejects_bare_constants():
    outcome = decode_response("data: Infinity\n")
    assert outcome.kind is DecodeKind.UNPARSEABLE
    assert "Infinity" in outcome.error

    with pytest.raises(MCPNoDataFieldError):
        decode_response("NaN")


def test_decode_response_rejects_constants_nested_in_json():
    outcome = decode_response('data: {"score": NaN}\n')
    assert outcome.kind is DecodeKind.UNPARSEABLE
