"""Shared test helpers for the Exa Search tests."""
import json
from typing import Any

from exa_search.mcp_client.base_client import BaseMCPClient


class CannedClient(BaseMCPClient):
    """Replays canned response bodies instead of talking HTTP."""

    def __init__(self, *bodies: str):
        super().__init__()
        self.bodies = list(bodies)
        self.sent: list[dict[str, Any]] = []
        self.closed = False

    async def _send_request_raw(self, request_payload: dict[str, Any]) -> str:
        self.sent.append(request_payload)
        return self.bodies.pop(0)

    async def close(self) -> None:
        self.closed = True


def success_body(*texts: str, request_id: int = 1) -> str:
    return json.dumps({
        "jsonrpc": "2.0",
        "id": request_id,
        "result": {"content": [{"type": "text", "text": t} for t in texts]},
    })

