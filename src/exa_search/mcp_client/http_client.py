"""
MCP Client implementation using HTTP/HTTPS transport.
"""
from typing import Any

import aiohttp
import structlog

from ..config import Config
from .base_client import BaseMCPClient
from .exceptions import (
    MCPConnectionError,
    MCPHTTPError,
    MCPProtocolError,
    MCPTimeoutError,
)

logger = structlog.get_logger(__name__)

ACCEPT_HEADER = "application/json, text/event-stream"

class HTTPMCPClient(BaseMCPClient):
    """
    MCP Client that talks to the hosted Exa endpoint over HTTPS.
    It uses aiohttp.ClientSession for making asynchronous HTTP requests.

    Usage::

        async with HTTPMCPClient(Config()) as client:
            text = await client.call_tool("web_search_exa", {"query": "mcp"})
    """

    def __init__(self, config: Config | None = None, aiohttp_session: aiohttp.ClientSession | None = None):
        super().__init__()
        self.config = config or Config()
        self.exa_config = self.config.exa
        self.endpoint_url = self.exa_config.endpoint_url
        self._session = aiohttp_session
        self._owns_session = aiohttp_session is None # An injected session is closed by whoever passed it in
        self.logger = logger.bind(server_endpoint=str(self.exa_config.base_url), transport="http")

    async def _get_session(self) -> aiohttp.ClientSession:
        """
        Returns the current aiohttp session or creates a new one if none exists.
        The session only pools connections; each request is an independent exchange.
        """
        if self._session is None or self._session.closed:
            self.logger.info("No existing aiohttp session or session closed, creating a new one.")
            ssl_context = None
            if not self.exa_config.ssl_verify:
                self.logger.warning("SSL verification is DISABLED for HTTP client. This is insecure for production.")
                ssl_context = False # Tells aiohttp to skip verification

            connector = aiohttp.TCPConnector(
                limit=self.exa_config.connection_pool_total_limit,
                limit_per_host=self.exa_config.connection_pool_per_host_limit,
                ssl=ssl_context
            )
            self._session = aiohttp.ClientSession(connector=connector)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Closes the aiohttp session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self.logger.debug("HTTP client session closed.")
        self._session = None

    async def _send_request_raw(self, request_payload: dict[str, Any]) -> str:
        session = await self._get_session()
        from .. import __version__

        headers = {
            "Content-Type": "application/json",
            "Accept": ACCEPT_HEADER,
            "User-Agent": f"{self.config.agent_name}/{__version__}",
        }

        request_timeout_seconds = self.exa_config.request_timeout_seconds
        # The total deadline is armed when the request starts and released when the context exits
        timeout = aiohttp.ClientTimeout(total=request_timeout_seconds)

        self.logger.debug("Sending HTTP JSONRPC request", method=request_payload.get("method"), request_id=request_payload.get("id"))
        try:
            async with session.post(
                self.endpoint_url,
                json=request_payload,
                headers=headers,
                timeout=timeout,
            ) as response:
                try:
                    response_text = await response.text()
                except UnicodeDecodeError as e:
                    self.logger.error("Response body could not be decoded", status=response.status, charset=response.charset)
                    if not 200 <= response.status < 300:
                        raise MCPHTTPError(response.status, response.reason) from e
                    raise MCPProtocolError(f"Failed to decode response body: {e}") from e
                self.logger.debug("Received HTTP response", status=response.status, content_length=len(response_text))

                if not 200 <= response.status < 300:
                    self.logger.error("HTTP error status received", status=response.status, reason=response.reason, response_body=response_text[:500])
                    raise MCPHTTPError(response.status, response.reason)

                return response_text

        except aiohttp.ClientConnectorError as e:
            self.logger.error("Client connector error", error_os_error=e.os_error, error_str=str(e))
            raise MCPConnectionError(f"Connection failed to {self.endpoint_url}: {e.os_error or str(e)}") from e
        except TimeoutError as e: # Also covers aiohttp.ServerTimeoutError
            self.logger.error("Request timed out", timeout_total=request_timeout_seconds)
            raise MCPTimeoutError(request_timeout_seconds) from e
        except aiohttp.ClientError as e:
            self.logger.error("AIOHTTP client error", error_type=type(e).__name__, error_message=str(e))
            raise MCPConnectionError(f"HTTP client error for {self.endpoint_url}: {e}") from e
