"""Configuration management for Exa Search."""

import json
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

EXA_BASE_URL = "https://mcp.exa.ai/mcp"

EXA_TOOLS = [
    "web_search_exa",
    "web_search_advanced_exa",
    "get_code_context_exa",
    "company_research_exa",
    "people_search_exa",
]


class ExaClientConfig(BaseModel): # Nested under Config (BaseSettings)
    """Configuration for the hosted Exa MCP endpoint."""

    base_url: HttpUrl = Field(default=EXA_BASE_URL, validate_default=True, description="Base URL of the hosted MCP endpoint.")
    enabled_tools: List[str] = Field(default_factory=lambda: list(EXA_TOOLS), description="Remote tool identifiers sent in the 'tools' query parameter.")
    request_timeout_seconds: float = Field(default=30.0, gt=0, description="Deadline for one request/response exchange.")
    ssl_verify: bool = Field(default=True, description="Enable/disable SSL certificate verification.")
    connection_pool_total_limit: int = Field(default=100, ge=1, description="Total connection pool limit for the aiohttp session.")
    connection_pool_per_host_limit: int = Field(default=30, ge=1, description="Per-host connection pool limit for the aiohttp session.")

    @property
    def endpoint_url(self) -> str:
        """Base URL with the tool allowlist appended as the 'tools' query parameter."""
        return f"{str(self.base_url).rstrip('/')}?tools={','.join(self.enabled_tools)}"


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format ('json' or 'console')")


class Config(BaseSettings):
    """Main configuration for Exa Search. Loads from environment variables prefixed with EXA_SEARCH_."""

    model_config = SettingsConfigDict(
        env_prefix='EXA_SEARCH_',
        env_nested_delimiter='__', # e.g., EXA_SEARCH_EXA__REQUEST_TIMEOUT_SECONDS
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    exa: ExaClientConfig = Field(default_factory=ExaClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    agent_name: str = Field(default="ExaSearch", description="Name sent in the User-Agent header.")

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file.
        Environment variables are not layered on top.
        """
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
