"""Tests for the exa-search command line interface."""
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner

from exa_search.__main__ import cli
from exa_search.mcp_client.exceptions import MCPHTTPError
from exa_search.models.mcp import RemoteToolDescriptor


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("exa_search.__main__.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def mock_client():
    """Patches the HTTP client class used by the CLI and yields the instance."""
    instance = MagicMock()
    instance.__aenter__ = AsyncMock(return_value=instance)
    instance.__aexit__ = AsyncMock(return_value=False)
    instance.call_tool = AsyncMock(return_value="search results")
    instance.list_tools = AsyncMock(return_value=[])
    with patch("exa_search.__main__.HTTPMCPClient", return_value=instance):
        yield instance


def test_web_search_prints_text(runner, mock_client):
    result = runner.invoke(cli, ["web", "model context protocol", "--num-results", "3"])

    assert result.exit_code == 0
    assert "search results" in result.output
    mock_client.call_tool.assert_awaited_once_with(
        "web_search_exa", {"query": "model context protocol", "numResults": 3}
    )


def test_financial_search_maps_dates(runner, mock_client):
    result = runner.invoke(cli, ["financial", "Tesla annual report", "--start-date", "2024-01-01"])

    assert result.exit_code == 0
    mock_client.call_tool.assert_awaited_once_with("web_search_advanced_exa", {
        "query": "Tesla annual report",
        "category": "financial report",
        "numResults": 10,
        "startPublishedDate": "2024-01-01",
    })


def test_company_search_uses_company_name(runner, mock_client):
    runner.invoke(cli, ["company", "Exa"])
    mock_client.call_tool.assert_awaited_once_with("company_research_exa", {"companyName": "Exa"})


def test_failure_is_reported_as_error_text(runner, mock_client):
    mock_client.call_tool.side_effect = MCPHTTPError(503, "Service Unavailable")

    result = runner.invoke(cli, ["people", "CTO"])

    assert result.exit_code == 1
    assert "Error: HTTP error: 503 Service Unavailable" in result.output


def test_tools_lists_remote_tools(runner, mock_client):
    mock_client.list_tools.return_value = [
        RemoteToolDescriptor(name="web_search_exa", description="Search the web"),
    ]
    result = runner.invoke(cli, ["tools"])

    assert result.exit_code == 0
    assert "web_search_exa: Search the web" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["version"])
    assert result.exit_code == 0
    assert "Exa Search v" in result.output


def test_config_show_with_file(runner, tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"agent_name": "FromFile"}))

    result = runner.invoke(cli, ["--config-file", str(config_file), "config-show"])

    assert result.exit_code == 0
    shown = json.loads(result.output)
    assert shown["agent_name"] == "FromFile"
    assert shown["exa"]["request_timeout_seconds"] == 30.0


def test_log_level_override(runner, no_logging_setup):
    result = runner.invoke(cli, ["--log-level", "debug", "version"])
    assert result.exit_code == 0
    assert no_logging_setup.call_args[0][0].level == "DEBUG"
