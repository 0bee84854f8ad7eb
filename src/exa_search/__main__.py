"""CLI entry point for Exa Search."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click

from .config import Config
from .mcp_client.exceptions import MCPClientError
from .mcp_client.http_client import HTTPMCPClient
from .tools import search
from .tools.registry import ToolHandler
from .utils.logging import configure_logging


def _params(**values: Any) -> Dict[str, Any]:
    """Drop options the user did not pass so the remote tool applies its defaults."""
    return {key: value for key, value in values.items() if value is not None}


def _run_search(ctx: click.Context, handler: ToolHandler, params: Dict[str, Any]) -> None:
    config: Config = ctx.obj["config"]

    async def run() -> str:
        async with HTTPMCPClient(config) as client:
            return await handler(client, params)

    try:
        text = asyncio.run(run())
    except MCPClientError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nSearch interrupted by user.", err=True)
        sys.exit(130)
    click.echo(text)


@click.group()
@click.option(
    "--config-file", "-c",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Path to a JSON configuration file.",
    envvar="EXA_SEARCH_CONFIG_FILE"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None, # Falls back to the Config default
    help="Override the logging level (e.g., DEBUG, INFO).",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Override logging format.",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], log_level: Optional[str], log_format: Optional[str]) -> None:
    """Exa Search - query Exa's hosted MCP search tools."""
    try:
        if config_file:
            cfg = Config.from_file(Path(config_file))
        else:
            # Environment variables (and .env if present)
            cfg = Config()
    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if log_level:
        cfg.logging.level = log_level.upper()
    if log_format:
        cfg.logging.format = log_format.lower()

    configure_logging(cfg.logging)
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command()
@click.argument("query")
@click.option("--num-results", "-n", type=int, default=None, help="Number of results to return.")
@click.option("--type", "search_type", type=click.Choice(["auto", "fast", "deep"]), default=None, help="Search type.")
@click.option("--livecrawl", type=click.Choice(["fallback", "preferred"]), default=None, help="Live crawl mode.")
@click.pass_context
def web(ctx: click.Context, query: str, num_results: Optional[int], search_type: Optional[str], livecrawl: Optional[str]) -> None:
    """Search the web."""
    _run_search(ctx, search.web_search, _params(query=query, numResults=num_results, type=search_type, livecrawl=livecrawl))


@cli.command()
@click.argument("query")
@click.option("--tokens-num", type=int, default=None, help="Number of tokens to return (1000-50000).")
@click.pass_context
def code(ctx: click.Context, query: str, tokens_num: Optional[int]) -> None:
    """Find code examples and documentation."""
    _run_search(ctx, search.code_search, _params(query=query, tokensNum=tokens_num))


@cli.command()
@click.argument("company_name")
@click.option("--num-results", "-n", type=int, default=None, help="Number of results to return.")
@click.pass_context
def company(ctx: click.Context, company_name: str, num_results: Optional[int]) -> None:
    """Research a company."""
    _run_search(ctx, search.company_research, _params(companyName=company_name, numResults=num_results))


@cli.command()
@click.argument("query")
@click.option("--num-results", "-n", type=int, default=None, help="Number of tweets to return (default: 10).")
@click.option("--start-date", default=None, help="Only posts published after this ISO 8601 date.")
@click.option("--end-date", default=None, help="Only posts published before this ISO 8601 date.")
@click.pass_context
def twitter(ctx: click.Context, query: str, num_results: Optional[int], start_date: Optional[str], end_date: Optional[str]) -> None:
    """Search Twitter/X posts."""
    _run_search(ctx, search.twitter_search, _params(
        query=query, numResults=num_results, startPublishedDate=start_date, endPublishedDate=end_date,
    ))


@cli.command()
@click.argument("query")
@click.option("--num-results", "-n", type=int, default=None, help="Number of results to return.")
@click.pass_context
def people(ctx: click.Context, query: str, num_results: Optional[int]) -> None:
    """Find people and professional profiles."""
    _run_search(ctx, search.people_search, _params(query=query, numResults=num_results))


@cli.command()
@click.argument("query")
@click.option("--num-results", "-n", type=int, default=None, help="Number of reports to return (default: 10).")
@click.option("--start-date", default=None, help="Only reports published after this ISO 8601 date.")
@click.option("--end-date", default=None, help="Only reports published before this ISO 8601 date.")
@click.pass_context
def financial(ctx: click.Context, query: str, num_results: Optional[int], start_date: Optional[str], end_date: Optional[str]) -> None:
    """Search financial reports and SEC filings."""
    _run_search(ctx, search.financial_search, _params(
        query=query, numResults=num_results, startPublishedDate=start_date, endPublishedDate=end_date,
    ))


@cli.command()
@click.pass_context
def tools(ctx: click.Context) -> None:
    """List the tools exposed by the remote endpoint."""
    config: Config = ctx.obj["config"]

    async def run():
        async with HTTPMCPClient(config) as client:
            return await client.list_tools()

    try:
        descriptors = asyncio.run(run())
    except MCPClientError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not descriptors:
        click.echo("No tools reported by the server.")
    for tool in descriptors:
        click.echo(f"{tool.name}: {tool.description}")


@cli.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    click.echo(f"Exa Search v{__version__}")


@cli.command()
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    config: Config = ctx.obj["config"]
    click.echo(json.dumps(config.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    cli()
