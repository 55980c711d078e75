"""Main entry point for the sportmonks-sdk command line tool.

Sets up the Typer CLI application, wires configuration, logging and the
client together (Composition Root), and renders results with ConsoleDisplay.

    sportmonks-sdk query /football/teams/search/Arsenal --include country --json
    sportmonks-sdk query /football/fixtures --filter fixtureLeagues=8,9 --sort -starting_at --all
"""

import asyncio
import logging
from typing import Annotated, Any, Coroutine, List, Optional

import typer

from sportmonks_sdk.core.client import SportMonksClient
from sportmonks_sdk.core.parameter_encoder import VALUE_SEPARATOR, parse_include_argument
from sportmonks_sdk.core.query_builder import QueryBuilder
from sportmonks_sdk.domain.errors import SportMonksError
from sportmonks_sdk.infrastructure.cli.display import ConsoleDisplay
from sportmonks_sdk.infrastructure.config.settings import (
    API_TOKEN_KEY, get_api_token, get_client_options, get_config, load_configuration
)
from sportmonks_sdk.infrastructure.monitoring.logger_setup import DEFAULT_LOG_FORMAT, setup_logging

logger = logging.getLogger(__name__)

ui = ConsoleDisplay()

# --- Typer App Definition ---
app = typer.Typer(
    name="sportmonks-sdk",
    help="Query the SportMonks Football API v3 from the command line.",
    add_completion=False,
)


# --- Helpers ---

def run_async(coro: Coroutine[Any, Any, None]) -> None:
    """Runs an async command body, turning API errors into exit code 1."""
    try:
        asyncio.run(coro)
    except SportMonksError as e:
        logger.debug(f"Command failed: kind={e.kind.value} status={e.status_code}")
        details = f" (HTTP {e.status_code})" if e.status_code else ""
        ui.display_error(f"{e.message}{details}")
        raise typer.Exit(code=1)


def create_client() -> SportMonksClient:
    """Builds a client from the loaded configuration."""
    token = get_api_token()
    if not token:
        ui.display_error("SportMonks API token not found. Set SPORTMONKS_API_TOKEN or sportmonks.api_token.")
        raise typer.Exit(code=1)
    return SportMonksClient(api_token=token, options=get_client_options())


def parse_filter_argument(value: str) -> tuple:
    """Splits 'key=v1,v2' into ('key', 'v1') or ('key', ['v1', 'v2'])."""
    key, sep, raw = value.partition("=")
    if not sep or not key.strip() or not raw.strip():
        raise typer.BadParameter(f"Invalid filter '{value}'. Expected key=value[,value]")
    values = [v.strip() for v in raw.split(VALUE_SEPARATOR) if v.strip()]
    return key.strip(), values if len(values) > 1 else values[0]


def apply_options(
    builder: QueryBuilder,
    include: Optional[List[str]] = None,
    select: Optional[List[str]] = None,
    filters: Optional[List[str]] = None,
    sort: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> QueryBuilder:
    for item in include or []:
        path, fields = parse_include_argument(item)
        if fields:
            builder.include_fields(path, fields)
        else:
            builder.include(path)
    for item in select or []:
        builder.select([name.strip() for name in item.split(VALUE_SEPARATOR) if name.strip()])
    for item in filters or []:
        key, value = parse_filter_argument(item)
        builder.filter(key, value)
    if sort:
        if sort.startswith("-"):
            builder.order_by(sort[1:], "desc")
        else:
            builder.order_by(sort)
    if page is not None:
        builder.page(page)
    if per_page is not None:
        builder.per_page(per_page)
    return builder


async def _execute(client: SportMonksClient, builder: QueryBuilder, fetch_all: bool, as_json: bool) -> None:
    async with client:
        if fetch_all:
            items = await builder.get_all()
            ui.display_items(items, as_json=as_json, title=builder.path)
            if not as_json:
                ui.console.print(f"[dim]{len(items)} items[/dim]")
        else:
            response = await builder.get()
            ui.display_response(response, as_json=as_json, title=builder.path)


# --- CLI Commands ---

@app.command()
def query(
    path: Annotated[str, typer.Argument(help="Path below the base URL, e.g. /football/teams/1.")],
    include: Annotated[Optional[List[str]], typer.Option(
        "--include", "-i", help="Relation to include, optionally 'relation:field1,field2'. Repeatable.")] = None,
    select: Annotated[Optional[List[str]], typer.Option(
        "--select", "-s", help="Field(s) to select, comma separated. Repeatable.")] = None,
    filter_: Annotated[Optional[List[str]], typer.Option(
        "--filter", "-f", help="Filter as key=value[,value]. Repeatable.")] = None,
    sort: Annotated[Optional[str], typer.Option(
        "--sort", help="Sort field; prefix with '-' for descending.")] = None,
    page: Annotated[Optional[int], typer.Option("--page", help="Page number.")] = None,
    per_page: Annotated[Optional[int], typer.Option("--per-page", help="Results per page (1-100).")] = None,
    fetch_all: Annotated[bool, typer.Option("--all", help="Follow pagination and fetch every page.")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON instead of a table.")] = False,
):
    """Run a GET request against any API path."""
    if not path.startswith("/"):
        path = f"/{path}"
    client = create_client()
    try:
        builder = apply_options(
            client.endpoint(path).query(), include, select, filter_, sort, page, per_page
        )
    except SportMonksError as e:
        asyncio.run(client.aclose())
        ui.display_error(e.message)
        raise typer.Exit(code=1)
    except typer.BadParameter:
        asyncio.run(client.aclose())
        raise
    logger.info(f"Querying {builder.path} with {builder.build_params()}")
    run_async(_execute(client, builder, fetch_all, as_json))


@app.command(name="show-config")
def show_config_command():
    """Show the effective client configuration (the token is masked)."""
    options = get_client_options()
    token = get_api_token()
    masked = f"{token[:4]}...{token[-2:]}" if token and len(token) > 8 else ("set" if token else "not set")
    rows = [
        (API_TOKEN_KEY, masked),
        ("sportmonks.base_url", options.base_url),
        ("sportmonks.timeout", f"{options.timeout}s"),
        ("sportmonks.include_separator", options.include_separator),
        ("sportmonks.retry.max_retries", str(options.retry.max_retries)),
        ("sportmonks.retry.base_delay", f"{options.retry.base_delay}s"),
        ("sportmonks.retry.max_delay", f"{options.retry.max_delay}s"),
        ("sportmonks.retry.on_rate_limit", str(options.retry.retry_on_rate_limit)),
        ("sportmonks.retry.status_codes", ",".join(str(c) for c in options.retry.retry_status_codes)),
        ("sportmonks.rate_limit.enabled", str(options.rate_limiter is not None)),
    ]
    ui.display_items([{"key": key, "value": value} for key, value in rows], title="Configuration")


@app.callback()
def main_callback(
    log_level: Annotated[Optional[str], typer.Option(
        "--log-level", help="Logging level (debug, info, warning, error).")] = None,
):
    """Load configuration and set up logging before any command runs."""
    load_configuration()
    setup_logging(
        log_level=log_level or get_config("logging.level", "WARNING"),
        log_format=get_config("logging.format", DEFAULT_LOG_FORMAT),
        log_file=get_config("logging.file"),
    )


# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()


if __name__ == "__main__":
    cli_entry_point()
