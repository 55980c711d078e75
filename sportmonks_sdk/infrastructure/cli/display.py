import logging
from typing import Any, Dict, List, Optional

from rich.box import HEAVY, ROUNDED, SIMPLE
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sportmonks_sdk.domain.interfaces.user_interface import UserInterface
from sportmonks_sdk.domain.models.response import PaginatedResponse, ResponseEnvelope

logger = logging.getLogger(__name__)

MAX_COLUMNS = 8
PREFERRED_COLUMNS = ("id", "name", "common_name", "short_code", "starting_at", "date", "result_info")


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def _columns_for(items: List[Dict[str, Any]]) -> List[str]:
    """Picks up to MAX_COLUMNS scalar keys, well-known keys first."""
    keys: List[str] = []
    for item in items:
        for key, value in item.items():
            if key not in keys and _is_scalar(value):
                keys.append(key)
    ordered = [key for key in PREFERRED_COLUMNS if key in keys]
    ordered += [key for key in keys if key not in ordered]
    return ordered[:MAX_COLUMNS]


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    @property
    def console(self) -> Console:
        """Get the Rich console instance for direct operations."""
        return self._console

    def display_response(self, response: ResponseEnvelope, as_json: bool = False, **kwargs: Any) -> None:
        """Renders an envelope as a table (or JSON) followed by a metadata footer.

        Args:
            response: The decoded response envelope.
            as_json: Print the raw body as pretty JSON instead.
            **kwargs: ``title`` for the table.
        """
        if as_json:
            self.console.print_json(data=response.raw or {"data": response.data}, default=str)
            return

        data = response.data
        items = data if isinstance(data, list) else ([data] if data is not None else [])
        self.display_items(items, title=kwargs.get("title"))

        footer: List[str] = []
        if isinstance(response, PaginatedResponse):
            pagination = response.pagination
            more = "more pages available" if pagination.has_more else "last page"
            footer.append(f"Page {pagination.current_page} ({pagination.count} items, {more})")
        if response.rate_limit is not None and response.rate_limit.remaining is not None:
            footer.append(
                f"Rate limit: {response.rate_limit.remaining} remaining, "
                f"resets in {response.rate_limit.resets_in_seconds}s"
            )
        if footer:
            self.console.print(Text(" | ".join(footer), style="dim"))

    def display_items(self, items: List[Any], as_json: bool = False, title: Optional[str] = None) -> None:
        if as_json:
            self.console.print_json(data=items, default=str)
            return
        if not items:
            self.display_info("No results.")
            return

        entities = [item for item in items if isinstance(item, dict)]
        if not entities:
            for item in items:
                self.console.print(str(item))
            return

        columns = _columns_for(entities)
        table = Table(title=title, box=ROUNDED, border_style="cyan", header_style="bold cyan")
        for column in columns:
            table.add_column(column, overflow="fold")
        for entity in entities:
            table.add_row(*("" if entity.get(c) is None else str(entity.get(c)) for c in columns))
        self.console.print(table)
        logger.debug(f"Displayed table with {len(entities)} rows and {len(columns)} columns")

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message in a distinct style."""
        panel = Panel(
            Text(error_message, style="white"),
            title="[bold red]Error[/bold red]",
            border_style="red",
            box=HEAVY,
            padding=(0, 1)
        )
        self.console.print(panel)

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        panel = Panel(
            Text(info_message, style="white"),
            title="[bold blue]Info[/bold blue]",
            border_style="blue",
            box=SIMPLE,
            padding=(0, 1)
        )
        self.console.print(panel)
