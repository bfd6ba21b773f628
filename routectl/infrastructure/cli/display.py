import logging
from typing import Any, List, Optional

from rich.box import SIMPLE
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from routectl.domain.interfaces.user_interface import UserInterface
from routectl.domain.models.resources import Route

logger = logging.getLogger(__name__)


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output.

    Regular output goes to stdout; warnings and errors go to stderr so that
    command output stays pipeable.
    """

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        """Initializes the rich Consoles."""
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        logger.debug(f"Display error: {error_message}")
        self.err_console.print(f"[bold red]FAILED[/bold red] {escape(error_message)}")

    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        self.err_console.print(Text(warning_message, style="yellow"))

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        self.console.print(info_message)

    def display_routes(self, routes: List[Route], **kwargs: Any) -> None:
        """Displays routes as a table.

        Args:
            routes: The enriched routes to display.
            **kwargs: Additional arguments including:
                - title: Table title (default: none)
        """
        logger.debug(f"Displaying {len(routes)} route(s)")
        table = Table(title=kwargs.get("title"), box=SIMPLE, header_style="bold", padding=(0, 1))
        table.add_column("space")
        table.add_column("host")
        table.add_column("domain")
        table.add_column("path")
        for route in routes:
            table.add_row(route.space_name, route.host, route.domain_name, route.path)
        self.console.print(table)
