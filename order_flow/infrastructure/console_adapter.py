"""Console adapter implementation using Rich library."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


class ConsoleAdapter:
    """Adapter for console operations using Rich library.

    Plain messages are written literally, so product names containing square
    brackets are never parsed as markup.
    """

    def __init__(self, console: Console | None = None):
        """Initialize console adapter.

        Args:
            console: Optional Rich console instance
        """
        self._console = console or Console(highlight=False, soft_wrap=True)

    def print(self, message: str) -> None:
        """Print a message to the console."""
        self._console.print(Text(message))

    def print_error(self, message: str) -> None:
        """Print an error message to the console."""
        self._console.print(Text.assemble(("Error:", "red bold"), " ", message))
