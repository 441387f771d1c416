"""Console port for user interface operations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Port for console/terminal operations."""

    def print(self, message: str) -> None:
        """Print a message to the console.

        Args:
            message: Message to print, written literally
        """
        ...

    def print_error(self, message: str) -> None:
        """Print an error message to the console.

        Args:
            message: Error message to print
        """
        ...
