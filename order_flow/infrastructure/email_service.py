"""E-mail sender adapter that writes notifications to the console."""

from __future__ import annotations

from order_flow.ports.console import ConsolePort
from order_flow.ports.logger import LoggerPort


class ConsoleEmailService:
    """Stand-in for real e-mail delivery.

    Each send writes one line describing the delivery. It never fails.
    """

    def __init__(self, console: ConsolePort, logger: LoggerPort | None = None):
        """Initialize the e-mail service.

        Args:
            console: Console port the notification line is written to
            logger: Optional logger port
        """
        self._console = console
        self._logger = logger

    def send(self, to: str, message: str) -> None:
        """Write the notification for ``to`` to the console."""
        if self._logger:
            self._logger.debug(f"Sending confirmation e-mail to {to}")
        self._console.print(f"Sending e-mail to {to}: {message}")
