"""Factory for creating infrastructure adapters."""

from __future__ import annotations

from typing import Any

from rich.console import Console

from order_flow.infrastructure.config import AppConfig
from order_flow.infrastructure.console_adapter import ConsoleAdapter
from order_flow.infrastructure.email_service import ConsoleEmailService
from order_flow.infrastructure.simple_logger import SimpleLogger
from order_flow.ports.console import ConsolePort
from order_flow.ports.email_sender import EmailSenderPort
from order_flow.ports.logger import LoggerPort


class InfrastructureFactory:
    """Factory for creating infrastructure adapters following hexagonal architecture."""

    @staticmethod
    def create_console(console: Console | None = None) -> ConsolePort:
        """Create a console adapter.

        Args:
            console: Optional Rich console instance

        Returns:
            ConsolePort implementation
        """
        return ConsoleAdapter(console)

    @staticmethod
    def create_logger(config: AppConfig | None = None) -> LoggerPort:
        """Create a logger adapter configured from ``config``.

        Returns:
            LoggerPort implementation
        """
        config = config or AppConfig()
        return SimpleLogger(config.logger_name, config.log_level_value)

    @staticmethod
    def create_email_sender(
        console: ConsolePort, logger: LoggerPort | None = None
    ) -> EmailSenderPort:
        """Create the e-mail sender used for order confirmations.

        Returns:
            EmailSenderPort implementation
        """
        return ConsoleEmailService(console, logger)

    @classmethod
    def create_all_adapters(
        cls, config: AppConfig | None = None, console: Console | None = None
    ) -> dict[str, Any]:
        """Create all infrastructure adapters.

        Returns:
            Dictionary of all adapters keyed by port name
        """
        console_port = cls.create_console(console)
        logger = cls.create_logger(config)
        return {
            "console": console_port,
            "logger": logger,
            "email_sender": cls.create_email_sender(console_port, logger),
        }
