"""Infrastructure layer for order-flow."""

from order_flow.infrastructure.config import AppConfig
from order_flow.infrastructure.console_adapter import ConsoleAdapter
from order_flow.infrastructure.email_service import ConsoleEmailService
from order_flow.infrastructure.factory import InfrastructureFactory
from order_flow.infrastructure.simple_logger import SimpleLogger

__all__ = [
    "AppConfig",
    "ConsoleAdapter",
    "ConsoleEmailService",
    "InfrastructureFactory",
    "SimpleLogger",
]
