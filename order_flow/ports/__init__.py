"""Ports (interfaces) for order-flow following hexagonal architecture."""

from order_flow.ports.console import ConsolePort
from order_flow.ports.email_sender import EmailSenderPort
from order_flow.ports.logger import LoggerPort

__all__ = [
    "ConsolePort",
    "EmailSenderPort",
    "LoggerPort",
]
