"""Logger port for order workflow diagnostics."""

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """Abstract interface the workflow and adapters log through.

    Keyword arguments are structured fields attached to the record.
    """

    @abstractmethod
    def debug(self, message: str, **fields: Any) -> None:
        """Log a step detail, such as a printed invoice or a send."""
        ...

    @abstractmethod
    def info(self, message: str, **fields: Any) -> None:
        """Log a workflow milestone (order created, confirmation sent)."""
        ...

    @abstractmethod
    def error(self, message: str, **fields: Any) -> None:
        """Log a rejected order."""
        ...
