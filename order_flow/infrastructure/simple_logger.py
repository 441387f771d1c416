"""Standard-library logger adapter for the order workflow."""

import logging
import sys
from typing import Any

from ..ports.logger import LoggerPort

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class SimpleLogger(LoggerPort):
    """LoggerPort backed by :mod:`logging`.

    Records go to stderr so they never interleave with the invoice on stdout.
    Structured fields are passed as ``extra`` and become record attributes.
    """

    def __init__(self, name: str = "order_flow", level: int = logging.WARNING):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        # One stderr handler per logger name, however many adapters are created
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        self._logger.log(level, message, extra=fields)

    def debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, fields)
