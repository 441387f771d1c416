"""E-mail sender port for order notifications."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EmailSenderPort(Protocol):
    """Port for delivering a notification message to a recipient."""

    def send(self, to: str, message: str) -> None:
        """Send a message.

        Args:
            to: Recipient e-mail address
            message: Message body

        Failure semantics are defined by the implementation.
        """
        ...
