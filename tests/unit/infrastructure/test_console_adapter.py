"""Unit tests for ConsoleAdapter."""

import io
from unittest.mock import MagicMock

from rich.console import Console
from rich.text import Text

from order_flow.infrastructure.console_adapter import ConsoleAdapter
from order_flow.ports.console import ConsolePort


class TestConsoleAdapter:
    """Test ConsoleAdapter implementation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.mock_console = MagicMock(spec=Console)
        self.adapter = ConsoleAdapter(self.mock_console)

    def test_implements_console_port(self):
        """Test that ConsoleAdapter implements ConsolePort interface."""
        assert isinstance(self.adapter, ConsolePort)

    def test_initialization_with_default_console(self):
        """Test initialization without providing a console."""
        # Act
        adapter = ConsoleAdapter()

        # Assert
        assert isinstance(adapter._console, Console)

    def test_print_writes_plain_text(self):
        """Test printing wraps the message in an unstyled Text."""
        # Act
        self.adapter.print("Subtotal: R$3660.00")

        # Assert
        self.mock_console.print.assert_called_once()
        text = self.mock_console.print.call_args.args[0]
        assert isinstance(text, Text)
        assert text.plain == "Subtotal: R$3660.00"

    def test_print_error(self):
        """Test printing an error message."""
        self.adapter.print_error("Quantity must be positive")

        text = self.mock_console.print.call_args.args[0]
        assert text.plain == "Error: Quantity must be positive"


class TestConsoleAdapterOutput:
    """Test what ConsoleAdapter actually writes."""

    def setup_method(self):
        """Set up a console writing to a buffer."""
        self.buffer = io.StringIO()
        self.adapter = ConsoleAdapter(Console(file=self.buffer, color_system=None, width=40))

    def test_square_brackets_are_not_markup(self):
        """Test product names with brackets are printed literally."""
        self.adapter.print("1x Cable [USB-C] - R$10.00")

        assert self.buffer.getvalue() == "1x Cable [USB-C] - R$10.00\n"

    def test_error_output(self):
        """Test error prefix in plain output."""
        self.adapter.print_error("boom")

        assert self.buffer.getvalue() == "Error: boom\n"
