"""Pytest configuration and shared fixtures for order-flow tests."""

from unittest.mock import MagicMock

import pytest

from order_flow.domain.models import Client, Order
from order_flow.ports.logger import LoggerPort


@pytest.fixture
def client() -> Client:
    """Create the sample client used across tests.

    Returns:
        A valid Client instance
    """
    return Client(name="João", email="joao@email.com")


@pytest.fixture
def mock_email_sender() -> MagicMock:
    """Create a recording e-mail sender.

    Returns:
        A mocked EmailSenderPort implementation
    """
    mock = MagicMock()
    mock.send = MagicMock(return_value=None)
    return mock


@pytest.fixture
def mock_console() -> MagicMock:
    """Create a mock console adapter.

    Returns:
        A mocked console adapter
    """
    mock = MagicMock()
    mock.print = MagicMock()
    mock.print_error = MagicMock()
    return mock


@pytest.fixture
def mock_logger() -> MagicMock:
    """Create a mock logger port.

    Returns:
        A mocked LoggerPort
    """
    return MagicMock(spec=LoggerPort)


@pytest.fixture
def empty_order(client: Client, mock_email_sender: MagicMock) -> Order:
    """Create an order without items."""
    return Order(client, mock_email_sender)


@pytest.fixture
def sample_order(empty_order: Order) -> Order:
    """Create the Notebook + Mouse order.

    Returns:
        Order with subtotal 3660.00
    """
    empty_order.add_product("Notebook", 1, 3500.0)
    empty_order.add_product("Mouse", 2, 80.0)
    return empty_order
