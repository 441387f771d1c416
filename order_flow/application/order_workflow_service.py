"""Order workflow application service."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from order_flow.application.invoice_printer import InvoicePrinter
from order_flow.domain.exceptions import OrderFlowError
from order_flow.domain.models import Client, Order
from order_flow.ports.email_sender import EmailSenderPort
from order_flow.ports.logger import LoggerPort

OrderLine = tuple[str, int, Decimal | float]


class OrderWorkflowService:
    """Application service for the place-order use case."""

    def __init__(
        self,
        email_sender: EmailSenderPort,
        invoice_printer: InvoicePrinter,
        logger: LoggerPort,
    ):
        """Initialize workflow service with required ports.

        Args:
            email_sender: Capability injected into every order
            invoice_printer: Presenter used to print the invoice
            logger: Logger port for diagnostics
        """
        self._email_sender = email_sender
        self._invoice_printer = invoice_printer
        self._logger = logger

    def create_order(self, client: Client | None, lines: Iterable[OrderLine]) -> Order:
        """Build an order for ``client`` holding ``lines`` in the given order.

        Raises:
            InvalidArgumentError: If the client is missing or any line is invalid
        """
        try:
            order = Order(client, self._email_sender)
            for product, quantity, price in lines:
                order.add_product(product, quantity, price)
        except OrderFlowError as e:
            self._logger.error(f"Rejected order: {e.message}", error_details=e.details)
            raise

        self._logger.info(
            f"Created order for {order.client.name} with {len(order.items)} item(s)"
        )
        return order

    def place_order(self, client: Client | None, lines: Iterable[OrderLine]) -> Order:
        """Create the order, print its invoice and send the confirmation e-mail.

        Nothing is printed or sent when the order cannot be built.
        """
        order = self.create_order(client, lines)

        self._invoice_printer.print(order)
        self._logger.debug(f"Printed invoice, final total {order.calculate_final_total()}")

        order.send_email()
        self._logger.info(f"Confirmation sent to {order.client.email}")
        return order
