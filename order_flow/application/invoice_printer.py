"""Invoice presentation for orders."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

from pydantic import BaseModel, ConfigDict, Field

from order_flow.domain.models import Client, Order, OrderItem
from order_flow.ports.console import ConsolePort

_CENTS = Decimal("0.01")


class InvoiceConfig(BaseModel):
    """Presentation constants used when rendering an invoice.

    Labels and the currency prefix only shape the printed text; nothing about
    the order's amounts depends on them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    currency_prefix: str = Field(default="R$", description="Prefix printed before every amount")
    client_label: str = Field(default="Client", description="Label of the client line")
    subtotal_label: str = Field(default="Subtotal", description="Label of the subtotal line")
    discount_label: str = Field(default="Discount", description="Label of the discount line")
    total_label: str = Field(default="Final total", description="Label of the final total line")


def format_amount(amount: Decimal | float | int) -> str:
    """Format an amount with exactly two decimals, rounding half up."""
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    context = Context(prec=max(28, value.adjusted() + 4))
    return f"{value.quantize(_CENTS, rounding=ROUND_HALF_UP, context=context):f}"


class InvoicePrinter:
    """Read-only presenter rendering an order as invoice lines."""

    def __init__(self, console: ConsolePort, config: InvoiceConfig | None = None):
        """Initialize the printer.

        Args:
            console: Console port the invoice is written to
            config: Optional presentation constants
        """
        self._console = console
        self._config = config or InvoiceConfig()

    def render(self, order: Order) -> list[str]:
        """Render the invoice lines without writing them anywhere."""
        lines = [self._client_line(order.client)]
        lines.extend(self._item_line(item) for item in order.items)
        lines.extend(self._summary_lines(order))
        return lines

    def print(self, order: Order) -> None:
        """Write the invoice for ``order`` to the console."""
        for line in self.render(order):
            self._console.print(line)

    def _client_line(self, client: Client) -> str:
        return f"{self._config.client_label}: {client.name}"

    def _item_line(self, item: OrderItem) -> str:
        return f"{item.quantity}x {item.product} - {self._money(item.price)}"

    def _summary_lines(self, order: Order) -> list[str]:
        cfg = self._config
        return [
            f"{cfg.subtotal_label}: {self._money(order.calculate_subtotal())}",
            f"{cfg.discount_label}: {self._money(order.calculate_discount_amount())}",
            f"{cfg.total_label}: {self._money(order.calculate_final_total())}",
        ]

    def _money(self, amount: Decimal) -> str:
        return f"{self._config.currency_prefix}{format_amount(amount)}"
