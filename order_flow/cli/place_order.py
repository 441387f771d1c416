"""Place-order CLI running the demonstration order workflow."""

import sys

import click

from order_flow.application.invoice_printer import InvoicePrinter
from order_flow.application.order_workflow_service import OrderLine, OrderWorkflowService
from order_flow.domain.exceptions import OrderFlowError
from order_flow.domain.models import Client
from order_flow.infrastructure.config import AppConfig
from order_flow.infrastructure.factory import InfrastructureFactory

DEMO_CLIENT = Client(name="João", email="joao@email.com")

DEMO_LINES: list[OrderLine] = [
    ("Notebook", 1, 3500.0),
    ("Mouse", 2, 80.0),
]


def run(config: AppConfig, client: Client | None, lines: list[OrderLine]) -> int:
    """Wire the adapters, place the order and return the process exit code."""
    adapters = InfrastructureFactory.create_all_adapters(config)
    console = adapters["console"]

    service = OrderWorkflowService(
        email_sender=adapters["email_sender"],
        invoice_printer=InvoicePrinter(console, config.invoice),
        logger=adapters["logger"],
    )

    try:
        service.place_order(client, lines)
    except OrderFlowError as e:
        console.print_error(e.message)
        return 1
    return 0


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Log workflow steps to stderr")
def main(verbose):
    """Place the demonstration order, print its invoice and send the confirmation."""
    config = AppConfig(log_level="DEBUG" if verbose else "WARNING")
    sys.exit(run(config, DEMO_CLIENT, DEMO_LINES))


if __name__ == "__main__":
    main()
