"""Application layer for order-flow - Contains use cases and application services."""

from order_flow.application.invoice_printer import InvoiceConfig, InvoicePrinter, format_amount
from order_flow.application.order_workflow_service import OrderWorkflowService

__all__ = [
    "InvoiceConfig",
    "InvoicePrinter",
    "OrderWorkflowService",
    "format_amount",
]
