"""order-flow - minimal order processing with invoice printing and e-mail confirmation."""

from order_flow.domain import (
    Client,
    DiscountPolicy,
    InvalidArgumentError,
    Order,
    OrderFlowError,
    OrderItem,
)

__version__ = "0.1.0"

__all__ = [
    "Client",
    "DiscountPolicy",
    "InvalidArgumentError",
    "Order",
    "OrderFlowError",
    "OrderItem",
    "__version__",
]
