"""Domain layer for order-flow - Contains business logic and entities."""

from order_flow.domain.exceptions import InvalidArgumentError, OrderFlowError
from order_flow.domain.models import (
    ORDER_CONFIRMATION_MESSAGE,
    Client,
    Order,
    OrderItem,
)
from order_flow.domain.services import DEFAULT_DISCOUNT_RATE, DiscountPolicy

__all__ = [
    # Models
    "Client",
    "Order",
    "OrderItem",
    "ORDER_CONFIRMATION_MESSAGE",
    # Services
    "DEFAULT_DISCOUNT_RATE",
    "DiscountPolicy",
    # Errors
    "InvalidArgumentError",
    "OrderFlowError",
]
