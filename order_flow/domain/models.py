"""Domain models for order-flow following DDD principles."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from order_flow.domain.exceptions import InvalidArgumentError
from order_flow.domain.services import (
    DEFAULT_DISCOUNT_RATE,
    DiscountPolicy,
    exact_product,
    exact_sum,
)

if TYPE_CHECKING:
    from order_flow.ports.email_sender import EmailSenderPort

ORDER_CONFIRMATION_MESSAGE = "Order received! Thank you for your purchase."


def _to_invalid_argument(model_name: str, error: ValidationError) -> InvalidArgumentError:
    """Translate a pydantic ValidationError into the domain error."""
    errors = error.errors()
    fields = [".".join(str(part) for part in err["loc"]) for err in errors]
    first = errors[0]
    cause = first.get("ctx", {}).get("error")
    reason = str(cause) if cause is not None else first["msg"]
    return InvalidArgumentError(
        f"Invalid {model_name}: {reason}",
        field=fields[0] or None,
        details={"errors": fields},
    )


class ValueObject(BaseModel):
    """Immutable value object whose construction failures surface as InvalidArgumentError."""

    model_config = ConfigDict(frozen=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _to_invalid_argument(type(self).__name__, e) from e


class OrderItem(ValueObject):
    """Value object representing one purchased line."""

    product: str = Field(..., description="Product name")
    quantity: int = Field(..., strict=True, description="Number of units, strictly positive")
    price: Decimal = Field(..., allow_inf_nan=False, description="Unit price, non-negative")

    @field_validator("quantity")
    @classmethod
    def validate_quantity(cls, v: int) -> int:
        """Ensure quantity is strictly positive."""
        if v <= 0:
            raise ValueError("Quantity must be positive")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, v: Any) -> Any:
        """Convert floats through their shortest repr so 80.0 becomes Decimal('80.0')."""
        if isinstance(v, float):
            if not math.isfinite(v):
                raise ValueError("Price must be a finite number")
            return Decimal(repr(v))
        return v

    @field_validator("price")
    @classmethod
    def validate_price(cls, v: Decimal) -> Decimal:
        """Ensure price is not negative."""
        if v < 0:
            raise ValueError("Price must not be negative")
        return v

    def get_total(self) -> Decimal:
        """Line total (quantity times unit price)."""
        return exact_product(Decimal(self.quantity), self.price)


class Client(ValueObject):
    """Value object representing the customer who places an order."""

    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Address the confirmation is sent to")


class Order:
    """Aggregate root for a purchase and sole authority for its totals.

    Items accumulate monotonically through ``add_product`` and are only ever
    exposed as an immutable snapshot. Totals are exact regardless of how many
    digits the amounts carry.
    """

    def __init__(self, client: Client, email_sender: EmailSenderPort):
        """Initialize an empty order.

        Args:
            client: Customer placing the order
            email_sender: Capability used by ``send_email``

        Raises:
            InvalidArgumentError: If client is None
        """
        if client is None:
            raise InvalidArgumentError("Client must not be None", field="client")
        self._client = client
        self._email_sender = email_sender
        self._items: list[OrderItem] = []
        self._discount_rate = DEFAULT_DISCOUNT_RATE

    @property
    def client(self) -> Client:
        return self._client

    @property
    def discount_rate(self) -> Decimal:
        return self._discount_rate

    @property
    def items(self) -> tuple[OrderItem, ...]:
        """Items in insertion order."""
        return tuple(self._items)

    def add_product(self, product: str, quantity: int, price: Decimal | float) -> OrderItem:
        """Append a new line to the order.

        Raises:
            InvalidArgumentError: If quantity is not positive or price is negative
        """
        item = OrderItem(product=product, quantity=quantity, price=price)
        self._items.append(item)
        return item

    def calculate_subtotal(self) -> Decimal:
        return exact_sum(item.get_total() for item in self._items)

    def calculate_discount_amount(self) -> Decimal:
        return DiscountPolicy.calculate_discount(self.calculate_subtotal(), self._discount_rate)

    def calculate_final_total(self) -> Decimal:
        subtotal = self.calculate_subtotal()
        discount = DiscountPolicy.calculate_discount(subtotal, self._discount_rate)
        return exact_sum([subtotal, discount.copy_negate()])

    def send_email(self) -> None:
        """Send the order confirmation to the client. Sender errors propagate."""
        self._email_sender.send(self._client.email, ORDER_CONFIRMATION_MESSAGE)

    def __repr__(self) -> str:
        return f"Order(client={self._client.name!r}, items={len(self._items)})"
