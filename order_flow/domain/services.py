"""Domain services for order-flow following DDD principles."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal, localcontext

DEFAULT_DISCOUNT_RATE = Decimal("0.1")


def exact_product(a: Decimal, b: Decimal) -> Decimal:
    """Multiply without rounding, widening the context precision when needed."""
    digits = len(a.as_tuple().digits) + len(b.as_tuple().digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        return a * b


def exact_sum(values: Iterable[Decimal]) -> Decimal:
    """Add finite amounts without rounding, widening the context precision when needed."""
    values = list(values)
    total = Decimal("0")
    if not values:
        return total
    top = max(v.adjusted() for v in values)
    bottom = min(0, *(v.as_tuple().exponent for v in values))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, top - bottom + len(values).bit_length() + 2)
        for value in values:
            total += value
    return total


class DiscountPolicy:
    """Domain service computing the discount granted on an order."""

    @staticmethod
    def calculate_discount(amount: Decimal, rate: Decimal) -> Decimal:
        """Return ``amount * rate``.

        Neither argument is bounds-checked; callers pass sane values.
        """
        return exact_product(amount, rate)
