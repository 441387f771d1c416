"""Domain-specific exceptions following DDD principles."""


class OrderFlowError(Exception):
    """Base exception for all order-flow errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(OrderFlowError, ValueError):
    """Raised when a domain object is built from values that break its invariants."""

    def __init__(self, message: str, field: str | None = None, details: dict | None = None):
        super().__init__(message, details)
        self.field = field
        if field:
            self.details["field"] = field
