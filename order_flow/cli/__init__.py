"""Command-line entry points for order-flow."""
