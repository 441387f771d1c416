"""Configuration objects for infrastructure layer following DDD principles."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from order_flow.application.invoice_printer import InvoiceConfig


class AppConfig(BaseModel):
    """Top-level configuration for the order-flow program."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    invoice: InvoiceConfig = Field(default_factory=InvoiceConfig)
    log_level: str = Field(default="WARNING", description="Standard logging level name")
    logger_name: str = Field(default="order_flow", min_length=1)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is a standard logging level name."""
        level = v.upper()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {sorted(valid_levels)}")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)
