"""
Common types for unified exchange models.

This module provides shared building blocks so every unified model
represents bounds, fees and timestamps the same way.
"""

from decimal import Decimal

from ccxt.base.exchange import Exchange
from pydantic import BaseModel, ConfigDict

# One side of an order book level: (price, amount)
PriceLevel = tuple[Decimal, Decimal]


class MinMax(BaseModel):
    """Inclusive bounds; None means the bound is unknown."""

    min: Decimal | None = None
    max: Decimal | None = None

    model_config = ConfigDict(frozen=True)


class Fee(BaseModel):
    """A fee charged for a trade or transfer."""

    cost: Decimal | None = None
    currency: str | None = None

    model_config = ConfigDict(frozen=True)


class Timestamped(BaseModel):
    """Base for models stamped with milliseconds since the epoch."""

    timestamp: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def datetime(self) -> str | None:
        """Get the timestamp as an ISO-8601 UTC string with milliseconds."""
        return Exchange.iso8601(self.timestamp)
