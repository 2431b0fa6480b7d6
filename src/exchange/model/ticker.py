"""
Ticker domain model.

Statistics an exchange does not publish stay None. Zero and unknown are
different answers and the model never fills one in for the other.
"""

from decimal import Decimal
from typing import Any

from pydantic import ConfigDict, Field

from src.exchange.model.types import Timestamped


class Ticker(Timestamped):
    """Point-in-time price statistics for one market."""

    symbol: str
    high: Decimal | None = None
    low: Decimal | None = None
    bid: Decimal | None = None
    bid_volume: Decimal | None = None
    ask: Decimal | None = None
    ask_volume: Decimal | None = None
    vwap: Decimal | None = None
    open: Decimal | None = None
    close: Decimal | None = None
    last: Decimal | None = None
    previous_close: Decimal | None = None
    change: Decimal | None = None
    percentage: Decimal | None = None
    average: Decimal | None = None
    base_volume: Decimal | None = None
    quote_volume: Decimal | None = None
    info: dict[str, Any] = Field(default_factory=dict, repr=False)

    model_config = ConfigDict(frozen=True)

    @property
    def spread(self) -> Decimal | None:
        """Calculate bid-ask spread."""
        if self.bid is None or self.ask is None:
            return None
        return self.ask - self.bid
