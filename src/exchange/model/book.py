"""
Order book snapshot model.

Snapshots are fetched over REST and replaced wholesale on every call, so no
incremental update logic is needed here.
"""

from decimal import Decimal

from pydantic import ConfigDict, Field

from src.exchange.model.types import PriceLevel, Timestamped


class OrderBookSnapshot(Timestamped):
    """
    Point-in-time order book.

    Bids are sorted by price descending and asks ascending, so index 0 is
    always the best level on each side.
    """

    symbol: str | None = None
    bids: list[PriceLevel] = Field(default_factory=list)
    asks: list[PriceLevel] = Field(default_factory=list)
    nonce: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def best_bid(self) -> Decimal | None:
        """Get the best bid price."""
        return self.bids[0][0] if self.bids else None

    @property
    def best_ask(self) -> Decimal | None:
        """Get the best ask price."""
        return self.asks[0][0] if self.asks else None

    @property
    def spread(self) -> Decimal | None:
        """Get the spread."""
        if self.best_bid is None or self.best_ask is None:
            return None
        return self.best_ask - self.best_bid

    @property
    def mid_price(self) -> Decimal | None:
        """Get the mid price."""
        if self.best_bid is None or self.best_ask is None:
            return None
        return (self.best_bid + self.best_ask) / 2
