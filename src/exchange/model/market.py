"""
Market domain models.

A Market is created once per process from the exchange's listing and is
immutable afterwards. The adapter hands markets to ccxt as
camelCase dictionaries (``model_dump(by_alias=True)``), and any loaded market
validates back into this model.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.model.types import MinMax


class Precision(BaseModel):
    """Number of decimal places accepted for prices and amounts."""

    price: int | None = None
    amount: int | None = None

    model_config = ConfigDict(frozen=True)


class Limits(BaseModel):
    """Order size, price and cost bounds for a market."""

    amount: MinMax = Field(default_factory=MinMax)
    price: MinMax = Field(default_factory=MinMax)
    cost: MinMax = Field(default_factory=MinMax)

    model_config = ConfigDict(frozen=True)


class Market(BaseModel):
    """
    Domain model for a tradable base/quote pair.

    ``symbol`` is always ``base + "/" + quote`` in unified currency codes,
    while ``id`` is the exchange-native pair identifier.
    """

    id: str = Field(description="Exchange market id (e.g., 'BTC_EUR')")
    symbol: str = Field(description="Unified symbol (e.g., 'BTC/EUR')")
    base: str
    quote: str
    base_id: str = Field(alias="baseId")
    quote_id: str = Field(alias="quoteId")
    type: str = "spot"
    spot: bool = True
    active: bool | None = None
    precision: Precision = Field(default_factory=Precision)
    limits: Limits = Field(default_factory=Limits)
    info: dict[str, Any] = Field(default_factory=dict, repr=False)

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TradingFee(BaseModel):
    """Maker and taker fee rates for a market, as fractions (0.0015 = 0.15 %)."""

    symbol: str
    maker: Decimal | None = None
    taker: Decimal | None = None
    info: dict[str, Any] = Field(default_factory=dict, repr=False)

    model_config = ConfigDict(frozen=True)
