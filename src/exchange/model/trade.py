"""
Trade domain model.

One model covers both public trades (anonymous prints from the tape, with
no side or fee known) and private trades (the account's own fills).
"""

from decimal import Decimal
from typing import Any

from pydantic import ConfigDict, Field

from src.exchange.enums import OrderSide, TakerOrMaker
from src.exchange.model.types import Fee, Timestamped


class Trade(Timestamped):
    """
    Domain model for an executed trade.

    Fields that the exchange does not report for a trade kind stay None.
    """

    id: str | None = Field(default=None, description="Exchange trade id")
    symbol: str | None = Field(default=None, description="Unified symbol")
    type: str | None = Field(default=None, description="Order type, lower-cased")
    side: OrderSide | None = None
    order: str | None = Field(default=None, description="Owning order id")
    taker_or_maker: TakerOrMaker | None = Field(default=None, alias="takerOrMaker")
    price: Decimal | None = None
    amount: Decimal | None = None
    cost: Decimal | None = None
    fee: Fee | None = None
    info: dict[str, Any] = Field(default_factory=dict, repr=False)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_private(self) -> bool:
        """Check whether this trade belongs to the account."""
        return self.order is not None
