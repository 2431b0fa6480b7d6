"""
Order domain models.

Order placement returns only an acknowledgement; order state is queried
separately and never tracked by the adapter.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.enums import OrderSide
from src.exchange.model.types import Timestamped


class CreatedOrder(BaseModel):
    """Acknowledgement returned by order placement."""

    id: str
    info: Any = Field(default=None, repr=False)

    model_config = ConfigDict(frozen=True)


class Order(Timestamped):
    """State of an order as reported by the exchange."""

    id: str | None = None
    symbol: str | None = None
    type: str | None = None
    side: OrderSide | None = None
    price: Decimal | None = None
    amount: Decimal | None = None
    filled: Decimal | None = None
    remaining: Decimal | None = None
    average: Decimal | None = None
    cost: Decimal | None = None
    status: str | None = None
    info: dict[str, Any] = Field(default_factory=dict, repr=False)

    model_config = ConfigDict(frozen=True)

    @property
    def is_open(self) -> bool:
        """Check if the order can still fill."""
        return self.status == "open"
