"""
Deposit and withdrawal domain models.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.model.types import Fee, Timestamped


class Transaction(Timestamped):
    """A deposit to or withdrawal from the account."""

    id: str | None = None
    currency: str | None = None
    amount: Decimal | None = None
    type: str | None = Field(default=None, description="'deposit' or 'withdrawal'")
    txid: str | None = None
    address: str | None = None
    tag: str | None = None
    status: str | None = Field(
        default=None, description="'ok' or the raw exchange status"
    )
    fee: Fee | None = None
    info: dict[str, Any] = Field(default_factory=dict, repr=False)

    model_config = ConfigDict(frozen=True)


class DepositAddress(BaseModel):
    """Address to which a currency can be deposited."""

    currency: str
    address: str | None = None
    tag: str | None = None
    info: Any = Field(default=None, repr=False)

    model_config = ConfigDict(frozen=True)


class WithdrawalReceipt(BaseModel):
    """Acknowledgement of a submitted withdrawal."""

    id: str | None = None
    info: Any = Field(default=None, repr=False)

    model_config = ConfigDict(frozen=True)
