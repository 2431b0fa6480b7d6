"""
Account balance domain models.

Balances are rebuilt on every fetch and have no lifecycle beyond the call.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Balance(BaseModel):
    """Funds held in one currency."""

    free: Decimal | None = Field(default=None, description="Available to trade")
    used: Decimal | None = Field(default=None, description="Reserved in orders")
    total: Decimal | None = Field(default=None, description="free + used")

    model_config = ConfigDict(frozen=True)


class BalanceSheet(BaseModel):
    """
    Balances of an account keyed by unified currency code.

    Provides per-currency access (``sheet["BTC"]``) plus column views
    (``sheet.free["BTC"]``) for callers that want one figure across currencies.
    """

    balances: dict[str, Balance] = Field(default_factory=dict)
    info: Any = Field(default=None, repr=False)

    model_config = ConfigDict(frozen=True)

    def __getitem__(self, code: str) -> Balance:
        """Get the balance of a currency."""
        return self.balances[code]

    def __contains__(self, code: object) -> bool:
        """Check whether a currency is present."""
        return code in self.balances

    @property
    def currencies(self) -> list[str]:
        """Get the currency codes present in the sheet."""
        return list(self.balances)

    @property
    def free(self) -> dict[str, Decimal | None]:
        """Get available amounts per currency."""
        return {code: balance.free for code, balance in self.balances.items()}

    @property
    def used(self) -> dict[str, Decimal | None]:
        """Get reserved amounts per currency."""
        return {code: balance.used for code, balance in self.balances.items()}

    @property
    def total(self) -> dict[str, Decimal | None]:
        """Get total amounts per currency."""
        return {code: balance.total for code, balance in self.balances.items()}
