"""
Exchange Protocol Layer.

This module defines the contract a unified exchange client fulfils. Callers
depend on this protocol rather than on a concrete adapter, so adapters can
be swapped or faked in tests.

Key design principles:
- Unified symbols ("BASE/QUOTE") and currency codes on every operation
- Millisecond timestamps and Decimal figures in every result
- Unknown figures are None, never zero
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from src.exchange.model import (
    BalanceSheet,
    CreatedOrder,
    OrderBookSnapshot,
    Ticker,
    Trade,
    Transaction,
)


@runtime_checkable
class ExchangeProtocol(Protocol):
    """
    Protocol for a REST exchange client.

    Semantic Role: Account and market data access point
    Relationships:
    - Produces: market structures, Ticker, OrderBookSnapshot, Trade, Transaction
    - Consumes: ExchangeSettings credentials for private operations
    """

    id: str

    async def load_markets(self, reload: bool = False) -> dict[str, dict[str, Any]]:
        """Load markets once and return them by unified symbol."""
        ...

    async def fetch_markets(
        self, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Fetch the market listing as market structures."""
        ...

    async def fetch_balance(
        self, params: Mapping[str, Any] | None = None
    ) -> BalanceSheet:
        """Fetch account balances per currency."""
        ...

    async def fetch_order_book(
        self,
        symbol: str,
        limit: int | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> OrderBookSnapshot:
        """Fetch an order book snapshot."""
        ...

    async def fetch_ticker(
        self, symbol: str, params: Mapping[str, Any] | None = None
    ) -> Ticker:
        """Fetch a ticker."""
        ...

    async def fetch_trades(
        self,
        symbol: str,
        since: int | None = None,
        limit: int | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> list[Trade]:
        """Fetch recent public trades."""
        ...

    async def fetch_my_trades(
        self,
        symbol: str | None = None,
        since: int | None = None,
        limit: int | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> list[Trade]:
        """Fetch the account's fills."""
        ...

    async def fetch_transactions(
        self,
        code: str | None = None,
        since: int | None = None,
        limit: int | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> list[Transaction]:
        """Fetch deposits and withdrawals."""
        ...

    async def create_order(
        self,
        symbol: str,
        type: str,
        side: str,
        amount: Decimal | float,
        price: Decimal | float | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> CreatedOrder:
        """Place an order."""
        ...

    async def cancel_order(self, id: str, symbol: str | None = None) -> Any:
        """Cancel an order."""
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
