"""Unified exchange models."""

from src.exchange.model.balance import Balance, BalanceSheet
from src.exchange.model.book import OrderBookSnapshot
from src.exchange.model.market import Limits, Market, Precision, TradingFee
from src.exchange.model.order import CreatedOrder, Order
from src.exchange.model.ticker import Ticker
from src.exchange.model.trade import Trade
from src.exchange.model.transaction import (
    DepositAddress,
    Transaction,
    WithdrawalReceipt,
)
from src.exchange.model.types import Fee, MinMax, PriceLevel

__all__ = [
    "Balance",
    "BalanceSheet",
    "CreatedOrder",
    "DepositAddress",
    "Fee",
    "Limits",
    "Market",
    "MinMax",
    "Order",
    "OrderBookSnapshot",
    "Precision",
    "PriceLevel",
    "Ticker",
    "Trade",
    "TradingFee",
    "Transaction",
    "WithdrawalReceipt",
]
