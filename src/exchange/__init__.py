"""Unified REST exchange client package."""

from src.exchange.adapters.coinmate import CoinmateExchange
from src.exchange.config import ExchangeSettings
from src.exchange.service import create_exchange

__all__ = ["CoinmateExchange", "ExchangeSettings", "create_exchange"]
