"""CoinMate REST adapter."""

from src.exchange.adapters.coinmate.exchange import CoinmateExchange

__all__ = ["CoinmateExchange"]
