"""Exchange client protocols."""

from src.exchange.protocols.exchange import ExchangeProtocol

__all__ = ["ExchangeProtocol"]
