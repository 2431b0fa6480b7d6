"""Exchange client services."""

from src.exchange.service.factory import create_exchange

__all__ = ["create_exchange"]
