"""
Exchange client factory.

This module provides the exchange-agnostic entry point for building a
client. It picks the adapter for the configured exchange and hands it the
shared settings.
"""

import logging
from typing import Any

from src.exchange.adapters.coinmate import CoinmateExchange
from src.exchange.config import ExchangeSettings
from src.exchange.protocols import ExchangeProtocol

logger = logging.getLogger(__name__)


def create_exchange(
    exchange: str | None = None,
    config: ExchangeSettings | None = None,
    **options: Any,
) -> ExchangeProtocol:
    """
    Create a client for the specified exchange.

    Args:
        exchange: Exchange id; defaults to ``config.exchange``
        config: Settings with credentials and connection options
        **options: Extra exchange options, e.g. ``markets`` from another
            client to skip the market listing call

    Returns:
        Exchange client implementing ExchangeProtocol

    Raises:
        ValueError: If exchange is not supported

    """
    config = config or ExchangeSettings.from_env()
    name = exchange or config.exchange

    match name.lower():
        case "coinmate":
            logger.debug(f"Creating {name} client")
            return CoinmateExchange(config, **options)
        case _:
            raise ValueError(f"Unsupported exchange: {name}")
