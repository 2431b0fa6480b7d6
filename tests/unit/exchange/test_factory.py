"""Tests for the exchange client factory."""

import pytest

from src.exchange.adapters.coinmate import CoinmateExchange
from src.exchange.config import ExchangeSettings
from src.exchange.protocols import ExchangeProtocol
from src.exchange.service import create_exchange
from tests.unit.exchange.helpers import MARKETS


class TestCreateExchange:
    """Test adapter selection."""

    def test_creates_coinmate(self):
        """Test the default exchange is CoinMate and fulfils the protocol."""
        exchange = create_exchange(config=ExchangeSettings())

        assert isinstance(exchange, CoinmateExchange)
        assert isinstance(exchange, ExchangeProtocol)
        assert exchange.id == "coinmate"

    def test_name_is_case_insensitive(self):
        """Test exchange names are matched case-insensitively."""
        exchange = create_exchange("CoinMate", ExchangeSettings())

        assert isinstance(exchange, CoinmateExchange)

    def test_markets_can_be_preloaded(self):
        """Test markets handed to the factory are loaded without a request."""
        exchange = create_exchange(config=ExchangeSettings(), markets=MARKETS)

        assert exchange.market("BTC/EUR")["id"] == "BTC_EUR"
        assert exchange.currencies_by_id["LTC"]["code"] == "LTC"

    def test_unsupported_exchange(self):
        """Test unknown exchanges raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported exchange: kraken"):
            create_exchange("kraken", ExchangeSettings())
