"""Test helpers for exchange adapter tests."""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock
from urllib.parse import parse_qsl, urlsplit

from src.exchange.adapters.coinmate import CoinmateExchange
from src.exchange.config import (
    ConnectionConfig,
    CredentialsConfig,
    ExchangeSettings,
)
from src.exchange.model import Limits, Market, MinMax, Precision

UID = "123456"
API_KEY = "public-key"
SECRET = "private-key"


def load_fixture(filename: str) -> Any:
    """
    Load a recorded CoinMate response.

    Args:
        filename: Endpoint name without extension (e.g., "ticker")

    Returns:
        Parsed JSON data

    """
    fixtures_dir = Path(__file__).parent.parent.parent / "fixtures" / "coinmate"
    with (fixtures_dir / f"{filename}.json").open() as f:
        return json.load(f)


def make_market(
    market_id: str,
    price_decimals: int = 2,
    lot_decimals: int = 8,
    min_amount: str = "0.0002",
) -> dict[str, Any]:
    """Build a market structure as fetch_markets would from a trading pair."""
    base_id, quote_id = market_id.split("_")
    return Market(
        id=market_id,
        symbol=f"{base_id}/{quote_id}",
        base=base_id,
        quote=quote_id,
        base_id=base_id,
        quote_id=quote_id,
        precision=Precision(price=price_decimals, amount=lot_decimals),
        limits=Limits(amount=MinMax(min=Decimal(min_amount))),
    ).model_dump(by_alias=True)


MARKETS = [
    make_market("BTC_EUR"),
    make_market("BTC_CZK", price_decimals=0),
    make_market("LTC_BTC", price_decimals=5, min_amount="0.01"),
]


def make_settings(
    uid: str = UID, api_key: str = API_KEY, secret: str = SECRET
) -> ExchangeSettings:
    """Build settings with credentials and no throttling, ignoring the environment."""
    return ExchangeSettings(
        connection=ConnectionConfig(enable_rate_limit=False),
        credentials=CredentialsConfig(uid=uid, api_key=api_key, secret=secret),
    )


def make_exchange(
    *responses: Any,
    warm: bool = True,
    settings: ExchangeSettings | None = None,
) -> tuple[CoinmateExchange, AsyncMock]:
    """
    Build an adapter whose HTTP layer replays the given responses in order.

    Args:
        *responses: Decoded JSON bodies, or exceptions to raise
        warm: Start with MARKETS loaded so no tradingPairs call is made
        settings: Settings to use instead of make_settings()

    Returns:
        The adapter and the mocked ``fetch``

    """
    options = {"markets": MARKETS} if warm else {}
    exchange = CoinmateExchange(settings or make_settings(), **options)
    exchange.fetch = AsyncMock(side_effect=list(responses))
    exchange.timeout_on_exit = 0
    return exchange, exchange.fetch


def sent(fetch: AsyncMock, index: int = -1) -> tuple[str, str, Any, Any]:
    """Get (url, method, headers, body) of a request passed to fetch."""
    url, method, headers, body = fetch.call_args_list[index].args
    return url, method, headers, body


def query_of(url: str) -> dict[str, str]:
    """Decode the query string of a URL."""
    return dict(parse_qsl(urlsplit(url).query))


def form_of(body: str) -> dict[str, str]:
    """Decode a form-encoded body."""
    return dict(parse_qsl(body))


def ok(data: Any) -> dict[str, Any]:
    """Wrap data in a successful CoinMate envelope."""
    return {"error": False, "errorMessage": None, "data": data}
