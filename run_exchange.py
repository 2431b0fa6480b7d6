#!/usr/bin/env python3
"""Print CoinMate markets and a ticker using the unified client."""

import asyncio
import logging
import sys

from ccxt.base.errors import BaseError

from src.exchange import ExchangeSettings, create_exchange
from src.exchange.model import Market


async def main(symbol: str) -> None:
    settings = ExchangeSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    exchange = create_exchange(config=settings)
    try:
        markets = await exchange.load_markets()
        print(f"{exchange.id}: {len(markets)} markets")
        for raw in markets.values():
            market = Market.model_validate(raw)
            print(f"  {market.symbol:<12} id={market.id} min={market.limits.amount.min}")

        ticker = await exchange.fetch_ticker(symbol)
        print("-" * 50)
        print(
            f"{ticker.symbol} last={ticker.last} bid={ticker.bid} "
            f"ask={ticker.ask} at {ticker.datetime}"
        )
    finally:
        await exchange.close()


if __name__ == "__main__":
    try:
        asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "BTC/EUR"))
    except BaseError as e:
        print(f"Error: {e}")
        sys.exit(1)
