"""
CoinMate exchange adapter.

This module maps the unified exchange operations onto the CoinMate REST API
(https://coinmate.docs.apiary.io). Public endpoints are plain GETs; private
endpoints are form-encoded POSTs signed with HMAC-SHA256 over
``nonce + clientId + publicKey``.

The adapter is a ccxt async exchange: ccxt owns the HTTP session, request
throttling, the market cache and the error hierarchy. Payloads are decoded
through the wire models in ``data.py`` into ccxt-style dictionaries, and
every operation returns the frozen unified models.

CoinMate specifics worth knowing:
- Order book and ticker timestamps are in seconds; history timestamps are in
  milliseconds
- Market buys are sized by the quote amount to spend (``total``), market
  sells by the base amount (``amount``)
- Public trades are only available for the last 10 minutes
"""

import logging
from decimal import Decimal
from typing import Any, NamedTuple

from ccxt.async_support.base.exchange import Exchange
from ccxt.base.decimal_to_precision import DECIMAL_PLACES
from ccxt.base.errors import ExchangeError, InvalidOrder, NotSupported

from src.exchange.adapters.coinmate.data import (
    CoinmateResponse,
    OrderData,
    PrivateTradeData,
    PublicTradeData,
    TickerData,
    TraderFeesData,
    TradingPairData,
    TransferData,
    raw_trade_adapter,
)
from src.exchange.config import ExchangeSettings
from src.exchange.enums import (
    ApiAccess,
    HttpMethod,
    OrderSide,
    OrderStatus,
    OrderType,
    TakerOrMaker,
)
from src.exchange.model import (
    Balance,
    BalanceSheet,
    CreatedOrder,
    DepositAddress,
    Limits,
    Market,
    MinMax,
    Order,
    OrderBookSnapshot,
    Precision,
    Ticker,
    Trade,
    TradingFee,
    Transaction,
    WithdrawalReceipt,
)

logger = logging.getLogger(__name__)

# Public trade history depth accepted by the transactions endpoint
TRADES_HISTORY_MINUTES = 10

# Page size used when the caller gives no limit
DEFAULT_HISTORY_LIMIT = 1000


class OrderEndpoint(NamedTuple):
    """Where an order of a given side and type is sent, and how it is sized."""

    path: str
    amount_key: str
    requires_price: bool


ORDER_ENDPOINTS: dict[tuple[OrderSide, OrderType], OrderEndpoint] = {
    # Market buys spend a quote-currency total
    (OrderSide.BUY, OrderType.MARKET): OrderEndpoint("buyInstant", "total", False),
    (OrderSide.SELL, OrderType.MARKET): OrderEndpoint("sellInstant", "amount", False),
    (OrderSide.BUY, OrderType.LIMIT): OrderEndpoint("buyLimit", "amount", True),
    (OrderSide.SELL, OrderType.LIMIT): OrderEndpoint("sellLimit", "amount", True),
}

DEPOSIT_ADDRESS_ENDPOINTS: dict[str, str] = {
    "BTC": "bitcoinDepositAddresses",
    "BCH": "bitcoinCashDepositAddresses",
    "LTC": "litecoinDepositAddresses",
    "ETH": "ethereumDepositAddresses",
    "DASH": "dashDepositAddresses",
    "XRP": "rippleDepositAddresses",
}

WITHDRAWAL_ENDPOINTS: dict[str, str] = {
    "BTC": "bitcoinWithdrawal",
    "BCH": "bitcoinCashWithdrawal",
    "LTC": "litecoinWithdrawal",
    "ETH": "ethereumWithdrawal",
    "DASH": "dashWithdrawal",
    "XRP": "rippleWithdrawal",
}

TRANSACTION_STATUSES: dict[str, str] = {
    "COMPLETED": "ok",
}

ORDER_STATUSES: dict[str, str] = {
    "OPEN": OrderStatus.OPEN.value,
    "PARTIALLY_FILLED": OrderStatus.OPEN.value,
    "FILLED": OrderStatus.CLOSED.value,
    "CANCELLED": OrderStatus.CANCELED.value,
}


def _parse_side(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return OrderSide.from_exchange(value).value
    except ValueError:
        return None


def _lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


def _product(a: Decimal | None, b: Decimal | None) -> Decimal | None:
    """Multiply two figures, or None when either is unknown."""
    if a is None or b is None:
        return None
    return a * b


class CoinmateExchange(Exchange):
    """
    CoinMate adapter implementing the unified operation set.

    All authenticated calls load markets first so that symbols and currency
    codes can be resolved in responses.
    """

    # Highest nonce handed out so far
    _last_nonce = 0

    def __init__(self, config: ExchangeSettings | None = None, **options: Any) -> None:
        """
        Initialize the adapter.

        Args:
            config: Settings with credentials and connection options
            **options: Extra exchange options (e.g., ``markets`` to start warm)

        """
        self.settings = config or ExchangeSettings()
        super().__init__(self.deep_extend(self.settings.to_exchange_config(), options))

    def describe(self) -> dict[str, Any]:
        return self.deep_extend(
            super().describe(),
            {
                "id": "coinmate",
                "name": "CoinMate",
                "countries": ["GB", "CZ", "EU"],  # UK, Czech Republic
                "rateLimit": 1000,
                "precisionMode": DECIMAL_PLACES,
                "has": {
                    "spot": True,
                    "cancelOrder": True,
                    "createOrder": True,
                    "fetchBalance": True,
                    "fetchCurrencies": False,
                    "fetchDepositAddress": True,
                    "fetchMarkets": True,
                    "fetchMyTrades": True,
                    "fetchOpenOrders": True,
                    "fetchOrder": True,
                    "fetchOrderBook": True,
                    "fetchOrders": True,
                    "fetchTicker": True,
                    "fetchTrades": True,
                    "fetchTradingFee": True,
                    "fetchTransactions": True,
                    "withdraw": True,
                },
                "urls": {
                    "api": "https://coinmate.io/api",
                    "www": "https://coinmate.io",
                    "fees": "https://coinmate.io/fees",
                    "doc": [
                        "https://coinmate.docs.apiary.io",
                        "https://coinmate.io/developers",
                    ],
                },
                "requiredCredentials": {
                    "apiKey": True,
                    "secret": True,
                    "uid": True,
                },
                "api": {
                    "public": {
                        "get": [
                            "orderBook",
                            "ticker",
                            "transactions",
                            "tradingPairs",
                        ],
                    },
                    "private": {
                        "post": [
                            "balances",
                            "bitcoinCashWithdrawal",
                            "bitcoinCashDepositAddresses",
                            "bitcoinDepositAddresses",
                            "bitcoinWithdrawal",
                            "bitcoinWithdrawalFees",
                            "buyInstant",
                            "buyLimit",
                            "cancelOrder",
                            "cancelOrderWithInfo",
                            "createVoucher",
                            "dashDepositAddresses",
                            "dashWithdrawal",
                            "ethereumWithdrawal",
                            "ethereumDepositAddresses",
                            "litecoinWithdrawal",
                            "litecoinDepositAddresses",
                            "openOrders",
                            "order",
                            "orderHistory",
                            "pusherAuth",
                            "redeemVoucher",
                            "replaceByBuyLimit",
                            "replaceByBuyInstant",
                            "replaceBySellLimit",
                            "replaceBySellInstant",
                            "rippleDepositAddresses",
                            "rippleWithdrawal",
                            "sellInstant",
                            "sellLimit",
                            "transactionHistory",
                            "traderFees",
                            "tradeHistory",
                            "transfer",
                            "transferHistory",
                            "unconfirmedBitcoinDeposits",
                            "unconfirmedBitcoinCashDeposits",
                            "unconfirmedDashDeposits",
                            "unconfirmedEthereumDeposits",
                            "unconfirmedLitecoinDeposits",
                            "unconfirmedRippleDeposits",
                        ],
                    },
                },
                "fees": {
                    "trading": {
                        "maker": 0.0005,
                        "taker": 0.0015,
                    },
                },
                "commonCurrencies": {
                    "BCC": "BCH",
                    "BCHABC": "BCH",
                    "DRK": "DASH",
                },
            },
        )

    # ------------------------------------------------------------------
    # Markets
    # ------------------------------------------------------------------

    async def fetch_markets(self, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """
        Fetch all trading pairs.

        Returns:
            One market structure per pair with price/amount decimal places
            and the minimum order amount; maxima are never published

        """
        response = await self.public_get("tradingPairs", params)
        result = []
        for item in self.safe_list(response, "data", []):
            pair = TradingPairData.model_validate(item)
            if pair.name is None or pair.first_currency is None or pair.second_currency is None:
                logger.warning(f"{self.id} skipping incomplete trading pair: {item}")
                continue

            base = self.safe_currency_code(pair.first_currency)
            quote = self.safe_currency_code(pair.second_currency)
            market = Market(
                id=pair.name,
                symbol=f"{base}/{quote}",
                base=base,
                quote=quote,
                base_id=pair.first_currency,
                quote_id=pair.second_currency,
                active=None,
                precision=Precision(
                    price=pair.price_decimals,
                    amount=pair.lot_decimals,
                ),
                limits=Limits(amount=MinMax(min=pair.min_amount, max=None)),
                info=item,
            )
            result.append(market.model_dump(by_alias=True))

        logger.info(f"{self.id} listed {len(result)} markets")
        return result

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    async def fetch_balance(self, params: dict[str, Any] | None = None) -> BalanceSheet:
        """Fetch free, reserved and total funds per currency."""
        await self.load_markets()
        response = await self.private_post("balances", params)
        balance = self.parse_balance(response)
        return BalanceSheet(
            balances={
                code: Balance.model_validate(balance[code]) for code in balance["free"]
            },
            info=response,
        )

    def parse_balance(self, response: dict[str, Any]) -> dict[str, Any]:
        """Shape the balances payload; a missing figure is derived from the other two."""
        balances = self.safe_dict(response, "data", {})
        result: dict[str, Any] = {"info": response}
        for currency_id, raw in balances.items():
            code = self.safe_currency_code(currency_id)
            account = self.account()
            account["free"] = self.safe_string(raw, "available")
            account["used"] = self.safe_string(raw, "reserved")
            account["total"] = self.safe_string(raw, "balance")
            result[code] = account
        return self.safe_balance(result)

    # ------------------------------------------------------------------
    # Market data
    # ------------------------------------------------------------------

    async def fetch_order_book(
        self,
        symbol: str,
        limit: int | None = None,
        params: dict[str, Any] | None = None,
    ) -> OrderBookSnapshot:
        """
        Fetch the full, ungrouped order book of a market.

        Args:
            symbol: Unified symbol (e.g., "BTC/EUR")
            limit: Keep at most this many levels per side
            params: Extra request parameters

        """
        await self.load_markets()
        market = self.market(symbol)
        request = {
            "currencyPair": market["id"],
            "groupByPriceLimit": "False",
        }
        response = await self.public_get("orderBook", self.extend(request, params or {}))
        data = self.safe_dict(response, "data", {})
        timestamp = self.safe_timestamp(data, "timestamp")
        orderbook = self.parse_order_book(
            data, market["symbol"], timestamp, "bids", "asks", "price", "amount"
        )
        if limit is not None:
            orderbook["bids"] = orderbook["bids"][:limit]
            orderbook["asks"] = orderbook["asks"][:limit]
        return OrderBookSnapshot.model_validate(orderbook)

    async def fetch_ticker(
        self, symbol: str, params: dict[str, Any] | None = None
    ) -> Ticker:
        """Fetch the ticker of one market."""
        await self.load_markets()
        request = {
            "currencyPair": self.market_id(symbol),
        }
        response = await self.public_get("ticker", self.extend(request, params or {}))
        raw = self.safe_dict(response, "data", {})
        ticker = TickerData.model_validate(raw)

        return Ticker(
            symbol=symbol,
            timestamp=self.safe_timestamp(raw, "timestamp"),
            high=ticker.high,
            low=ticker.low,
            bid=ticker.bid,
            bid_volume=None,
            ask=ticker.ask,
            ask_volume=None,
            vwap=None,
            open=None,
            close=ticker.last,
            last=ticker.last,
            previous_close=None,
            change=None,
            percentage=None,
            average=None,
            base_volume=ticker.amount,
            quote_volume=None,
            info=raw,
        )

    async def fetch_trades(
        self,
        symbol: str,
        since: int | None = None,
        limit: int | None = None,
        params: dict[str, Any] | None = None,
    ) -> list[Trade]:
        """
        Fetch recent public trades.

        CoinMate only serves a fixed window of TRADES_HISTORY_MINUTES;
        ``since`` and ``limit`` filter within that window and never widen it.
        """
        await self.load_markets()
        market = self.market(symbol)
        request = {
            "currencyPair": market["id"],
            "minutesIntoHistory": TRADES_HISTORY_MINUTES,
        }
        response = await self.public_get("transactions", self.extend(params or {}, request))
        trades = self.parse_trades(self.safe_list(response, "data", []), market, since, limit)
        return [Trade.model_validate(trade) for trade in trades]

    # ------------------------------------------------------------------
    # Trade parsing
    # ------------------------------------------------------------------

    def parse_trade(
        self, trade: dict[str, Any], market: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """
        Parse a raw public or private trade into a trade structure.

        The kind is decided by the presence of ``createdTimestamp``, which
        only account fills carry.
        """
        raw = raw_trade_adapter.validate_python(dict(trade))
        if isinstance(raw, PrivateTradeData):
            return self._parse_private_trade(raw, trade, market)
        return self._parse_public_trade(raw, trade, market)

    def _parse_private_trade(
        self,
        raw: PrivateTradeData,
        info: dict[str, Any],
        market: dict[str, Any] | None,
    ) -> dict[str, Any]:
        market = self.safe_market(raw.currency_pair, market)
        taker_or_maker = (
            TakerOrMaker.MAKER if raw.fee_type == "MAKER" else TakerOrMaker.TAKER
        )
        return {
            "id": raw.transaction_id,
            "timestamp": raw.created_timestamp,
            "datetime": self.iso8601(raw.created_timestamp),
            "symbol": market["symbol"],
            "type": _lower(raw.order_type),
            "side": _parse_side(raw.type),
            "order": raw.order_id,
            "takerOrMaker": taker_or_maker.value,
            "price": raw.price,
            "amount": raw.amount,
            "cost": _product(raw.amount, raw.price),
            "fee": {
                "cost": raw.fee,
                "currency": market["quote"],
            },
            "info": info,
        }

    def _parse_public_trade(
        self,
        raw: PublicTradeData,
        info: dict[str, Any],
        market: dict[str, Any] | None,
    ) -> dict[str, Any]:
        if market is None:
            market = self.safe_market(raw.currency_pair)
        return {
            "id": raw.transaction_id,
            "timestamp": raw.timestamp,
            "datetime": self.iso8601(raw.timestamp),
            "symbol": market["symbol"],
            "type": None,
            "side": None,
            "order": None,
            "takerOrMaker": None,
            "price": raw.price,
            "amount": raw.amount,
            "cost": _product(raw.price, raw.amount),
            "fee": None,
            "info": info,
        }

    async def fetch_my_trades(
        self,
        symbol: str | None = None,
        since: int | None = None,
        limit: int | None = None,
        params: dict[str, Any] | None = None,
    ) -> list[Trade]:
        """Fetch the account's fills, newest DEFAULT_HISTORY_LIMIT by default."""
        await self.load_markets()
        if limit is None:
            limit = DEFAULT_HISTORY_LIMIT
        request: dict[str, Any] = {
            "limit": limit,
        }
        market = None
        if symbol is not None:
            market = self.market(symbol)
            request["currencyPair"] = market["id"]
        if since is not None:
            request["timestampFrom"] = since

        response = await self.private_post("tradeHistory", self.extend(request, params or {}))
        trades = self.parse_trades(self.safe_list(response, "data", []), market, since, limit)
        return [Trade.model_validate(trade) for trade in trades]

    # ------------------------------------------------------------------
    # Deposits and withdrawals
    # ------------------------------------------------------------------

    async def fetch_transactions(
        self,
        code: str | None = None,
        since: int | None = None,
        limit: int | None = None,
        params: dict[str, Any] | None = None,
    ) -> list[Transaction]:
        """
        Fetch deposits and withdrawals, optionally for one currency.

        The currency filter is applied by CoinMate; ``code`` may be any
        spelling that normalizes to a known currency (e.g., "ltc").
        """
        await self.load_markets()
        request: dict[str, Any] = {
            "limit": DEFAULT_HISTORY_LIMIT,
        }
        if limit is not None:
            request["limit"] = limit
        if since is not None:
            request["timestampFrom"] = since
        if code is not None:
            request["currency"] = self.currency_id(self.safe_currency_code(code))

        response = await self.private_post("transferHistory", self.extend(request, params or {}))
        items = self.safe_list(response, "data", [])
        transactions = self.parse_transactions(items, None, since, limit)
        return [Transaction.model_validate(item) for item in transactions]

    def parse_transaction_status(self, status: str | None) -> str | None:
        """Map COMPLETED to "ok"; any other status is passed through verbatim."""
        return self.safe_string(TRANSACTION_STATUSES, status, status)

    def parse_transaction(
        self, transaction: dict[str, Any], currency: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Parse a raw deposit or withdrawal into a transaction structure."""
        raw = TransferData.model_validate(dict(transaction))
        code = self.safe_currency_code(raw.amount_currency, currency)
        return {
            "id": raw.transaction_id,
            "timestamp": raw.timestamp,
            "datetime": self.iso8601(raw.timestamp),
            "currency": code,
            "amount": raw.amount,
            "type": _lower(raw.transfer_type),
            "txid": raw.txid,
            "address": raw.destination,
            "tag": raw.destination_tag,
            "status": self.parse_transaction_status(raw.transfer_status),
            "fee": {
                "cost": raw.fee,
                "currency": code,
            },
            "info": transaction,
        }

    async def fetch_deposit_address(
        self, code: str, params: dict[str, Any] | None = None
    ) -> DepositAddress:
        """
        Fetch a deposit address for a currency.

        Raises:
            NotSupported: If CoinMate has no deposit endpoint for the currency

        """
        await self.load_markets()
        path = DEPOSIT_ADDRESS_ENDPOINTS.get(code)
        if path is None:
            raise NotSupported(f"{self.id} has no deposit addresses for {code}")

        response = await self.private_post(path, params)
        addresses = self.safe_list(response, "data", [])
        return DepositAddress(
            currency=code,
            address=self.safe_string(addresses, 0),
            tag=None,
            info=response,
        )

    async def withdraw(
        self,
        code: str,
        amount: Decimal | float,
        address: str,
        tag: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> WithdrawalReceipt:
        """
        Withdraw a currency to an external address.

        Raises:
            NotSupported: If CoinMate has no withdrawal endpoint for the currency

        """
        await self.load_markets()
        path = WITHDRAWAL_ENDPOINTS.get(code)
        if path is None:
            raise NotSupported(f"{self.id} does not withdraw {code}")

        request: dict[str, Any] = {
            "amount": amount,
            "address": address,
        }
        if tag is not None:
            request["destinationTag"] = tag

        response = await self.private_post(path, self.extend(request, params or {}))
        logger.info(f"{self.id} withdrawal of {amount} {code} submitted")
        return WithdrawalReceipt(id=self.safe_string(response, "data"), info=response)

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    async def create_order(
        self,
        symbol: str,
        type: str,
        side: str,
        amount: Decimal | float,
        price: Decimal | float | None = None,
        params: dict[str, Any] | None = None,
    ) -> CreatedOrder:
        """
        Place an order.

        For market buys ``amount`` is the quote-currency total to spend; for
        market sells it is the base-currency quantity. Limit orders take a
        base-currency ``amount`` and a ``price``.

        Raises:
            InvalidOrder: If the side/type pair is unsupported or a limit
                order has no price

        """
        await self.load_markets()
        market = self.market(symbol)

        try:
            endpoint = ORDER_ENDPOINTS[(OrderSide(side), OrderType(type))]
        except (ValueError, KeyError) as e:
            raise InvalidOrder(f"{self.id} does not support {type} {side} orders") from e

        request: dict[str, Any] = {
            "currencyPair": market["id"],
            endpoint.amount_key: amount,
        }
        if endpoint.requires_price:
            if price is None:
                raise InvalidOrder(f"{self.id} {type} orders require a price")
            request["price"] = price

        response = await self.private_post(endpoint.path, self.extend(request, params or {}))
        order_id = self.safe_string(response, "data")
        if order_id is None:
            raise ExchangeError(f"{self.id} {endpoint.path} returned no order id")

        logger.info(f"{self.id} {type} {side} order {order_id} placed on {symbol}")
        return CreatedOrder(id=order_id, info=response)

    async def cancel_order(
        self, id: str, symbol: str | None = None, params: dict[str, Any] | None = None
    ) -> Any:
        """Cancel an order; CoinMate identifies orders by id alone."""
        return await self.private_post("cancelOrder", self.extend({"orderId": id}, params or {}))

    async def fetch_open_orders(
        self,
        symbol: str | None = None,
        since: int | None = None,
        limit: int | None = None,
        params: dict[str, Any] | None = None,
    ) -> list[Order]:
        """Fetch the account's resting orders."""
        await self.load_markets()
        request: dict[str, Any] = {}
        market = None
        if symbol is not None:
            market = self.market(symbol)
            request["currencyPair"] = market["id"]

        response = await self.private_post("openOrders", self.extend(request, params or {}))
        orders = self.parse_orders(self.safe_list(response, "data", []), market, since, limit)
        # openOrders entries carry no status field
        return [
            Order.model_validate(
                self.extend(order, {"status": order["status"] or OrderStatus.OPEN.value})
            )
            for order in orders
        ]

    async def fetch_orders(
        self,
        symbol: str,
        since: int | None = None,
        limit: int | None = None,
        params: dict[str, Any] | None = None,
    ) -> list[Order]:
        """Fetch the order history of a market."""
        await self.load_markets()
        market = self.market(symbol)
        request: dict[str, Any] = {
            "currencyPair": market["id"],
        }
        if limit is not None:
            request["limit"] = limit

        response = await self.private_post("orderHistory", self.extend(request, params or {}))
        orders = self.parse_orders(self.safe_list(response, "data", []), market, since, limit)
        return [Order.model_validate(order) for order in orders]

    async def fetch_order(
        self,
        id: str,
        symbol: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> Order:
        """Fetch one order by id."""
        await self.load_markets()
        market = self.market(symbol) if symbol is not None else None
        response = await self.private_post("order", self.extend({"orderId": id}, params or {}))
        return Order.model_validate(
            self.parse_order(self.safe_dict(response, "data", {}), market)
        )

    def parse_order_status(self, status: str | None) -> str | None:
        """Map CoinMate order states to open/closed/canceled; unknown pass through."""
        return self.safe_string(ORDER_STATUSES, status, status)

    def parse_order(
        self, order: dict[str, Any], market: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Parse a raw order from any of the order endpoints into an order structure."""
        raw = OrderData.model_validate(dict(order))
        market = self.safe_market(raw.currency_pair, market)

        amount = raw.original_amount if raw.original_amount is not None else raw.amount
        remaining = (
            raw.remaining_amount if raw.remaining_amount is not None else raw.amount
        )
        filled = amount - remaining if amount is not None and remaining is not None else None
        average = raw.avg_price
        cost = _product(filled, average if average is not None else raw.price)

        return {
            "id": raw.id,
            "timestamp": raw.timestamp,
            "datetime": self.iso8601(raw.timestamp),
            "symbol": market["symbol"],
            "type": _lower(raw.order_trade_type),
            "side": _parse_side(raw.type),
            "price": raw.price,
            "amount": amount,
            "filled": filled,
            "remaining": remaining,
            "average": average,
            "cost": cost,
            "status": self.parse_order_status(raw.status),
            "info": order,
        }

    async def fetch_trading_fee(
        self, symbol: str, params: dict[str, Any] | None = None
    ) -> TradingFee:
        """
        Fetch the account's maker/taker rates for a market.

        CoinMate reports percent; the published schedule in ``fees`` is used
        for a rate the response omits.
        """
        await self.load_markets()
        market = self.market(symbol)
        request = {
            "currencyPair": market["id"],
        }
        response = await self.private_post("traderFees", self.extend(request, params or {}))
        raw = self.safe_dict(response, "data", {})
        rates = TraderFeesData.model_validate(raw)
        schedule = self.fees["trading"]

        return TradingFee(
            symbol=market["symbol"],
            maker=rates.maker / 100 if rates.maker is not None else schedule["maker"],
            taker=rates.taker / 100 if rates.taker is not None else schedule["taker"],
            info=raw,
        )

    # ------------------------------------------------------------------
    # Signing and dispatch
    # ------------------------------------------------------------------

    async def api_call(
        self,
        api: ApiAccess | str,
        method: HttpMethod | str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Call one endpoint of the API table with params.

        Raises:
            NotSupported: If the endpoint is not in the API table

        """
        api, method = ApiAccess(api), HttpMethod(method)
        declared = self.safe_dict(self.api, api.value, {})
        if path not in self.safe_list(declared, method.value.lower(), []):
            raise NotSupported(
                f"{self.id} has no {api.value} {method.value} endpoint '{path}'"
            )
        logger.debug(f"{self.id} {method.value} {api.value}/{path}")
        return await self.request(path, api.value, method.value, dict(params or {}))

    async def public_get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Call a public GET endpoint."""
        return await self.api_call(ApiAccess.PUBLIC, HttpMethod.GET, path, params)

    async def private_post(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Call a private POST endpoint."""
        return await self.api_call(ApiAccess.PRIVATE, HttpMethod.POST, path, params)

    def nonce(self) -> int:
        """Get a millisecond nonce, strictly increasing within the instance."""
        self._last_nonce = max(self.milliseconds(), self._last_nonce + 1)
        return self._last_nonce

    def sign(
        self,
        path: str,
        api: str = "public",
        method: str = "GET",
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> dict[str, Any]:
        """
        Build a CoinMate request.

        Public requests carry params in the query string. Private requests
        carry them in a form body together with clientId, nonce, publicKey
        and an upper-case hex HMAC-SHA256 of ``nonce + uid + apiKey``.

        Raises:
            AuthenticationError: If a private request lacks credentials

        """
        params = params or {}
        url = self.urls["api"] + "/" + path

        if api == ApiAccess.PUBLIC:
            if params:
                url += "?" + self.urlencode(params)
            return {"url": url, "method": method, "body": body, "headers": headers}

        self.check_required_credentials()
        nonce = str(self.nonce())
        auth = nonce + self.uid + self.apiKey
        signature = self.hmac(self.encode(auth), self.encode(self.secret))
        body = self.urlencode(
            self.extend(
                {
                    "clientId": self.uid,
                    "nonce": nonce,
                    "publicKey": self.apiKey,
                    "signature": signature.upper(),
                },
                params,
            )
        )
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
        }
        return {"url": url, "method": method, "body": body, "headers": headers}

    async def request(
        self,
        path: str,
        api: str = "public",
        method: str = "GET",
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        body: str | None = None,
        config: dict[str, Any] | None = None,
    ) -> Any:
        """
        Perform a request and fail on an error envelope.

        Raises:
            ExchangeError: With the raw response as JSON when CoinMate
                reports an error

        """
        response = await self.fetch2(
            path, api, method, params or {}, headers, body, config or {}
        )
        if not isinstance(response, dict):
            return response

        envelope = CoinmateResponse.model_validate(response)
        if envelope.error:
            logger.warning(f"{self.id} {path} failed: {envelope.error_message}")
            raise ExchangeError(f"{self.id} {self.json(response)}")
        return response
