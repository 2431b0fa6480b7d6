"""
CoinMate REST API Pydantic Models.

This module implements Pydantic models for the ``data`` payloads of CoinMate
REST responses. The models only decode and coerce; mapping to unified
structures happens in the exchange adapter.

Key design principles:
- Field aliases keep the exchange's camelCase names at the wire boundary
- Every scalar uses a null-safe type: absent or invalid values become None
- Unknown fields are ignored so new exchange fields never break parsing
- Trade payloads decode into one of two variants before any mapping runs
"""

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
)


def _to_str(value: Any) -> str | None:
    """Coerce a scalar to str; containers and None become None."""
    if value is None or isinstance(value, Mapping | list | tuple | set):
        return None
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _to_decimal(value: Any) -> Decimal | None:
    """Coerce a number or numeric string to a finite Decimal."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int | float | str):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    else:
        return None
    return result if result.is_finite() else None


def _to_int(value: Any) -> int | None:
    """Coerce a number or numeric string to int, truncating fractions."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _to_decimal(value)
    return int(number) if number is not None else None


# Null-safe scalar types
SafeStr = Annotated[str | None, BeforeValidator(_to_str)]
SafeInt = Annotated[int | None, BeforeValidator(_to_int)]
SafeDecimal = Annotated[Decimal | None, BeforeValidator(_to_decimal)]

_WIRE_CONFIG = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class CoinmateResponse(BaseModel):
    """
    Envelope shared by every CoinMate response.

    A truthy ``error`` is the only failure signal; false, null and an absent
    key all mean success. ``data`` is endpoint-specific.
    """

    error: Any = None
    error_message: SafeStr = Field(default=None, alias="errorMessage")
    data: Any = None

    model_config = _WIRE_CONFIG


class TradingPairData(BaseModel):
    """One entry of the tradingPairs listing."""

    name: SafeStr = None
    first_currency: SafeStr = Field(default=None, alias="firstCurrency")
    second_currency: SafeStr = Field(default=None, alias="secondCurrency")
    price_decimals: SafeInt = Field(default=None, alias="priceDecimals")
    lot_decimals: SafeInt = Field(default=None, alias="lotDecimals")
    min_amount: SafeDecimal = Field(default=None, alias="minAmount")

    model_config = _WIRE_CONFIG


class TickerData(BaseModel):
    """Ticker payload. ``amount`` is the 24h base volume."""

    last: SafeDecimal = None
    high: SafeDecimal = None
    low: SafeDecimal = None
    amount: SafeDecimal = None
    bid: SafeDecimal = None
    ask: SafeDecimal = None

    model_config = _WIRE_CONFIG


# Trade payloads
class PrivateTradeData(BaseModel):
    """An account fill from tradeHistory; identified by createdTimestamp."""

    transaction_id: SafeStr = Field(default=None, alias="transactionId")
    created_timestamp: SafeInt = Field(default=None, alias="createdTimestamp")
    currency_pair: SafeStr = Field(default=None, alias="currencyPair")
    type: SafeStr = None  # "BUY" or "SELL"
    order_type: SafeStr = Field(default=None, alias="orderType")
    order_id: SafeStr = Field(default=None, alias="orderId")
    amount: SafeDecimal = None
    price: SafeDecimal = None
    fee: SafeDecimal = None
    fee_type: SafeStr = Field(default=None, alias="feeType")  # "MAKER" or "TAKER"

    model_config = _WIRE_CONFIG


class PublicTradeData(BaseModel):
    """A print from the public transactions endpoint."""

    transaction_id: SafeStr = Field(default=None, alias="transactionId")
    timestamp: SafeInt = None
    currency_pair: SafeStr = Field(default=None, alias="currencyPair")
    price: SafeDecimal = None
    amount: SafeDecimal = None

    model_config = _WIRE_CONFIG


def trade_kind(value: Any) -> str:
    """Discriminate raw trades by the presence of createdTimestamp."""
    if isinstance(value, dict):
        return "private" if "createdTimestamp" in value else "public"
    return "private" if isinstance(value, PrivateTradeData) else "public"


RawTrade = Annotated[
    Annotated[PrivateTradeData, Tag("private")]
    | Annotated[PublicTradeData, Tag("public")],
    Discriminator(trade_kind),
]

raw_trade_adapter: TypeAdapter[PrivateTradeData | PublicTradeData] = TypeAdapter(
    RawTrade
)


class TransferData(BaseModel):
    """A deposit or withdrawal from transferHistory."""

    transaction_id: SafeStr = Field(default=None, alias="transactionId")
    timestamp: SafeInt = None  # milliseconds
    amount_currency: SafeStr = Field(default=None, alias="amountCurrency")
    amount: SafeDecimal = None
    fee: SafeDecimal = None
    wallet_type: SafeStr = Field(default=None, alias="walletType")
    transfer_type: SafeStr = Field(default=None, alias="transferType")
    transfer_status: SafeStr = Field(default=None, alias="transferStatus")
    txid: SafeStr = None
    destination: SafeStr = None
    destination_tag: SafeStr = Field(default=None, alias="destinationTag")

    model_config = _WIRE_CONFIG


class OrderData(BaseModel):
    """
    An order from openOrders, orderHistory or order.

    Open orders report the unfilled size in ``amount``; history entries
    report ``originalAmount`` and ``remainingAmount``.
    """

    id: SafeStr = None
    timestamp: SafeInt = None  # milliseconds
    type: SafeStr = None  # "BUY" or "SELL"
    currency_pair: SafeStr = Field(default=None, alias="currencyPair")
    price: SafeDecimal = None
    amount: SafeDecimal = None
    original_amount: SafeDecimal = Field(default=None, alias="originalAmount")
    remaining_amount: SafeDecimal = Field(default=None, alias="remainingAmount")
    avg_price: SafeDecimal = Field(default=None, alias="avgPrice")
    status: SafeStr = None
    order_trade_type: SafeStr = Field(default=None, alias="orderTradeType")

    model_config = _WIRE_CONFIG


class TraderFeesData(BaseModel):
    """Fee rates for a pair, in percent."""

    maker: SafeDecimal = None
    taker: SafeDecimal = None
    timestamp: SafeInt = None

    model_config = _WIRE_CONFIG
