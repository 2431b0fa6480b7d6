"""
Enums for the unified exchange schema.

This module defines the standardized values shared by every exchange adapter.
Adapters translate exchange-specific vocabulary into these values at the
boundary, so callers never see raw exchange strings for sides, order types
or roles.

"""

from __future__ import annotations

import enum

# =============================================================================
# REQUEST ROUTING ENUMS
# =============================================================================


class ApiAccess(str, enum.Enum):
    """
    Access level of an API endpoint.

    Public endpoints are unauthenticated; private endpoints are signed.
    """

    PUBLIC = "public"
    PRIVATE = "private"


class HttpMethod(str, enum.Enum):
    """HTTP verbs used by REST endpoints."""

    GET = "GET"
    POST = "POST"


# =============================================================================
# TRADING ENUMS
# =============================================================================


class OrderSide(str, enum.Enum):
    """
    Standardized enum for order and trade sides.

    Represents the direction of an order or trade (buy or sell) in a
    consistent format across all exchanges.
    """

    BUY = "buy"
    SELL = "sell"

    @classmethod
    def from_exchange(cls, side: str) -> OrderSide:
        """
        Convert exchange side format to standardized enum.

        Args:
            side: Exchange side string (e.g., "BUY", "SELL", "B", "S")

        Returns:
            Standardized OrderSide enum value

        """
        normalized = side.lower()
        if normalized in {"buy", "b", "bid"}:
            return cls.BUY
        elif normalized in {"sell", "s", "ask"}:
            return cls.SELL
        else:
            raise ValueError(f"Invalid order side: {side}")


class OrderType(str, enum.Enum):
    """Order types accepted by the unified create_order operation."""

    MARKET = "market"  # Executes immediately against the book
    LIMIT = "limit"  # Rests at a given price


class TakerOrMaker(str, enum.Enum):
    """
    Trade role for fee classification.

    Makers add liquidity to the book, takers remove it.
    """

    TAKER = "taker"
    MAKER = "maker"


class OrderStatus(str, enum.Enum):
    """Unified order lifecycle states."""

    OPEN = "open"
    CLOSED = "closed"
    CANCELED = "canceled"
