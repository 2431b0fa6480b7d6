"""
Tests for CoinMate account operations.

Covers balances, deposit/withdrawal history, deposit addresses,
withdrawals and trading fee rates.
"""

from decimal import Decimal

import pytest
from ccxt.base.errors import NotSupported

from src.exchange.model import Fee
from tests.unit.exchange.helpers import form_of, load_fixture, make_exchange, ok, sent


class TestFetchBalance:
    """Test balance retrieval."""

    @pytest.mark.asyncio
    async def test_balances_per_currency(self):
        """Test available/reserved/balance map to free/used/total."""
        response = load_fixture("balances")
        exchange, fetch = make_exchange(response)

        sheet = await exchange.fetch_balance()

        assert sheet.currencies == ["BTC", "EUR", "LTC"]
        assert sheet["BTC"].free == Decimal("1.0")
        assert sheet["BTC"].used == Decimal("0.5")
        assert sheet["BTC"].total == Decimal("1.5")
        assert sheet.used["EUR"] == Decimal("0")
        assert sheet.info == response
        assert sent(fetch)[0] == "https://coinmate.io/api/balances"

    @pytest.mark.asyncio
    async def test_missing_total_is_derived(self):
        """Test total is free + used when CoinMate omits it."""
        exchange, _ = make_exchange(load_fixture("balances"))

        sheet = await exchange.fetch_balance()

        assert sheet.total["LTC"] == Decimal("5")

    @pytest.mark.asyncio
    async def test_currency_ids_are_normalized(self):
        """Test lower-case and legacy ids become common codes."""
        exchange, _ = make_exchange(
            ok({"xbt": {"balance": 1, "reserved": 0, "available": 1}})
        )

        sheet = await exchange.fetch_balance()

        assert "BTC" in sheet
        assert "xbt" not in sheet


class TestFetchTransactions:
    """Test deposit and withdrawal history."""

    @pytest.mark.asyncio
    async def test_transfers_are_parsed(self):
        """Test transfers map type, status, address and fee."""
        exchange, fetch = make_exchange(load_fixture("transferHistory"))

        deposit, withdrawal = await exchange.fetch_transactions()

        assert deposit.id == "1862815"
        assert deposit.timestamp == 1516803982388
        assert deposit.currency == "LTC"
        assert deposit.amount == Decimal("1")
        assert deposit.type == "deposit"
        assert deposit.status == "ok"
        assert deposit.address == "LQrtSKA6LnhcwRrEuiborQJnjFF56xqsFn"
        assert deposit.txid.startswith("ccb9255d")
        assert deposit.tag is None
        assert deposit.fee == Fee(cost=Decimal("0"), currency="LTC")

        assert withdrawal.type == "withdrawal"
        assert withdrawal.status == "WAITING"
        assert withdrawal.txid is None

        body = form_of(sent(fetch)[3])
        assert body["limit"] == "1000"
        assert "currency" not in body

    @pytest.mark.asyncio
    async def test_currency_since_and_limit_are_sent(self):
        """Test filters are sent to CoinMate."""
        btc_only = ok(load_fixture("transferHistory")["data"][1:])
        exchange, fetch = make_exchange(btc_only)

        transactions = await exchange.fetch_transactions(
            "BTC", since=1516800000000, limit=10
        )

        assert [item.currency for item in transactions] == ["BTC"]
        body = form_of(sent(fetch)[3])
        assert body["currency"] == "BTC"
        assert body["timestampFrom"] == "1516800000000"
        assert body["limit"] == "10"

    @pytest.mark.asyncio
    async def test_lower_case_code_is_normalized(self):
        """Test a lower-case code is sent as the currency id and its transfers kept."""
        ltc_only = ok(load_fixture("transferHistory")["data"][:1])
        exchange, fetch = make_exchange(ltc_only)

        transactions = await exchange.fetch_transactions("ltc")

        assert [item.id for item in transactions] == ["1862815"]
        assert transactions[0].currency == "LTC"
        assert form_of(sent(fetch)[3])["currency"] == "LTC"

    @pytest.mark.asyncio
    async def test_common_code_is_sent_as_legacy_id(self):
        """Test a common code is translated back to the id CoinMate lists."""
        exchange, fetch = make_exchange(
            load_fixture("tradingPairs"), ok([]), warm=False
        )

        await exchange.fetch_transactions("DASH")

        assert form_of(sent(fetch)[3])["currency"] == "DRK"

    @pytest.mark.asyncio
    async def test_since_filters_locally(self):
        """Test since also drops older transfers from the result."""
        exchange, _ = make_exchange(load_fixture("transferHistory"))

        transactions = await exchange.fetch_transactions(since=1516804000000)

        assert [item.id for item in transactions] == ["1862816"]

    @pytest.mark.parametrize(
        ("status", "expected"),
        [("COMPLETED", "ok"), ("WAITING", "WAITING"), ("CANCELED", "CANCELED"), (None, None)],
    )
    def test_transaction_status(self, status, expected):
        """Test only COMPLETED is normalized."""
        exchange, _ = make_exchange()

        assert exchange.parse_transaction_status(status) == expected


class TestDepositsAndWithdrawals:
    """Test deposit addresses and withdrawals."""

    @pytest.mark.asyncio
    async def test_deposit_address(self):
        """Test the first listed address is returned."""
        exchange, fetch = make_exchange(ok(["1BvBMSEYstWetqTFn5Au4m4GFg7xJaNVN2"]))

        address = await exchange.fetch_deposit_address("BTC")

        assert address.currency == "BTC"
        assert address.address == "1BvBMSEYstWetqTFn5Au4m4GFg7xJaNVN2"
        assert address.tag is None
        assert sent(fetch)[0].endswith("/bitcoinDepositAddresses")

    @pytest.mark.asyncio
    async def test_unsupported_deposit_currency(self):
        """Test currencies without an endpoint fail before any request."""
        exchange, fetch = make_exchange()

        with pytest.raises(NotSupported, match="DOGE"):
            await exchange.fetch_deposit_address("DOGE")

        fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_withdraw_with_tag(self):
        """Test a tag is sent as destinationTag."""
        exchange, fetch = make_exchange(ok(778899))

        receipt = await exchange.withdraw(
            "XRP", Decimal("25"), "rLHzPsX6oXkzU2qL12kHCH8G8cnZv1rBJh", tag="1234"
        )

        assert receipt.id == "778899"
        url, _, _, body = sent(fetch)
        assert url.endswith("/rippleWithdrawal")
        form = form_of(body)
        assert form["amount"] == "25"
        assert form["address"] == "rLHzPsX6oXkzU2qL12kHCH8G8cnZv1rBJh"
        assert form["destinationTag"] == "1234"

    @pytest.mark.asyncio
    async def test_withdraw_without_tag(self):
        """Test no destinationTag is sent when no tag is given."""
        exchange, fetch = make_exchange(ok(1))

        await exchange.withdraw("BTC", Decimal("0.01"), "1BvBMSEYstWetqTFn5Au4m4GFg7xJaNVN2")

        form = form_of(sent(fetch)[3])
        assert "destinationTag" not in form
        assert form["amount"] == "0.01"

    @pytest.mark.asyncio
    async def test_unsupported_withdrawal_currency(self):
        """Test withdrawals of unknown currencies are rejected."""
        exchange, _ = make_exchange()

        with pytest.raises(NotSupported):
            await exchange.withdraw("EUR", 10, "CZ6508000000192000145399")


class TestFetchTradingFee:
    """Test fee rate retrieval."""

    @pytest.mark.asyncio
    async def test_percent_rates_become_fractions(self):
        """Test percent rates are divided by 100."""
        exchange, fetch = make_exchange(
            ok({"maker": "0.12", "taker": "0.25", "timestamp": 1669885200000})
        )

        fee = await exchange.fetch_trading_fee("BTC/EUR")

        assert fee.symbol == "BTC/EUR"
        assert fee.maker == Decimal("0.0012")
        assert fee.taker == Decimal("0.0025")
        assert form_of(sent(fetch)[3])["currencyPair"] == "BTC_EUR"

    @pytest.mark.asyncio
    async def test_missing_rates_use_published_schedule(self):
        """Test omitted rates fall back to the exchange fee schedule."""
        exchange, _ = make_exchange(ok({}))

        fee = await exchange.fetch_trading_fee("BTC/EUR")

        assert fee.maker == Decimal("0.0005")
        assert fee.taker == Decimal("0.0015")
