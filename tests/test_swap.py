"""Tests for the price-then-approve flow."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_account import Account
from eth_utils import to_checksum_address

from scrollswap.abi import ERC20_ABI
from scrollswap.models import WETH, WSTETH, PriceQuote, Token
from scrollswap.swap import (
    MAX_UINT256,
    SELL_AMOUNT,
    approve_spender,
    build_price_query,
    parse_units,
    run_swap,
)

PERMIT2 = "0x000000000022d473030f116ddee9f6b43ac78ba3"
TX_HASH = "0x" + "12" * 32
RECEIPT = {"status": 1, "transactionHash": TX_HASH, "blockNumber": 42}


def make_wallet(receipt=RECEIPT):
    """Wallet double that records submissions."""
    wallet = MagicMock()
    wallet.chain_id = 534351
    wallet.address = Account.from_key("0x" + "11" * 32).address
    wallet.write_contract = AsyncMock(return_value=TX_HASH)
    wallet.wait_for_transaction_receipt = AsyncMock(return_value=receipt)
    return wallet


def make_quotes(payload):
    quotes = MagicMock()
    quotes.get_price = AsyncMock(return_value=PriceQuote.from_json(payload))
    return quotes


class TestParseUnits:
    """Tests for decimal scaling."""

    def test_sell_amount_literal(self):
        assert SELL_AMOUNT == 100000000000000000

    def test_whole_units(self):
        assert parse_units("1", 6) == 1_000_000

    def test_fractional(self):
        assert parse_units("0.000001", 6) == 1

    def test_too_many_decimals(self):
        with pytest.raises(ValueError, match="decimal places"):
            parse_units("0.0000001", 6)

    def test_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            parse_units("-1", 18)

    def test_not_a_number(self):
        with pytest.raises(ValueError, match="invalid decimal"):
            parse_units("abc", 18)


class TestBuildPriceQuery:
    """Tests for price query construction."""

    def test_query_matches_wallet_and_tokens(self):
        wallet = make_wallet()
        params = build_price_query(wallet, WETH, WSTETH).as_params()

        assert params == {
            "chainId": "534351",
            "sellToken": WETH.address,
            "buyToken": WSTETH.address,
            "sellAmount": "100000000000000000",
            "taker": wallet.address,
        }

    def test_sell_amount_ignores_buy_token_decimals(self):
        six_decimals = Token.create(WSTETH.address, ERC20_ABI, symbol="USDC", decimals=6)
        query = build_price_query(make_wallet(), WETH, six_decimals)
        assert query.sell_amount == 100000000000000000


class TestRunSwap:
    """Tests for run_swap."""

    def test_no_approval_when_allowance_null(self):
        wallet = make_wallet()
        quotes = make_quotes({"issues": {"allowance": None}})

        result = asyncio.run(run_swap(wallet, quotes))

        assert result is None
        assert wallet.write_contract.await_count == 0
        assert wallet.wait_for_transaction_receipt.await_count == 0

    def test_no_approval_when_issues_missing(self):
        wallet = make_wallet()
        asyncio.run(run_swap(wallet, make_quotes({"buyAmount": "1"})))
        wallet.write_contract.assert_not_awaited()

    @pytest.mark.parametrize(
        "payload",
        [{"issues": {"allowance": {"spender": None}}}, {"issues": {}}],
    )
    def test_allowance_issue_without_spender_warns(self, payload, caplog):
        wallet = make_wallet()

        result = asyncio.run(run_swap(wallet, make_quotes(payload)))

        assert result is None
        wallet.write_contract.assert_not_awaited()
        assert "Allowance issue without spender" in caplog.text
        assert "already approved" not in caplog.text

    def test_approves_quoted_spender_once(self):
        wallet = make_wallet()
        quotes = make_quotes({"issues": {"allowance": {"actual": "0", "spender": PERMIT2}}})

        result = asyncio.run(run_swap(wallet, quotes))

        wallet.write_contract.assert_awaited_once_with(
            WETH, "approve", [to_checksum_address(PERMIT2), MAX_UINT256]
        )
        wallet.wait_for_transaction_receipt.assert_awaited_once_with(TX_HASH)
        assert result == RECEIPT

    def test_quote_request_params(self):
        wallet = make_wallet()
        quotes = make_quotes({"issues": {"allowance": None}})

        asyncio.run(run_swap(wallet, quotes))

        (query,), _ = quotes.get_price.await_args
        assert set(query.as_params()) == {"chainId", "sellToken", "buyToken", "sellAmount", "taker"}
        assert query.chain_id == wallet.chain_id
        assert query.taker == wallet.address
        assert query.sell_token == WETH.address
        assert query.buy_token == WSTETH.address

    def test_receipt_failure_is_not_propagated(self):
        wallet = make_wallet()
        wallet.wait_for_transaction_receipt = AsyncMock(side_effect=TimeoutError("not mined"))
        quotes = make_quotes({"issues": {"allowance": {"spender": PERMIT2}}})

        result = asyncio.run(run_swap(wallet, quotes))

        assert result is None
        wallet.write_contract.assert_awaited_once()

    def test_quote_failure_propagates(self):
        wallet = make_wallet()
        quotes = MagicMock()
        quotes.get_price = AsyncMock(side_effect=RuntimeError("quote down"))

        with pytest.raises(RuntimeError, match="quote down"):
            asyncio.run(run_swap(wallet, quotes))
        wallet.write_contract.assert_not_awaited()


class TestApproveSpender:
    """Tests for approve_spender."""

    def test_submit_failure_is_logged(self, caplog):
        wallet = make_wallet()
        wallet.write_contract = AsyncMock(side_effect=ValueError("insufficient funds"))

        result = asyncio.run(approve_spender(wallet, WETH, PERMIT2))

        assert result is None
        wallet.wait_for_transaction_receipt.assert_not_awaited()
        assert "Error approving" in caplog.text

    def test_returns_receipt(self):
        wallet = make_wallet()
        assert asyncio.run(approve_spender(wallet, WETH, PERMIT2)) == RECEIPT
