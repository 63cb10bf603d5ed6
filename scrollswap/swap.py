"""Price-then-approve flow for selling WETH into wstETH via Permit2.

The flow stops once the sell token allowance is in place; the swap itself
is not submitted.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from .chain import WalletClient
from .logger import get_logger
from .models import WETH, WSTETH, PriceQuery, Token
from .quote import QuoteClient
from .types import as_address

log = get_logger(__name__)

MAX_UINT256 = 2**256 - 1


def parse_units(value: str, decimals: int) -> int:
    """Scale a decimal string to integer base units.

    Raises:
        ValueError: If the value is not a number, is negative or has more
            fractional digits than ``decimals``
    """
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise ValueError(f"invalid decimal amount: {value!r}") from None
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"amount must be a non-negative number, got {value!r}")
    scaled = amount.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise ValueError(f"{value!r} has more than {decimals} decimal places")
    return int(scaled)


# Always scaled by 18 decimals, whatever token is bought
SELL_AMOUNT = parse_units("0.1", 18)


def build_price_query(
    wallet: WalletClient,
    sell_token: Token,
    buy_token: Token,
    sell_amount: int = SELL_AMOUNT,
) -> PriceQuery:
    return PriceQuery(
        chain_id=wallet.chain_id,
        sell_token=sell_token.address,
        buy_token=buy_token.address,
        sell_amount=sell_amount,
        taker=wallet.address,
    )


async def approve_spender(wallet: WalletClient, token: Token, spender: str):
    """Grant ``spender`` the maximum allowance on ``token`` and wait for the receipt.

    Errors while submitting or waiting are logged and not re-raised.

    Returns:
        The receipt, or None if the approval failed
    """
    try:
        tx_hash = await wallet.write_contract(
            token, "approve", [as_address(spender), MAX_UINT256]
        )
        log.info("[SWAP][APPROVE] Approving %s to spend %s... hash=%s", spender, token.symbol, tx_hash)
        receipt = await wallet.wait_for_transaction_receipt(tx_hash)
    except Exception:
        log.exception("[SWAP][APPROVE] Error approving %s to spend %s", spender, token.symbol)
        return None
    log.info("[SWAP][APPROVE] %s approved to spend %s. Receipt: %s", spender, token.symbol, receipt)
    return receipt


async def run_swap(
    wallet: WalletClient,
    quotes: QuoteClient,
    sell_token: Token = WETH,
    buy_token: Token = WSTETH,
) -> Optional[dict]:
    """Fetch a price and make sure the quote's spender can pull the sell token.

    Returns:
        The approval receipt if one was submitted and mined, otherwise None
    """
    query = build_price_query(wallet, sell_token, buy_token)
    log.info(
        "[SWAP][PRICE] Retrieving the price to exchange %s %s for %s",
        Decimal(query.sell_amount).scaleb(-sell_token.decimals).normalize(),
        sell_token.symbol,
        buy_token.symbol,
    )
    quote = await quotes.get_price(query)
    log.info("[SWAP][PRICE] priceResponse: %s", dict(quote.payload))

    if not quote.has_allowance_issue:
        log.info("[SWAP][APPROVE] %s already approved for Permit2", sell_token.symbol)
        return None
    spender = quote.allowance_spender
    if spender is None:
        log.warning(
            "[SWAP][APPROVE] Allowance issue without spender; skipping approval: %s",
            quote.payload.get("issues"),
        )
        return None
    return await approve_spender(wallet, sell_token, spender)
