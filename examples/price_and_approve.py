"""
Example: Price and approve

Fetch a Permit2 price for 0.1 WETH -> wstETH and approve the quoted spender
if the sell token allowance is missing.

Usage:
    PRIVATE_KEY=... UNIFRA_HTTP_TRANSPORT_URL=https://... ZERO_EX_API_KEY=... \
        python examples/price_and_approve.py
"""

import asyncio

from scrollswap import QuoteClient, create_wallet_client, load_settings, run_swap
from scrollswap.logger import init_logging


async def main():
    settings = load_settings()
    init_logging(settings.log_level)
    wallet = create_wallet_client(settings.private_key, settings.transport_url)

    async with QuoteClient(settings.transport_url, settings.auth_headers()) as quotes:
        receipt = await run_swap(wallet, quotes)

    if receipt is None:
        print("No approval receipt: already approved, or the approval failed (see log)")
    else:
        print(f"Approved in block {receipt['blockNumber']} (gas used: {receipt['gasUsed']})")


if __name__ == "__main__":
    asyncio.run(main())
