"""
Example: Token metadata

Query Unifra's enhanced API for the swap tokens and the taker's balances.

Usage:
    PRIVATE_KEY=... UNIFRA_HTTP_TRANSPORT_URL=https://... ZERO_EX_API_KEY=... \
        python examples/token_metadata.py
"""

import asyncio

from scrollswap import WETH, WSTETH, MetadataClient, create_wallet_client, load_settings
from scrollswap.logger import init_logging

PERMIT2 = "0x000000000022D473030F116dDEE9F6B43aC78BA3"


async def main():
    settings = load_settings()
    init_logging(settings.log_level)
    taker = create_wallet_client(settings.private_key, settings.transport_url).address

    async with MetadataClient(settings.transport_url, settings.auth_headers()) as client:
        await client.get_token_metadata(WETH.address)
        await client.get_token_metadata(WSTETH.address)
        await client.get_token_balances(taker, [WETH.address, WSTETH.address])
        await client.get_token_allowance(taker, PERMIT2, WETH.address)
        await client.get_asset_transfers(taker)


if __name__ == "__main__":
    asyncio.run(main())
