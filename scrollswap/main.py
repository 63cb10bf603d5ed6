"""Entry point: read a block and run the price/approval flow side by side."""

import asyncio
import sys

from .blocks import get_block_data
from .chain import create_public_client, create_wallet_client
from .config import Settings, load_settings
from .errors import ConfigError
from .logger import get_logger, init_logging
from .quote import QuoteClient
from .swap import run_swap

log = get_logger(__name__)


async def run(settings: Settings) -> list:
    """Build the clients once and run the two independent tasks.

    The block read and the swap flow share no state, so they are scheduled
    concurrently and their completion order is not significant.
    """
    public_client = create_public_client(settings.transport_url)
    wallet = create_wallet_client(settings.private_key, settings.transport_url)
    log.info("[MAIN] Taker address: %s", wallet.address)

    try:
        async with QuoteClient(settings.transport_url, settings.auth_headers()) as quotes:
            tasks = [
                asyncio.create_task(get_block_data(public_client), name="block"),
                asyncio.create_task(run_swap(wallet, quotes), name="swap"),
            ]
            results = await asyncio.gather(*tasks, return_exceptions=True)
    finally:
        await public_client.provider.disconnect()
        await wallet.w3.provider.disconnect()

    for task, result in zip(tasks, results):
        if isinstance(result, Exception):
            log.error("[MAIN] Task %s failed: %r", task.get_name(), result)
    return results


def main() -> int:
    init_logging()
    try:
        settings = load_settings()
    except ConfigError as exc:
        log.critical("[MAIN] %s", exc)
        return 1
    init_logging(settings.log_level)

    asyncio.run(run(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
