"""Historical block reads."""

from web3 import AsyncWeb3

from .logger import get_logger

log = get_logger(__name__)

DEFAULT_BLOCK_NUMBER = 123456


async def get_block_data(client: AsyncWeb3, block_number: int = DEFAULT_BLOCK_NUMBER):
    """Fetch and log one block.

    Failures are logged and swallowed; the caller gets None.
    """
    try:
        block = await client.eth.get_block(block_number)
    except Exception:
        log.exception("[BLOCK] Error retrieving block %s", block_number)
        return None
    log.info("[BLOCK] %s: %s", block_number, dict(block))
    return block
