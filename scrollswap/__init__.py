"""
scrollswap - Permit2 price and approval flow on Scroll Sepolia

Fetches a swap price from a 0x-style quote API, approves the quoted spender
on the sell token when needed, and exposes Unifra's token metadata queries.
"""

from .chain import WalletClient, create_public_client, create_wallet_client
from .config import Settings, load_settings
from .errors import ConfigError, ScrollSwapError
from .metadata import MetadataClient
from .models import WETH, WSTETH, PriceQuery, PriceQuote, Token
from .quote import QuoteClient
from .swap import MAX_UINT256, SELL_AMOUNT, run_swap

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "MAX_UINT256",
    "MetadataClient",
    "PriceQuery",
    "PriceQuote",
    "QuoteClient",
    "SELL_AMOUNT",
    "ScrollSwapError",
    "Settings",
    "Token",
    "WETH",
    "WSTETH",
    "WalletClient",
    "create_public_client",
    "create_wallet_client",
    "load_settings",
    "run_swap",
]
