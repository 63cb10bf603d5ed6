"""Environment configuration.

Values come from the process environment, optionally seeded from a ``.env``
file. ``PRIVATE_KEY`` and ``UNIFRA_HTTP_TRANSPORT_URL`` are required;
``ZERO_EX_API_KEY`` is not checked at startup.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigError
from .logger import get_logger
from .types import as_private_key

log = get_logger(__name__)

PRIVATE_KEY_VAR = "PRIVATE_KEY"
TRANSPORT_URL_VAR = "UNIFRA_HTTP_TRANSPORT_URL"
API_KEY_VAR = "ZERO_EX_API_KEY"
LOG_LEVEL_VAR = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Validated runtime configuration."""

    private_key: str
    transport_url: str
    api_key: str = ""
    log_level: str = "INFO"

    def auth_headers(self) -> dict[str, str]:
        """Headers shared by the quote and metadata endpoints."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    def __repr__(self) -> str:
        return (
            f"Settings(transport_url={self.transport_url!r}, "
            f"api_key={'set' if self.api_key else 'unset'}, "
            f"log_level={self.log_level!r})"
        )


def _read(environ: Mapping[str, str], name: str) -> str:
    return (environ.get(name) or "").strip()


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    dotenv: bool = True,
) -> Settings:
    """Load and validate settings.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)
        dotenv: Load a ``.env`` file into ``os.environ`` first; only used
            when reading ``os.environ``

    Returns:
        Settings with the transport URL's trailing slash removed

    Raises:
        ConfigError: If the private key is missing or malformed, or the
            transport URL is missing
    """
    if environ is None:
        if dotenv:
            load_dotenv()
        environ = os.environ

    private_key = _read(environ, PRIVATE_KEY_VAR)
    if not private_key:
        raise ConfigError(f"missing {PRIVATE_KEY_VAR}.")
    try:
        as_private_key(private_key)
    except ValueError:
        raise ConfigError(f"invalid {PRIVATE_KEY_VAR}: expected 32 bytes of hex.") from None

    transport_url = _read(environ, TRANSPORT_URL_VAR)
    if not transport_url:
        raise ConfigError(f"missing {TRANSPORT_URL_VAR}.")

    api_key = _read(environ, API_KEY_VAR)
    if not api_key:
        log.warning(
            "[CONFIG] %s is not set; requests will carry an empty bearer token",
            API_KEY_VAR,
        )

    return Settings(
        private_key=private_key,
        transport_url=transport_url.rstrip("/"),
        api_key=api_key,
        log_level=_read(environ, LOG_LEVEL_VAR).upper() or "INFO",
    )
