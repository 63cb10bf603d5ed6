"""Logging setup for scrollswap.

All application loggers live under the ``scrollswap`` namespace and share a
single stderr handler installed by :func:`init_logging`.
"""

import logging
import sys
from typing import Optional, Union

APP_NAMESPACE = "scrollswap"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"

# Libraries that are chatty at INFO/DEBUG
_NOISY_LIBRARIES = ("httpx", "httpcore", "urllib3", "web3", "asyncio")


def _level_from_str(value: Union[str, int, None]) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName((value or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _install_console_handler(root: logging.Logger) -> None:
    for handler in root.handlers:
        if getattr(handler, "_scrollswap_handler", False):
            return

    handler = logging.StreamHandler(stream=sys.stderr)
    handler._scrollswap_handler = True
    handler.setLevel(logging.NOTSET)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def init_logging(level: Union[str, int, None] = "INFO") -> None:
    """Install the console handler and set namespace levels.

    Safe to call more than once.
    """
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    _install_console_handler(root)

    logging.getLogger(APP_NAMESPACE).setLevel(_level_from_str(level))
    for name in _NOISY_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger in the canonical 'scrollswap.*' namespace."""
    base = name or APP_NAMESPACE
    if base == APP_NAMESPACE or base.startswith(APP_NAMESPACE + "."):
        return logging.getLogger(base)
    return logging.getLogger(f"{APP_NAMESPACE}.{base}")
