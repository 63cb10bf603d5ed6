class ScrollSwapError(Exception):
    pass


class ConfigError(ScrollSwapError):
    """Required configuration is missing; raised before any network activity."""
