"""Install language servers, linters, formatters and helpers concurrently."""

import logging

__version__ = "0.1.0"

_debug_enabled = False


def set_debug(enabled: bool):
    """Enable or disable debug mode globally."""
    global _debug_enabled
    _debug_enabled = enabled


def is_debug() -> bool:
    """Check if debug mode is enabled."""
    return _debug_enabled


def setup_logging(debug: bool = False) -> None:
    """Configure root logging on stderr and record the debug flag."""
    set_debug(debug)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


__all__ = [
    "__version__",
    "is_debug",
    "set_debug",
    "setup_logging",
]
