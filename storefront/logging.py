"""
Logger setup shared by the storefront modules.

Every module asks for its logger here instead of calling logging.getLogger
directly, so the stdout handler is installed exactly once:

    from storefront.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

DETAILED_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
COMPACT_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def _level_from_env() -> int:
    name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, name, logging.INFO)


def _install_handler() -> None:
    """Send storefront logs to stdout unless the host app configured logging."""
    root = logging.getLogger()
    if root.handlers:
        return

    level = _level_from_env()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    # Vercel stamps its own timestamps on every line
    compact = os.environ.get("VERCEL") == "1"
    handler.setFormatter(logging.Formatter(COMPACT_FORMAT if compact else DETAILED_FORMAT))
    root.addHandler(handler)

    # upstash_redis sends each cart read/write as an httpx request
    logging.getLogger("httpx").setLevel(logging.WARNING)


_install_handler()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | None, max_length: int = 32) -> str:
    """
    Make a product id or storage key safe to interpolate into a log line.

    Ids come straight from the page, so control characters are escaped
    (a newline could otherwise forge a second log record) and long values
    are cut to `max_length` characters plus "...". Empty values log as "N/A".
    """
    if not id_value:
        return "N/A"
    safe = (
        str(id_value)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )
    if len(safe) > max_length:
        return safe[:max_length] + "..."
    return safe


__all__ = [
    "DETAILED_FORMAT",
    "COMPACT_FORMAT",
    "get_logger",
    "sanitize_id_for_logging",
]
