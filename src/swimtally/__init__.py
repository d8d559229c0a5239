"""Distance tallies by stroke and activity from coaches' written swim sessions."""

__version__ = "0.1.0"

from swimtally.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from swimtally.parser import ParserOptions, parse_session

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "ParserOptions",
    "parse_session",
]
