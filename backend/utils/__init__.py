from .time import utc_now, local_now, parse_wall_clock, format_wall_clock
from .logging_setup import setup_logging

__all__ = [
    "utc_now",
    "local_now",
    "parse_wall_clock",
    "format_wall_clock",
    "setup_logging",
]
