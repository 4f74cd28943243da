"""Utility modules for Fogbinder.

Provides common utilities:
- Logging configuration
- Content hashing
- Millisecond timestamps
"""

from .clock import format_number, now_ms
from .hash import hash_bytes, hash_string, hash_to_unit_pair
from .logging import console, get_logger, setup_logging


__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "console",
    # Hashing
    "hash_bytes",
    "hash_string",
    "hash_to_unit_pair",
    # Clock
    "now_ms",
    "format_number",
]
