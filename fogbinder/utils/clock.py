"""Timestamps in epoch milliseconds."""

import time


def now_ms() -> int:
    """Current time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


def format_number(value: float) -> str:
    """Render a number the way JSON-oriented consumers expect.

    Whole floats drop the trailing ``.0`` (``100.0`` -> ``"100"``).
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)
