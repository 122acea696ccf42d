from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative values (Python's round() is banker's)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_count(value: float) -> int:
    return int(round_half_up(value))
