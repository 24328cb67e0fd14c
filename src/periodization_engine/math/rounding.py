"""Half-up rounding helpers.

Python's built-in round() uses banker's rounding (round(2.5) == 2). Load
and set prescriptions round half-up so 2.5 sets becomes 3 and a 111.25 kg
target rounds to 112.5 kg.
"""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals with ties going toward +infinity."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def round_int(value: float) -> int:
    """Half-up rounding to an int."""
    return int(math.floor(value + 0.5))


def round_to_increment(weight: float, increment: float = 2.5) -> float:
    """Round a load to the nearest plate increment (e.g. 2.5 or 1.25 kg)."""
    if increment <= 0:
        return weight
    return math.floor(weight / increment + 0.5) * increment
