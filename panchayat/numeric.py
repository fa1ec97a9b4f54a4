"""Numeric helpers."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals, with halves going towards +infinity.

    Unlike round(), 127.5 becomes 128 and 2.5 becomes 3.
    """
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale
