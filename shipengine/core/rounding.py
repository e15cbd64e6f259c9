"""
SHIPENGINE Rounding

Half-up rounding for reported figures. Python's round() rounds half to
even, which would shift costs and ratings that land exactly on .5.
"""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to `digits` decimal places, ties toward +infinity."""
    if digits == 0:
        return float(math.floor(value + 0.5))
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def round_int(value: float) -> int:
    """Half-up rounding to an int."""
    return int(math.floor(value + 0.5))
