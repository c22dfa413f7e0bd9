"""
In-place rounding to the nearest integer value.

Ties go away from zero (2.5 → 3.0, -2.5 → -3.0). The built-in round()
rounds ties to even and is not used here.
"""

import math
from collections.abc import MutableSequence


def round_half_away(value: float) -> float:
    """
    Return the nearest integer value of value, as a float.

    NaN and ±inf come back unchanged. The sign of zero follows the input,
    so -0.3 rounds to -0.0.
    """
    if not math.isfinite(value):
        return value

    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact for floats, so the tie test never misfires
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def round_in_place(values: MutableSequence[float]) -> None:
    """Replace every element of values with round_half_away(element)."""
    for i, value in enumerate(values):
        values[i] = round_half_away(value)
