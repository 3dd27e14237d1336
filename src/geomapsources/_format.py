"""Internal number formatting helpers shared by the token builders."""

import math
from decimal import Decimal


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero (not banker's)."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def format_number(value) -> str:
    """
    Render a number the way it appears inside map URLs.

    Integral floats lose their ``.0``, other floats use the shortest
    round-trip digits without exponent notation, and negative zero is
    kept as ``-0``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return repr(value)
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
