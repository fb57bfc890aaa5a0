from __future__ import annotations

from decimal import Decimal
from typing import Union

POINTS_PER_INCH = 72

Number = Union[int, float, Decimal]


def inch_to_pt(inches: Number) -> float:
    """Convert a length in inches to points.

    Layout tables are written with two-decimal inch values, so the product is
    taken on the decimal form of the input (``4.27 -> 307.44``) instead of the
    binary float.
    """

    return float(Decimal(str(inches)) * POINTS_PER_INCH)
