from decimal import ROUND_HALF_UP, Decimal
from typing import Union

DECIMAL_ZERO = Decimal("0.00")

Number = Union[Decimal, int, float, str, None]


def to_decimal(val: Number) -> Decimal:
    if val is None:
        return DECIMAL_ZERO
    if isinstance(val, Decimal):
        return val
    # str() keeps the shortest repr of floats instead of their binary expansion
    return Decimal(str(val))


def quantize_decimal(val: Number, places: int = 2) -> Decimal:
    """Round half-up to ``places`` decimals (0.05 -> 0.1, unlike round())."""
    exponent = Decimal(1).scaleb(-places)
    return to_decimal(val).quantize(exponent, rounding=ROUND_HALF_UP)


def quantize_one_place(val: Number) -> Decimal:
    return quantize_decimal(val, places=1)
