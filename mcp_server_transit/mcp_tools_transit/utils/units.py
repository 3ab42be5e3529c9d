from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def seconds_to_minutes(seconds: int) -> int:
    """Whole minutes, rounded to nearest (half up): 125 -> 2, 90 -> 2."""
    return (seconds + 30) // 60


def meters_to_km_text(meters: int) -> str:
    """Kilometers with one decimal, half up and locale-free: 1050 -> '1.1'."""
    tenths = (abs(meters) + 50) // 100
    km, decimal = divmod(tenths, 10)
    sign = "-" if meters < 0 and tenths else ""
    return f"{sign}{km}.{decimal}"


def round_half_up(value: float) -> int:
    """Nearest integer for float readings (temperatures etc.); -0.5 -> -1.

    Raises ValueError for anything that is not a finite number.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"not a finite number: {value!r}")
    with localcontext() as ctx:
        # enough digits for any finite float
        ctx.prec = 400
        return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
