from __future__ import annotations

from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves toward positive infinity (2.5 -> 3, -2.5 -> -2)."""

    quantum = Decimal(1).scaleb(-ndigits)
    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    return float(Decimal(str(value)).quantize(quantum, rounding=rounding))


def round_int(value: float) -> int:
    return int(round_half_up(value))
