"""Rounding that sends ``.5`` ties away from zero, as upstream clients expect."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 0) -> float:
    """Round ``value`` to ``digits`` decimals; ``1012.5`` becomes ``1013.0``.

    The float is read through ``str`` so its shortest repr is rounded, not
    the binary approximation behind it.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    return int(round_half_up(value))


__all__ = ["round_half_up", "round_int"]
