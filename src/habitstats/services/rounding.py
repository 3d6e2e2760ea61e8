"""Half-up rounding shared by the statistics services."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def to_decimal(value: float | int | Decimal) -> Decimal:
    """Convert via ``str`` so binary float noise does not leak into Decimal."""

    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: float | int | Decimal, places: int = 2) -> float:
    """Round like ``Math.round``: halves go away from zero for positive values."""

    quantum = Decimal(1).scaleb(-places)
    return float(to_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_int(value: float | int | Decimal) -> int:
    return int(to_decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int, places: int = 2) -> float:
    """Return ``part / whole * 100`` rounded half-up, or 0.0 when ``whole`` is 0."""

    if whole <= 0:
        return 0.0
    return round_half_up(Decimal(part) * 100 / Decimal(whole), places)
