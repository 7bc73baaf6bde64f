from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def format_percentage(value: float) -> str:
    """Format to exactly one decimal place, rounding halves up (6.25 -> "6.3")."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_threshold(value: float) -> str:
    return f"{value:g}"
