"""Shared numeric helpers for the aggregators."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3).

    Inputs are non-negative, so this differs from ``round()`` only on halves,
    where ``round()`` would pick the even neighbour. The float is converted
    exactly, so values just below a half still round down.
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def percentage(part: int, total: int) -> int:
    """Integer percentage of ``part`` in ``total``; 0 when ``total`` is 0."""
    if total <= 0:
        return 0
    return round_half_up(part / total * 100)
