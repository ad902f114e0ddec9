"""Percentage arithmetic with division by zero defined as zero."""

from decimal import Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def percentage_of(part: Decimal, whole: Decimal) -> Decimal:
    """``part`` as a 0-100 share of ``whole``; 0 when ``whole`` is not positive."""
    if whole <= 0:
        return ZERO
    return part / whole * HUNDRED


def percentage_change(current: Decimal, previous: Decimal) -> Decimal:
    """Relative change from ``previous`` to ``current``; 0 when previous is 0."""
    if previous == 0:
        return ZERO
    return (current - previous) / previous * HUNDRED
