"""Calendar month navigation helpers.

Month names are a fixed English table so labels do not depend on the
process locale (``calendar.month_abbr`` does).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pennywise.domain.shared.time import local_now

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MONTH_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in MONTH_NAMES)


def month_label(month: int, year: int) -> str:
    """Return a short label such as ``"Jan 2025"``."""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year:04d}"


def previous_month(month: int, year: int) -> tuple[int, int]:
    if month == 1:
        return 12, year - 1
    return month - 1, year


def next_month(
    month: int,
    year: int,
    max_month: Optional[int] = None,
    max_year: Optional[int] = None,
) -> Optional[tuple[int, int]]:
    """Return the following month, or None once the cap is reached."""
    if max_month is not None and max_year is not None:
        if month == max_month and year == max_year:
            return None

    if month == 12:
        return 1, year + 1
    return month + 1, year


def current_month(now: Optional[datetime] = None) -> tuple[int, int]:
    now = now or local_now()
    return now.month, now.year


def is_current_month(month: int, year: int, now: Optional[datetime] = None) -> bool:
    return (month, year) == current_month(now)


def shift_month(month: int, year: int, offset: int) -> tuple[int, int]:
    """Move ``offset`` months forward (or backward when negative)."""
    index = year * 12 + (month - 1) + offset
    return index % 12 + 1, index // 12
