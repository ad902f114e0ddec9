"""Reporting period presets and trend granularity."""

from enum import Enum


class DateFilter(str, Enum):
    """Preset ranges offered by the transaction list."""

    TODAY = "today"
    THIS_WEEK = "thisWeek"
    THIS_MONTH = "thisMonth"
    THIS_YEAR = "thisYear"
    ALL_TIME = "allTime"
    CUSTOM = "custom"


class PeriodType(str, Enum):
    """Periods selectable on the insights screen."""

    THIS_WEEK = "thisWeek"
    THIS_MONTH = "thisMonth"
    THIS_YEAR = "thisYear"
    CUSTOM = "custom"


class Granularity(str, Enum):
    DAY = "day"
    WEEK = "week"  # Monday-based
    MONTH = "month"
