"""Unit tests for domain time helpers."""

from datetime import date, datetime, timedelta, timezone

from pennywise.domain.shared.time import (
    coerce_datetime,
    end_of_day,
    start_of_week,
    to_local_naive,
)


class TestToLocalNaive:
    def test_date_becomes_midnight(self):
        assert to_local_naive(date(2024, 3, 5)) == datetime(2024, 3, 5)

    def test_naive_datetime_unchanged(self):
        moment = datetime(2024, 3, 5, 10, 30)
        assert to_local_naive(moment) == moment

    def test_aware_datetime_loses_tzinfo(self):
        aware = datetime(2024, 3, 5, 10, 30, tzinfo=timezone.utc)
        result = to_local_naive(aware)

        assert result.tzinfo is None
        assert result == aware.astimezone().replace(tzinfo=None)


class TestCoerceDatetime:
    def test_parses_iso_string_with_z_suffix(self):
        result = coerce_datetime("2024-03-05T10:30:00.000Z")
        expected = datetime(2024, 3, 5, 10, 30, tzinfo=timezone.utc)

        assert result == expected.astimezone().replace(tzinfo=None)

    def test_passes_through_other_values(self):
        assert coerce_datetime(None) is None
        assert coerce_datetime(42) == 42


class TestDayAndWeekBoundaries:
    def test_end_of_day_is_last_microsecond(self):
        result = end_of_day(datetime(2024, 3, 5, 8, 0))
        assert result + timedelta(microseconds=1) == datetime(2024, 3, 6)

    def test_start_of_week_is_monday(self):
        # 2024-03-10 is a Sunday
        assert start_of_week(datetime(2024, 3, 10, 18, 0)) == datetime(2024, 3, 4)
        assert start_of_week(datetime(2024, 3, 4, 0, 0)) == datetime(2024, 3, 4)
