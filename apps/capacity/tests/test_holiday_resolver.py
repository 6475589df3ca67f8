"""Tests for resolving holiday rows into calendar days of a month."""

from datetime import date

import pytest

from apps.capacity.models import Holiday
from apps.capacity.services.holidays import fetch_holidays, resolve_holiday_dates


@pytest.mark.django_db
class TestResolveHolidayDates:
    def test_single_day_holiday_without_end_date(self, presidents_day):
        assert resolve_holiday_dates("2024-02") == frozenset({date(2024, 2, 19)})

    def test_multi_day_holiday_is_enumerated(self):
        Holiday.objects.create(name="Winter break", start_date=date(2024, 2, 12), end_date=date(2024, 2, 14))

        assert resolve_holiday_dates("2024-02") == frozenset({date(2024, 2, 12), date(2024, 2, 13), date(2024, 2, 14)})

    def test_holiday_crossing_month_start_is_clipped(self):
        Holiday.objects.create(name="Shutdown", start_date=date(2024, 1, 30), end_date=date(2024, 2, 2))

        assert resolve_holiday_dates("2024-02") == frozenset({date(2024, 2, 1), date(2024, 2, 2)})
        assert resolve_holiday_dates("2024-01") == frozenset({date(2024, 1, 30), date(2024, 1, 31)})

    def test_holiday_crossing_month_end_is_clipped(self):
        Holiday.objects.create(name="Leap break", start_date=date(2024, 2, 28), end_date=date(2024, 3, 1))

        assert resolve_holiday_dates("2024-02") == frozenset({date(2024, 2, 28), date(2024, 2, 29)})
        assert resolve_holiday_dates("2024-03") == frozenset({date(2024, 3, 1)})

    def test_holiday_ending_on_first_day_is_included(self):
        Holiday.objects.create(name="New year", start_date=date(2024, 1, 28), end_date=date(2024, 2, 1))

        assert resolve_holiday_dates("2024-02") == frozenset({date(2024, 2, 1)})

    def test_holiday_starting_next_month_is_excluded(self):
        Holiday.objects.create(name="March holiday", start_date=date(2024, 3, 1))

        assert resolve_holiday_dates("2024-02") == frozenset()

    def test_inactive_holiday_is_ignored(self):
        Holiday.objects.create(name="Cancelled", start_date=date(2024, 2, 9), is_active=False)

        assert resolve_holiday_dates("2024-02") == frozenset()

    def test_reversed_range_contributes_no_dates(self):
        Holiday.objects.create(name="Typo", start_date=date(2024, 2, 10), end_date=date(2024, 2, 8))

        assert resolve_holiday_dates("2024-02") == frozenset()

    def test_overlapping_holidays_are_merged(self, presidents_day):
        Holiday.objects.create(name="Long weekend", start_date=date(2024, 2, 16), end_date=date(2024, 2, 19))

        dates = resolve_holiday_dates("2024-02")

        assert dates == frozenset({date(2024, 2, 16), date(2024, 2, 17), date(2024, 2, 18), date(2024, 2, 19)})

    def test_dates_never_leave_the_month(self):
        Holiday.objects.create(name="Long", start_date=date(2023, 12, 15), end_date=date(2024, 4, 15))

        dates = resolve_holiday_dates("2024-02")

        assert len(dates) == 29
        assert all(date(2024, 2, 1) <= day <= date(2024, 2, 29) for day in dates)


@pytest.mark.django_db
class TestFetchHolidays:
    def test_fetch_uses_half_open_range(self, presidents_day):
        assert list(fetch_holidays(date(2024, 2, 19), date(2024, 2, 20))) == [presidents_day]
        assert list(fetch_holidays(date(2024, 2, 20), date(2024, 3, 1))) == []
        assert list(fetch_holidays(date(2024, 2, 1), date(2024, 2, 19))) == []
