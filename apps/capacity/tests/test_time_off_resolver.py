"""Tests for resolving time-off rows into per-person calendar days."""

from datetime import date

import pytest

from apps.capacity.services.time_off import resolve_time_off_dates


@pytest.mark.django_db
class TestResolveTimeOffDates:
    def test_overlapping_rows_are_not_double_counted(self, make_person, make_time_off):
        person = make_person()
        make_time_off(person, date(2024, 2, 12), date(2024, 2, 14))
        make_time_off(person, date(2024, 2, 13), date(2024, 2, 16))

        dates = resolve_time_off_dates("2024-02")

        assert dates[person.id] == frozenset(
            {date(2024, 2, 12), date(2024, 2, 13), date(2024, 2, 14), date(2024, 2, 15), date(2024, 2, 16)}
        )

    def test_time_off_crossing_month_is_clipped(self, make_person, make_time_off):
        person = make_person()
        make_time_off(person, date(2024, 1, 29), date(2024, 2, 2))

        assert resolve_time_off_dates("2024-02")[person.id] == frozenset({date(2024, 2, 1), date(2024, 2, 2)})

    def test_rows_are_scoped_per_person(self, make_person, make_time_off):
        jane = make_person("Jane")
        john = make_person("John")
        make_time_off(jane, date(2024, 2, 5), date(2024, 2, 5))
        make_time_off(john, date(2024, 2, 6), date(2024, 2, 6))

        dates = resolve_time_off_dates("2024-02")
        only_jane = resolve_time_off_dates("2024-02", person_id=jane.id)

        assert dates == {jane.id: frozenset({date(2024, 2, 5)}), john.id: frozenset({date(2024, 2, 6)})}
        assert only_jane == {jane.id: frozenset({date(2024, 2, 5)})}

    def test_until_limits_to_elapsed_days(self, make_person, make_time_off):
        person = make_person()
        make_time_off(person, date(2024, 2, 12), date(2024, 2, 16))

        dates = resolve_time_off_dates("2024-02", until=date(2024, 2, 13))

        assert dates[person.id] == frozenset({date(2024, 2, 12), date(2024, 2, 13)})

    def test_until_before_month_returns_nothing(self, make_person, make_time_off):
        person = make_person()
        make_time_off(person, date(2024, 2, 12), date(2024, 2, 16))

        assert resolve_time_off_dates("2024-02", until=date(2024, 1, 31)) == {}

    def test_inactive_rows_are_ignored(self, make_person, make_time_off):
        person = make_person()
        make_time_off(person, date(2024, 2, 12), date(2024, 2, 16), is_active=False)

        assert resolve_time_off_dates("2024-02") == {}

    def test_reversed_range_contributes_no_dates(self, make_person, make_time_off):
        person = make_person()
        make_time_off(person, date(2024, 2, 16), date(2024, 2, 12))

        assert person.id not in resolve_time_off_dates("2024-02")
