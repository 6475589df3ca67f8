"""Tests for the weekly bonus-eligibility evaluator."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from apps.agency.constants import BillingType
from apps.capacity.services.bonus import evaluate_weeks, get_weekly_bonus_eligibility, week_windows
from apps.capacity.services.trackers import get_client_quota_tracker

# February 2021 starts on a Monday and has exactly four Monday-Sunday weeks
FULL_WEEKS_MONTH = "2021-02"
MONDAYS = [date(2021, 2, 1), date(2021, 2, 8), date(2021, 2, 15), date(2021, 2, 22)]


class TestWeekWindows:
    def test_month_of_four_full_weeks(self):
        windows = week_windows(FULL_WEEKS_MONTH)

        assert [window.start_date for window in windows] == MONDAYS
        assert [window.days_in_window for window in windows] == [7, 7, 7, 7]
        assert windows[-1].end_date == date(2021, 2, 28)
        assert [window.week_number for window in windows] == [1, 2, 3, 4]

    def test_days_before_first_monday_belong_to_no_window(self):
        windows = week_windows("2024-03")

        assert windows[0].start_date == date(2024, 3, 4)
        assert len(windows) == 4
        assert windows[-1].end_date == date(2024, 3, 31)

    def test_last_window_is_clipped_to_month(self):
        """September 2024 starts on a Sunday and ends on a Monday."""
        windows = week_windows("2024-09")

        assert windows[0].start_date == date(2024, 9, 2)
        assert len(windows) == 5
        assert windows[-1].start_date == date(2024, 9, 30)
        assert windows[-1].end_date == date(2024, 9, 30)
        assert windows[-1].days_in_window == 1

    def test_saturday_start_advances_to_monday(self):
        assert week_windows("2024-06")[0].start_date == date(2024, 6, 3)

    def test_windows_never_leave_the_month(self):
        for month in range(1, 13):
            for window in week_windows(f"2024-{month:02d}"):
                assert window.start_date.month == month
                assert window.end_date.month == month
                assert window.start_date.weekday() == 0


class TestEvaluateWeeks:
    def test_meeting_every_weekly_share_is_eligible(self):
        billed = {monday: Decimal("80") for monday in MONDAYS}

        weeks, weeks_hit, total_weeks, eligible = evaluate_weeks(320, FULL_WEEKS_MONTH, billed)

        assert [week.weekly_target for week in weeks] == [Decimal("80")] * 4
        assert all(week.hit_target for week in weeks)
        assert weeks_hit == 4
        assert total_weeks == 4
        assert eligible is True

    def test_one_missed_week_is_not_eligible(self):
        billed = {monday: Decimal("80") for monday in MONDAYS}
        billed[MONDAYS[2]] = Decimal("79.99")

        evaluation = evaluate_weeks(320, FULL_WEEKS_MONTH, billed)

        assert evaluation.weeks_hit == 3
        assert evaluation.weeks[2].hit_target is False
        assert evaluation.eligible_for_bonus is False

    def test_hours_are_summed_inside_each_window(self):
        billed = {MONDAYS[0] + timedelta(days=offset): Decimal("20") for offset in range(7)}

        evaluation = evaluate_weeks(320, FULL_WEEKS_MONTH, billed)

        assert evaluation.weeks[0].billed_hours == Decimal("140")
        assert evaluation.weeks[1].billed_hours == 0

    def test_short_last_window_gets_prorated_target(self):
        billed = {date(2024, 9, 2): 70, date(2024, 9, 9): 70, date(2024, 9, 16): 70, date(2024, 9, 23): 70}
        billed[date(2024, 9, 30)] = 10

        evaluation = evaluate_weeks(300, "2024-09", billed)

        assert [week.weekly_target for week in evaluation.weeks] == [Decimal("70")] * 4 + [Decimal("10")]
        assert evaluation.total_weeks == 5
        assert evaluation.eligible_for_bonus is True

    def test_hours_before_first_monday_do_not_count(self):
        evaluation = evaluate_weeks(160, "2024-03", {date(2024, 3, 1): Decimal("500")})

        assert evaluation.weeks_hit == 0
        assert evaluation.eligible_for_bonus is False

    def test_eligible_only_when_every_week_hit(self):
        for month in range(1, 13):
            evaluation = evaluate_weeks(0, f"2024-{month:02d}", {})
            assert evaluation.total_weeks >= 4
            assert evaluation.eligible_for_bonus == (evaluation.weeks_hit == evaluation.total_weeks)


@pytest.mark.django_db
class TestGetWeeklyBonusEligibility:
    def test_rows_per_client(self, make_person, make_client, log_hours):
        person = make_person()
        acme = make_client("Acme", quota=Decimal("320"))
        beta = make_client("Beta", quota=Decimal("320"))
        delta = make_client("Delta", quota=Decimal("320"))
        make_client("Gamma", no_quota=True)
        make_client("Closed", is_active=False)
        for monday in MONDAYS:
            log_hours(person, acme, monday, 80)
            log_hours(person, beta, monday, 80 if monday != MONDAYS[3] else "79.5")
            log_hours(person, delta, monday, 80, billing_type=BillingType.PREBILLED)

        results = get_weekly_bonus_eligibility(today=date(2021, 2, 10))

        assert [result.client_name for result in results] == ["Acme", "Beta", "Delta"]
        acme_row, beta_row, delta_row = results
        assert acme_row.month == FULL_WEEKS_MONTH
        assert acme_row.eligible_for_bonus is True
        assert acme_row.weeks_hit == 4
        assert beta_row.eligible_for_bonus is False
        assert beta_row.weeks_hit == 3
        assert delta_row.weeks_hit == 0

    def test_explicit_month(self, make_client):
        make_client("Acme")

        results = get_weekly_bonus_eligibility(month="2024-09")

        assert results[0].month == "2024-09"
        assert results[0].total_weeks == 5

    def test_versioned_policy_matches_client_tracker(self, settings, make_client):
        settings.QUOTA_POLICY = "versioned"
        make_client("Current")
        make_client("Later", effective_from=date(2024, 3, 1))

        tracker_names = [row.subject_name for row in get_client_quota_tracker("2024-02", today=date(2024, 2, 20))]
        bonus_names = [row.client_name for row in get_weekly_bonus_eligibility(month="2024-02")]

        assert tracker_names == ["Current"]
        assert bonus_names == tracker_names

    def test_explicit_policy_overrides_setting(self, settings, make_client):
        settings.QUOTA_POLICY = "versioned"
        make_client("Later", effective_from=date(2024, 3, 1))

        results = get_weekly_bonus_eligibility(month="2024-02", policy="current_only")

        assert [row.client_name for row in results] == ["Later"]
