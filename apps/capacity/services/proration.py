"""Monthly target proration.

A monthly quota assumes every weekday of the month is worked. Holidays and
personal time off shrink that capacity, so the target is scaled by the share of
working days actually available::

    adjusted_target = monthly_target * available_working_days / standard_working_days

Expected hours to date follow the same linear pace over the available days, one
day behind the calendar so that the hours of the day in progress are not yet
expected.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from django.utils import timezone

from apps.capacity.utils.calendar import ONE_DAY, as_date, count_working_days, is_working_day, parse_month
from libs.decimals import DECIMAL_ZERO, quantize_one_place, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Proration:
    monthly_target: Decimal
    standard_working_days: int
    total_working_days: int
    available_working_days: int
    working_days_elapsed: int
    days_for_pacing: int
    adjusted_target: Decimal
    expected_hours_to_date: Decimal

    def rounded(self) -> "Proration":
        """Copy with the hour figures rounded half-up to one decimal for display."""
        return replace(
            self,
            adjusted_target=quantize_one_place(self.adjusted_target),
            expected_hours_to_date=quantize_one_place(self.expected_hours_to_date),
        )


def compute_proration(
    month,
    monthly_target,
    holiday_dates: Iterable[date],
    time_off_dates: Iterable[date] = (),
    today: Optional[date] = None,
) -> Proration:
    """Prorate ``monthly_target`` over the working days of ``month``.

    Args:
        month: ``YYYY-MM`` string or MonthWindow
        monthly_target: Hours expected over a full month of working days
        holiday_dates: Company holidays (days outside the month are ignored)
        time_off_dates: Personal days off of the subject, empty for clients and sub-accounts
        today: Reference day for the elapsed figures, defaults to the local date

    Returns:
        Proration: Unrounded figures, see ``Proration.rounded()``
    """
    window = parse_month(month)
    target = to_decimal(monthly_target)
    today = as_date(today) if today is not None else timezone.localdate()

    holidays = frozenset(holiday_dates)
    # Time off on a weekend or a holiday costs no capacity
    time_off = frozenset(day for day in time_off_dates if day in window and is_working_day(day) and day not in holidays)
    excluded = holidays | time_off

    standard_working_days = count_working_days(window.start, window.end)
    total_working_days = count_working_days(window.start, window.end, holidays)
    available_working_days = count_working_days(window.start, window.end, excluded)

    # The current day counts as elapsed from its first instant
    elapsed_end = min(today + ONE_DAY, window.end)
    working_days_elapsed = count_working_days(window.start, elapsed_end, excluded)
    days_for_pacing = max(0, working_days_elapsed - 1)

    if standard_working_days:
        adjusted_target = target * available_working_days / standard_working_days
    else:
        adjusted_target = target

    if available_working_days:
        expected_hours_to_date = adjusted_target * days_for_pacing / available_working_days
    else:
        expected_hours_to_date = DECIMAL_ZERO

    logger.debug(
        "Proration %s: standard=%s total=%s available=%s elapsed=%s",
        window.key,
        standard_working_days,
        total_working_days,
        available_working_days,
        working_days_elapsed,
    )

    return Proration(
        monthly_target=target,
        standard_working_days=standard_working_days,
        total_working_days=total_working_days,
        available_working_days=available_working_days,
        working_days_elapsed=working_days_elapsed,
        days_for_pacing=days_for_pacing,
        adjusted_target=adjusted_target,
        expected_hours_to_date=expected_hours_to_date,
    )
