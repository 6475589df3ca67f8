"""Weekly bonus eligibility of clients.

A month is split into Monday-Sunday windows starting at the first Monday of the
month. Each window must reach its share of the monthly target, prorated by
calendar days. Days before the first Monday belong to no window and do not count.
"""

import logging
from collections import defaultdict
from dataclasses import asdict, dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, List, Mapping, NamedTuple, Optional

from django.db.models import Sum
from django.utils import timezone

from apps.agency.constants import BillingType
from apps.agency.models import ClientQuotaConfig, TimeEntry
from apps.capacity.constants import MIN_BONUS_WEEKS
from apps.capacity.services.trackers import apply_policy, resolve_policy
from apps.capacity.utils.calendar import first_monday_on_or_after, iter_days, month_of, parse_month
from libs.decimals import DECIMAL_ZERO, quantize_decimal, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeekWindow:
    week_number: int
    start_date: date
    end_date: date

    @property
    def days_in_window(self) -> int:
        return (self.end_date - self.start_date).days + 1


@dataclass
class WeekWindowResult:
    week_number: int
    start_date: date
    end_date: date
    days_in_window: int
    billed_hours: Decimal
    weekly_target: Decimal
    hit_target: bool


class WeekEvaluation(NamedTuple):
    weeks: List[WeekWindowResult]
    weeks_hit: int
    total_weeks: int
    eligible_for_bonus: bool


@dataclass
class EligibilityResult:
    client_id: int
    client_name: str
    month: str
    monthly_target: Decimal
    weeks_hit: int
    total_weeks: int
    eligible_for_bonus: bool
    weeks: List[WeekWindowResult] = field(default_factory=list)

    def as_dict(self) -> dict:
        return asdict(self)


def week_windows(month) -> List[WeekWindow]:
    """Split ``month`` into Monday-Sunday windows clipped to the month.

    The first window starts on the first Monday on or after the 1st. Windows are
    produced while their Monday is still inside the month, so the last one may be
    shorter than seven days.
    """
    window = parse_month(month)

    windows = []
    week_number = 1
    week_start = first_monday_on_or_after(window.start)
    while week_start <= window.last_day:
        week_end = min(week_start + timedelta(days=6), window.last_day)
        windows.append(WeekWindow(week_number=week_number, start_date=week_start, end_date=week_end))
        week_number += 1
        week_start += timedelta(days=7)

    return windows


def evaluate_weeks(monthly_target, month, billed_by_day: Mapping[date, Decimal]) -> WeekEvaluation:
    """Check each week window of ``month`` against its prorated share of ``monthly_target``.

    Args:
        monthly_target: Monthly billed-hours target of the client
        month: ``YYYY-MM`` string or MonthWindow
        billed_by_day: Billed hours per calendar day, days outside the windows are ignored

    Returns:
        WeekEvaluation: Per-week results, weeks hit, total weeks and eligibility
    """
    window = parse_month(month)
    target = to_decimal(monthly_target)

    weeks = []
    for week in week_windows(window):
        days = week.days_in_window
        # Multiply first so whole-week targets stay exact (320 * 7 / 28 == 80)
        weekly_target = target * days / window.days_in_month
        billed = sum(
            (to_decimal(billed_by_day.get(day)) for day in iter_days(week.start_date, week.end_date)),
            DECIMAL_ZERO,
        )
        weeks.append(
            WeekWindowResult(
                week_number=week.week_number,
                start_date=week.start_date,
                end_date=week.end_date,
                days_in_window=days,
                billed_hours=quantize_decimal(billed),
                weekly_target=quantize_decimal(weekly_target),
                hit_target=billed >= weekly_target,
            )
        )

    weeks_hit = sum(1 for week in weeks if week.hit_target)
    total_weeks = len(weeks)
    eligible = weeks_hit == total_weeks and total_weeks >= MIN_BONUS_WEEKS
    return WeekEvaluation(weeks, weeks_hit, total_weeks, eligible)


def _billed_by_client_and_day(window) -> Dict[int, Dict[date, Decimal]]:
    rows = (
        TimeEntry.objects.filter(
            date__gte=window.start,
            date__lt=window.end,
            billing_type=BillingType.BILLED,
        )
        .order_by()
        .values("client_id", "date")
        .annotate(total=Sum("billed_hours"))
    )

    billed: Dict[int, Dict[date, Decimal]] = defaultdict(dict)
    for row in rows:
        billed[row["client_id"]][row["date"]] = to_decimal(row["total"])
    return billed


def get_weekly_bonus_eligibility(
    *, today: Optional[date] = None, month=None, policy=None
) -> List[EligibilityResult]:
    """Bonus eligibility of every active client with a quota, for the current month by default.

    Only billed (not pre-billed) hours count. Quota configs are filtered by
    ``policy`` the same way as in the client tracker. Rows are sorted by client name.
    """
    if month is not None:
        window = parse_month(month)
    else:
        window = month_of(today or timezone.localdate())
    policy = resolve_policy(policy)

    configs = apply_policy(
        ClientQuotaConfig.objects.filter(client__is_active=True, no_quota=False).select_related("client"),
        window,
        policy,
    ).order_by("client__name", "client_id")
    billed = _billed_by_client_and_day(window)

    results = []
    for config in configs:
        evaluation = evaluate_weeks(config.monthly_target, window, billed.get(config.client_id, {}))
        results.append(
            EligibilityResult(
                client_id=config.client_id,
                client_name=config.client.name,
                month=window.key,
                monthly_target=quantize_decimal(config.monthly_target),
                weeks=evaluation.weeks,
                weeks_hit=evaluation.weeks_hit,
                total_weeks=evaluation.total_weeks,
                eligible_for_bonus=evaluation.eligible_for_bonus,
            )
        )

    logger.info(
        "Weekly bonus eligibility %s: %s clients, %s eligible (policy=%s)",
        window.key,
        len(results),
        sum(1 for result in results if result.eligible_for_bonus),
        policy.value,
    )
    return results
