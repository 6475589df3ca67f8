import logging
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional, Tuple

from django.db.models import Q, Sum
from django.utils import timezone

from apps.agency.constants import BillingType
from apps.agency.models import Client, ClientQuotaConfig, SubAccount, TimeEntry
from apps.capacity.constants import HoursGranularity
from apps.capacity.utils.calendar import as_date, month_of, parse_month, week_start
from libs.decimals import DECIMAL_ZERO, quantize_decimal, to_decimal

logger = logging.getLogger(__name__)


@dataclass
class TargetProgress:
    client_id: int
    client_name: str
    week_start: date
    week_end: date
    weekly_actual: Decimal
    monthly_actual: Decimal
    weekly_billable: Decimal
    monthly_billable: Decimal
    weekly_prebilled: Decimal
    monthly_prebilled: Decimal
    weekly_target: Decimal
    monthly_target: Decimal
    show_billable: bool
    show_prebilled: bool
    no_quota: bool

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class EfficiencyRate:
    subject_id: int
    subject_name: str
    actual_hours: Decimal
    billed_hours: Decimal
    efficiency: Decimal
    client_id: Optional[int] = None
    client_name: Optional[str] = None

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class HoursSummary:
    period_start: date
    period_end: date
    label: str
    actual_hours: Decimal
    billed_hours: Decimal

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class AccountHours:
    sub_account_id: int
    sub_account_name: str
    client_id: int
    client_name: str
    week_start: date
    week_end: date
    weekly_actual: Decimal
    monthly_actual: Decimal
    weekly_billed: Decimal
    monthly_billed: Decimal

    def as_dict(self) -> dict:
        return asdict(self)


def current_week_in_month(today: date):
    """Return the Monday-Sunday week of ``today`` clipped to the month of ``today``."""
    month = month_of(today)
    monday = week_start(today)
    return max(monday, month.start), min(monday + timedelta(days=6), month.last_day)


def get_client_target_progress(*, today: Optional[date] = None) -> List[TargetProgress]:
    """Week-to-date and month-to-date hours of visible clients against their targets.

    The weekly target is the monthly target prorated by the days of the current
    week that fall inside the month, rounded to whole hours.
    """
    today = today or timezone.localdate()
    month = month_of(today)
    start_of_week, end_of_week = current_week_in_month(today)
    days_in_week = (end_of_week - start_of_week).days + 1

    in_week = Q(date__gte=start_of_week, date__lte=end_of_week)
    billed = Q(billing_type=BillingType.BILLED)
    prebilled = Q(billing_type=BillingType.PREBILLED)
    totals = {
        row["client_id"]: row
        for row in TimeEntry.objects.filter(date__gte=month.start, date__lt=month.end)
        .order_by()
        .values("client_id")
        .annotate(
            monthly_actual=Sum("billed_hours"),
            monthly_billable=Sum("billed_hours", filter=billed),
            monthly_prebilled=Sum("billed_hours", filter=prebilled),
            weekly_actual=Sum("billed_hours", filter=in_week),
            weekly_billable=Sum("billed_hours", filter=in_week & billed),
            weekly_prebilled=Sum("billed_hours", filter=in_week & prebilled),
        )
    }

    configs = (
        ClientQuotaConfig.objects.filter(client__is_active=True, is_visible=True)
        .select_related("client")
        .order_by("client__name", "client_id")
    )

    results = []
    for config in configs:
        row = totals.get(config.client_id, {})
        monthly_target = to_decimal(config.monthly_target)
        results.append(
            TargetProgress(
                client_id=config.client_id,
                client_name=config.client.name,
                week_start=start_of_week,
                week_end=end_of_week,
                weekly_actual=to_decimal(row.get("weekly_actual")),
                monthly_actual=to_decimal(row.get("monthly_actual")),
                weekly_billable=to_decimal(row.get("weekly_billable")),
                monthly_billable=to_decimal(row.get("monthly_billable")),
                weekly_prebilled=to_decimal(row.get("weekly_prebilled")),
                monthly_prebilled=to_decimal(row.get("monthly_prebilled")),
                weekly_target=quantize_decimal(monthly_target * days_in_week / month.days_in_month, places=0),
                monthly_target=quantize_decimal(monthly_target),
                show_billable=config.show_billable,
                show_prebilled=config.show_prebilled,
                no_quota=config.no_quota,
            )
        )

    logger.info("Target progress %s (week %s - %s): %s clients", month.key, start_of_week, end_of_week, len(results))
    return results


def _efficiency(billed_hours, actual_hours) -> Decimal:
    if actual_hours > 0:
        return quantize_decimal(billed_hours / actual_hours * 100)
    return DECIMAL_ZERO


def _hours_filter(month) -> Optional[Q]:
    if month is None:
        return None
    window = parse_month(month)
    return Q(time_entries__date__gte=window.start, time_entries__date__lt=window.end)


def get_efficiency_by_client(month=None) -> List[EfficiencyRate]:
    """Billed over actual hours of every active client, all time or for one month."""
    hours_filter = _hours_filter(month)
    clients = (
        Client.objects.active()
        .annotate(
            actual=Sum("time_entries__actual_hours", filter=hours_filter),
            billed=Sum("time_entries__billed_hours", filter=hours_filter),
        )
        .order_by("name", "id")
    )

    results = []
    for client in clients:
        actual = to_decimal(client.actual)
        billed = to_decimal(client.billed)
        results.append(
            EfficiencyRate(
                subject_id=client.id,
                subject_name=client.name,
                actual_hours=actual,
                billed_hours=billed,
                efficiency=_efficiency(billed, actual),
            )
        )
    return results


def get_efficiency_by_account(month=None) -> List[EfficiencyRate]:
    """Billed over actual hours of every active sub-account of an active client."""
    hours_filter = _hours_filter(month)
    sub_accounts = (
        SubAccount.objects.active()
        .filter(client__is_active=True)
        .select_related("client")
        .annotate(
            actual=Sum("time_entries__actual_hours", filter=hours_filter),
            billed=Sum("time_entries__billed_hours", filter=hours_filter),
        )
        .order_by("client__name", "name", "id")
    )

    results = []
    for sub_account in sub_accounts:
        actual = to_decimal(sub_account.actual)
        billed = to_decimal(sub_account.billed)
        results.append(
            EfficiencyRate(
                subject_id=sub_account.id,
                subject_name=sub_account.name,
                client_id=sub_account.client_id,
                client_name=sub_account.client.name,
                actual_hours=actual,
                billed_hours=billed,
                efficiency=_efficiency(billed, actual),
            )
        )
    return results


def _summary_periods(start: date, end: date, granularity: HoursGranularity) -> List[Tuple[date, date, str]]:
    periods = []
    if granularity == HoursGranularity.WEEK:
        period_start = start
        while period_start <= end:
            periods.append((period_start, period_start + timedelta(days=6), period_start.isoformat()))
            period_start += timedelta(days=7)
    else:
        month = month_of(start)
        while month.start <= end:
            periods.append((month.start, month.last_day, month.start.strftime("%b %Y")))
            month = month_of(month.end)
    return periods


def get_hours_summary(start, end, granularity=HoursGranularity.WEEK) -> List[HoursSummary]:
    """Actual and billed hours of every time entry, per week or per month.

    Weeks are seven-day periods counted from ``start``, so the last one may run
    past ``end``. Months are whole calendar months from the month of ``start``
    through the month of ``end``. Pre-billed hours are included in the billed sum.

    Args:
        start: First day of the range
        end: Last day of the range, no periods when it is before ``start``
        granularity: ``week`` or ``month``
    """
    granularity = HoursGranularity(granularity)
    periods = _summary_periods(as_date(start), as_date(end), granularity)
    if not periods:
        return []

    daily = list(
        TimeEntry.objects.filter(date__gte=periods[0][0], date__lte=periods[-1][1])
        .order_by()
        .values("date")
        .annotate(actual=Sum("actual_hours"), billed=Sum("billed_hours"))
    )

    results = []
    for period_start, period_end, label in periods:
        rows = [row for row in daily if period_start <= row["date"] <= period_end]
        results.append(
            HoursSummary(
                period_start=period_start,
                period_end=period_end,
                label=label,
                actual_hours=sum((to_decimal(row["actual"]) for row in rows), DECIMAL_ZERO),
                billed_hours=sum((to_decimal(row["billed"]) for row in rows), DECIMAL_ZERO),
            )
        )

    logger.debug("Hours summary %s - %s by %s: %s periods", start, end, granularity.value, len(results))
    return results


def get_hours_by_account(*, today: Optional[date] = None) -> List[AccountHours]:
    """Week-to-date and month-to-date actual and billed hours of active sub-accounts.

    The week is the current Monday-Sunday week clipped to the current month.
    """
    today = today or timezone.localdate()
    month = month_of(today)
    start_of_week, end_of_week = current_week_in_month(today)

    in_month = Q(time_entries__date__gte=month.start, time_entries__date__lt=month.end)
    in_week = Q(time_entries__date__gte=start_of_week, time_entries__date__lte=end_of_week)
    sub_accounts = (
        SubAccount.objects.active()
        .filter(client__is_active=True)
        .select_related("client")
        .annotate(
            weekly_actual=Sum("time_entries__actual_hours", filter=in_week),
            monthly_actual=Sum("time_entries__actual_hours", filter=in_month),
            weekly_billed=Sum("time_entries__billed_hours", filter=in_week),
            monthly_billed=Sum("time_entries__billed_hours", filter=in_month),
        )
        .order_by("client__name", "name", "id")
    )

    results = [
        AccountHours(
            sub_account_id=sub_account.id,
            sub_account_name=sub_account.name,
            client_id=sub_account.client_id,
            client_name=sub_account.client.name,
            week_start=start_of_week,
            week_end=end_of_week,
            weekly_actual=to_decimal(sub_account.weekly_actual),
            monthly_actual=to_decimal(sub_account.monthly_actual),
            weekly_billed=to_decimal(sub_account.weekly_billed),
            monthly_billed=to_decimal(sub_account.monthly_billed),
        )
        for sub_account in sub_accounts
    ]

    logger.info(
        "Hours by account %s (week %s - %s): %s sub-accounts", month.key, start_of_week, end_of_week, len(results)
    )
    return results
