"""Per-person, per-client and per-sub-account quota trackers for one month.

Every call reads the current rows from the database and recomputes the figures;
nothing is cached, so edits to holidays, time off or quotas show up on the next
call.
"""

import logging
from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from django.conf import settings
from django.db.models import Q, Sum

from apps.agency.constants import BillingType
from apps.agency.models import ClientQuotaConfig, SubAccountQuotaConfig, TimeEntry
from apps.capacity.constants import QuotaPolicy
from apps.capacity.models import ResourceQuota
from apps.capacity.services.holidays import resolve_holiday_dates
from apps.capacity.services.proration import Proration, compute_proration
from apps.capacity.services.time_off import resolve_time_off_dates
from apps.capacity.utils.calendar import MonthWindow, parse_month
from libs.decimals import DECIMAL_ZERO, quantize_decimal, quantize_one_place, to_decimal

logger = logging.getLogger(__name__)


@dataclass
class TrackerResult:
    subject_id: int
    subject_name: str
    monthly_target: Decimal
    adjusted_target: Decimal
    expected_hours_to_date: Decimal
    billed_hours: Decimal
    pacing: Decimal
    percentage_complete: Decimal
    standard_working_days: int
    available_working_days: int
    working_days_elapsed: int
    prebilled_hours: Decimal = DECIMAL_ZERO
    client_id: Optional[int] = None
    client_name: Optional[str] = None

    def as_dict(self) -> dict:
        return asdict(self)


def resolve_policy(policy=None) -> QuotaPolicy:
    """Return the quota policy to apply, falling back to ``settings.QUOTA_POLICY``.

    Raises:
        ValueError: When the value is not a known policy
    """
    return QuotaPolicy(policy or getattr(settings, "QUOTA_POLICY", QuotaPolicy.CURRENT_ONLY))


def apply_policy(queryset, window: MonthWindow, policy: QuotaPolicy):
    """Drop quota rows that do not apply to ``window`` under ``policy``.

    Under the versioned policy a row that only takes effect after the month is
    treated as absent. No earlier value is reconstructed for it.
    """
    if policy == QuotaPolicy.VERSIONED:
        return queryset.filter(Q(effective_from__isnull=True) | Q(effective_from__lte=window.last_day))
    return queryset


def build_tracker_result(
    proration: Proration,
    *,
    subject_id: int,
    subject_name: str,
    billed_hours,
    prebilled_hours=DECIMAL_ZERO,
    client_id: Optional[int] = None,
    client_name: Optional[str] = None,
) -> TrackerResult:
    billed = to_decimal(billed_hours)
    adjusted_target = proration.adjusted_target
    if adjusted_target > 0:
        percentage_complete = billed / adjusted_target * 100
    else:
        percentage_complete = DECIMAL_ZERO

    rounded = proration.rounded()
    return TrackerResult(
        subject_id=subject_id,
        subject_name=subject_name,
        client_id=client_id,
        client_name=client_name,
        monthly_target=quantize_decimal(proration.monthly_target),
        adjusted_target=rounded.adjusted_target,
        expected_hours_to_date=rounded.expected_hours_to_date,
        billed_hours=quantize_decimal(billed),
        prebilled_hours=quantize_decimal(prebilled_hours),
        pacing=quantize_one_place(billed - proration.expected_hours_to_date),
        percentage_complete=quantize_one_place(percentage_complete),
        standard_working_days=proration.standard_working_days,
        available_working_days=proration.available_working_days,
        working_days_elapsed=proration.working_days_elapsed,
    )


def _entries_in_month(window: MonthWindow):
    return TimeEntry.objects.filter(date__gte=window.start, date__lt=window.end).order_by()


def sum_billed_by(window: MonthWindow, field: str) -> Dict[int, Decimal]:
    """Billed hours (billing type ``billed`` only) of the month grouped by ``field``."""
    rows = (
        _entries_in_month(window)
        .filter(billing_type=BillingType.BILLED)
        .exclude(**{f"{field}__isnull": True})
        .values(field)
        .annotate(total=Sum("billed_hours"))
    )
    return {row[field]: to_decimal(row["total"]) for row in rows}


def get_resource_quota_tracker(month, *, today: Optional[date] = None, policy=None) -> List[TrackerResult]:
    """Quota tracker rows of every active person with an active resource quota.

    Billed and pre-billed hours are reported separately; only billed hours count
    toward the percentage and the pacing.
    """
    window = parse_month(month)
    policy = resolve_policy(policy)

    quotas = apply_policy(
        ResourceQuota.objects.active().filter(person__is_active=True).select_related("person"),
        window,
        policy,
    )
    holiday_dates = resolve_holiday_dates(window)
    time_off_by_person = resolve_time_off_dates(window)

    hours_by_person = {
        row["person_id"]: row
        for row in _entries_in_month(window)
        .values("person_id")
        .annotate(
            billed=Sum("billed_hours", filter=Q(billing_type=BillingType.BILLED)),
            prebilled=Sum("billed_hours", filter=Q(billing_type=BillingType.PREBILLED)),
        )
    }

    results = []
    for quota in quotas:
        proration = compute_proration(
            window,
            quota.monthly_target,
            holiday_dates,
            time_off_by_person.get(quota.person_id, ()),
            today=today,
        )
        hours = hours_by_person.get(quota.person_id, {})
        results.append(
            build_tracker_result(
                proration,
                subject_id=quota.person_id,
                subject_name=quota.person.display_name,
                billed_hours=hours.get("billed"),
                prebilled_hours=to_decimal(hours.get("prebilled")),
            )
        )

    results.sort(key=lambda result: result.subject_name.lower())
    logger.info("Resource quota tracker %s: %s people (policy=%s)", window.key, len(results), policy.value)
    return results


def get_client_quota_tracker(month, *, today: Optional[date] = None, policy=None) -> List[TrackerResult]:
    """Quota tracker rows of every active, visible client that has a quota."""
    window = parse_month(month)
    policy = resolve_policy(policy)

    configs = apply_policy(
        ClientQuotaConfig.objects.filter(client__is_active=True, no_quota=False, is_visible=True).select_related(
            "client"
        ),
        window,
        policy,
    )
    holiday_dates = resolve_holiday_dates(window)
    billed_by_client = sum_billed_by(window, "client_id")

    results = []
    for config in configs.order_by("client__name", "client_id"):
        proration = compute_proration(window, config.monthly_target, holiday_dates, today=today)
        results.append(
            build_tracker_result(
                proration,
                subject_id=config.client_id,
                subject_name=config.client.name,
                billed_hours=billed_by_client.get(config.client_id),
            )
        )

    logger.info("Client quota tracker %s: %s clients (policy=%s)", window.key, len(results), policy.value)
    return results


def get_account_quota_tracker(
    month, client_id: Optional[int] = None, *, today: Optional[date] = None, policy=None
) -> List[TrackerResult]:
    """Quota tracker rows of active sub-accounts with an active quota.

    Args:
        month: ``YYYY-MM`` string
        client_id: Restrict the rows to the sub-accounts of one client
    """
    window = parse_month(month)
    policy = resolve_policy(policy)

    configs = SubAccountQuotaConfig.objects.active().filter(
        sub_account__is_active=True, sub_account__client__is_active=True
    )
    if client_id is not None:
        configs = configs.filter(sub_account__client_id=client_id)
    configs = apply_policy(configs.select_related("sub_account__client"), window, policy)

    holiday_dates = resolve_holiday_dates(window)
    billed_by_account = sum_billed_by(window, "sub_account_id")

    results = []
    for config in configs.order_by("sub_account__name", "sub_account_id"):
        sub_account = config.sub_account
        proration = compute_proration(window, config.monthly_target, holiday_dates, today=today)
        results.append(
            build_tracker_result(
                proration,
                subject_id=sub_account.id,
                subject_name=sub_account.name,
                client_id=sub_account.client_id,
                client_name=sub_account.client.name,
                billed_hours=billed_by_account.get(sub_account.id),
            )
        )

    logger.info("Account quota tracker %s: %s sub-accounts (policy=%s)", window.key, len(results), policy.value)
    return results
