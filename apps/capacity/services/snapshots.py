"""Point-in-time capture of the quota trackers of a month.

Trackers always apply the current quota rows, so figures of past months move
when a quota is edited. Capturing a month into a QuotaPeriod keeps the numbers
reported at that time, bonus payouts included.
"""

import logging
from datetime import date
from typing import Optional

from django.db import transaction
from django.utils import timezone

from apps.capacity.api.serializers import (
    EligibilityResultSerializer,
    IndividualPayoutResultSerializer,
    PartnerPayoutResultSerializer,
    TrackerResultSerializer,
)
from apps.capacity.models import QuotaPeriod
from apps.capacity.services.bonus import get_weekly_bonus_eligibility
from apps.capacity.services.payouts import build_bonus_payouts
from apps.capacity.services.trackers import (
    get_account_quota_tracker,
    get_client_quota_tracker,
    get_resource_quota_tracker,
    resolve_policy,
)
from apps.capacity.utils.calendar import parse_month

logger = logging.getLogger(__name__)


class QuotaPeriodExists(Exception):
    """Raised when a quota period would be overwritten without override, or is finalized."""

    pass


@transaction.atomic
def snapshot_quota_period(
    month, *, override: bool = False, today: Optional[date] = None, policy=None
) -> QuotaPeriod:
    """Compute every tracker and the bonus payouts of ``month`` and store them in a QuotaPeriod.

    Args:
        month: ``YYYY-MM`` string or MonthWindow
        override: Replace the rows of an existing, not finalized, period
        today: Reference day for the expected hours, defaults to the local date
        policy: Quota policy applied to every tracker, defaults to ``settings.QUOTA_POLICY``

    Raises:
        QuotaPeriodExists: When the period exists and ``override`` is false, or it is finalized
    """
    window = parse_month(month)
    existing = QuotaPeriod.objects.select_for_update().filter(year_month=window.key).first()

    if existing and existing.is_finalized:
        raise QuotaPeriodExists(f"Quota period for {window.key} is finalized and cannot be overwritten.")
    if existing and not override:
        raise QuotaPeriodExists(
            f"Quota period for {window.key} already exists. Use --override flag to recalculate it."
        )

    today = today or timezone.localdate()
    policy = resolve_policy(policy)
    resource_rows = get_resource_quota_tracker(window, today=today, policy=policy)
    client_rows = get_client_quota_tracker(window, today=today, policy=policy)
    account_rows = get_account_quota_tracker(window, today=today, policy=policy)
    bonus_rows = get_weekly_bonus_eligibility(month=window, policy=policy)
    payouts = build_bonus_payouts(window, resource_rows, client_rows)

    results = {
        "resource_results": TrackerResultSerializer(resource_rows, many=True).data,
        "client_results": TrackerResultSerializer(client_rows, many=True).data,
        "account_results": TrackerResultSerializer(account_rows, many=True).data,
        "bonus_results": EligibilityResultSerializer(bonus_rows, many=True).data,
        "partner_results": PartnerPayoutResultSerializer(payouts.partner_results, many=True).data,
        "individual_results": IndividualPayoutResultSerializer(payouts.individual_results, many=True).data,
        "total_partner_bonuses_paid": payouts.total_partner_bonuses_paid,
        "total_individual_bonuses_paid": payouts.total_individual_bonuses_paid,
        "total_overage_bonuses_paid": payouts.total_overage_bonuses_paid,
    }
    period, created = QuotaPeriod.objects.update_or_create(
        year_month=window.key,
        defaults={"calculated_at": timezone.now(), **results},
    )

    logger.info(
        "%s quota period %s: %s people, %s clients, %s sub-accounts, payouts %s (policy=%s)",
        "Created" if created else "Recalculated",
        window.key,
        len(resource_rows),
        len(client_rows),
        len(account_rows),
        payouts.grand_total,
        policy.value,
    )
    return period
