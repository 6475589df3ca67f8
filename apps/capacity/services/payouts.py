"""Monthly bonus payouts computed from the quota trackers.

Three bonuses add up for every tracked person:

* partner bonus: for each partner client at or above 100% of its adjusted
  target, the policy's full-time or part-time amount
* quota bonus: the employment type's amount when billed plus pre-billed hours
  reach the person's adjusted target
* overage bonus: hours above the adjusted target times the employment type's rate

An employment type without an IndividualQuotaBonusSetting earns no quota or
overage bonus.
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from apps.capacity.constants import PARTNER_QUOTA_PERCENTAGE
from apps.capacity.models import IndividualQuotaBonusSetting, PartnerBonusPolicy
from apps.capacity.services.trackers import (
    TrackerResult,
    get_client_quota_tracker,
    get_resource_quota_tracker,
    resolve_policy,
)
from apps.capacity.utils.calendar import parse_month
from apps.core.constants import EmploymentType
from apps.core.models import User
from libs.decimals import DECIMAL_ZERO, quantize_decimal

logger = logging.getLogger(__name__)


@dataclass
class PartnerPayoutResult:
    client_id: int
    client_name: str
    adjusted_target: Decimal
    billed_hours: Decimal
    percentage_complete: Decimal
    quota_met: bool
    bonus_full_time: Decimal
    bonus_part_time: Decimal


@dataclass
class IndividualPayoutResult:
    person_id: int
    person_name: str
    employment_type: str
    adjusted_target: Decimal
    total_hours: Decimal
    quota_met: bool
    partners_hit: int
    partner_bonus: Decimal
    quota_bonus: Decimal
    overage_hours: Decimal
    overage_bonus: Decimal
    total_bonus: Decimal


@dataclass
class BonusPayoutSummary:
    month: str
    partner_results: List[PartnerPayoutResult] = field(default_factory=list)
    individual_results: List[IndividualPayoutResult] = field(default_factory=list)
    total_partner_bonuses_paid: Decimal = DECIMAL_ZERO
    total_individual_bonuses_paid: Decimal = DECIMAL_ZERO
    total_overage_bonuses_paid: Decimal = DECIMAL_ZERO

    @property
    def grand_total(self) -> Decimal:
        return self.total_partner_bonuses_paid + self.total_individual_bonuses_paid + self.total_overage_bonuses_paid

    def as_dict(self) -> dict:
        return {**asdict(self), "grand_total": self.grand_total}


def _partner_results(client_rows: Sequence[TrackerResult]) -> List[PartnerPayoutResult]:
    policies = {
        policy.client_id: policy
        for policy in PartnerBonusPolicy.objects.active().filter(client_id__in=[row.subject_id for row in client_rows])
    }

    results = []
    for row in client_rows:
        policy = policies.get(row.subject_id)
        if policy is None:
            continue
        results.append(
            PartnerPayoutResult(
                client_id=row.subject_id,
                client_name=row.subject_name,
                adjusted_target=row.adjusted_target,
                billed_hours=row.billed_hours,
                percentage_complete=row.percentage_complete,
                quota_met=row.percentage_complete >= PARTNER_QUOTA_PERCENTAGE,
                bonus_full_time=quantize_decimal(policy.bonus_full_time),
                bonus_part_time=quantize_decimal(policy.bonus_part_time),
            )
        )
    return results


def build_bonus_payouts(
    month, resource_rows: Sequence[TrackerResult], client_rows: Sequence[TrackerResult]
) -> BonusPayoutSummary:
    """Compute the payouts of ``month`` from already computed tracker rows.

    Args:
        month: ``YYYY-MM`` string or MonthWindow
        resource_rows: Rows of the resource quota tracker
        client_rows: Rows of the client quota tracker

    Returns:
        BonusPayoutSummary: Partner rows, one row per person and the three totals
    """
    window = parse_month(month)
    partner_results = _partner_results(client_rows)
    partners_met = [partner for partner in partner_results if partner.quota_met]

    settings_by_type: Dict[str, IndividualQuotaBonusSetting] = {
        setting.employment_type: setting for setting in IndividualQuotaBonusSetting.objects.all()
    }
    employment_types = dict(
        User.objects.filter(id__in=[row.subject_id for row in resource_rows]).values_list("id", "employment_type")
    )

    summary = BonusPayoutSummary(month=window.key, partner_results=partner_results)
    for row in resource_rows:
        employment_type = employment_types.get(row.subject_id, EmploymentType.FULL_TIME)
        is_part_time = employment_type == EmploymentType.PART_TIME
        setting = settings_by_type.get(employment_type)

        partner_bonus = sum(
            (partner.bonus_part_time if is_part_time else partner.bonus_full_time for partner in partners_met),
            DECIMAL_ZERO,
        )
        total_hours = row.billed_hours + row.prebilled_hours
        quota_met = total_hours >= row.adjusted_target
        overage_hours = max(DECIMAL_ZERO, total_hours - row.adjusted_target)
        quota_bonus = setting.quota_bonus if setting and quota_met else DECIMAL_ZERO
        overage_bonus = overage_hours * setting.overage_rate if setting else DECIMAL_ZERO

        result = IndividualPayoutResult(
            person_id=row.subject_id,
            person_name=row.subject_name,
            employment_type=employment_type,
            adjusted_target=row.adjusted_target,
            total_hours=quantize_decimal(total_hours),
            quota_met=quota_met,
            partners_hit=len(partners_met),
            partner_bonus=quantize_decimal(partner_bonus),
            quota_bonus=quantize_decimal(quota_bonus),
            overage_hours=quantize_decimal(overage_hours),
            overage_bonus=quantize_decimal(overage_bonus),
            total_bonus=quantize_decimal(partner_bonus + quota_bonus + overage_bonus),
        )
        summary.individual_results.append(result)
        summary.total_partner_bonuses_paid += result.partner_bonus
        summary.total_individual_bonuses_paid += result.quota_bonus
        summary.total_overage_bonuses_paid += result.overage_bonus

    logger.info(
        "Bonus payouts %s: %s people, %s of %s partners met, total %s",
        window.key,
        len(summary.individual_results),
        len(partners_met),
        len(partner_results),
        summary.grand_total,
    )
    return summary


def get_bonus_payouts(month, *, today: Optional[date] = None, policy=None) -> BonusPayoutSummary:
    """Bonus payouts of ``month`` from freshly computed resource and client trackers."""
    window = parse_month(month)
    policy = resolve_policy(policy)
    return build_bonus_payouts(
        window,
        get_resource_quota_tracker(window, today=today, policy=policy),
        get_client_quota_tracker(window, today=today, policy=policy),
    )
