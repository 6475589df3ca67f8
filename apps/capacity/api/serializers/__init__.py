from .quota_period import QuotaPeriodListSerializer, QuotaPeriodSerializer
from .quota_tracker import (
    AccountHoursSerializer,
    AccountTrackerQuerySerializer,
    BonusPayoutSummarySerializer,
    EfficiencyQuerySerializer,
    EfficiencyRateSerializer,
    EligibilityResultSerializer,
    HoursSummaryQuerySerializer,
    HoursSummarySerializer,
    IndividualPayoutResultSerializer,
    MonthQuerySerializer,
    PartnerPayoutResultSerializer,
    PolicyQuerySerializer,
    TargetProgressSerializer,
    TrackerQuerySerializer,
    TrackerResultSerializer,
    WeekWindowResultSerializer,
)

__all__ = [
    "AccountHoursSerializer",
    "AccountTrackerQuerySerializer",
    "BonusPayoutSummarySerializer",
    "EfficiencyQuerySerializer",
    "EfficiencyRateSerializer",
    "EligibilityResultSerializer",
    "HoursSummaryQuerySerializer",
    "HoursSummarySerializer",
    "IndividualPayoutResultSerializer",
    "MonthQuerySerializer",
    "PartnerPayoutResultSerializer",
    "PolicyQuerySerializer",
    "QuotaPeriodListSerializer",
    "QuotaPeriodSerializer",
    "TargetProgressSerializer",
    "TrackerQuerySerializer",
    "TrackerResultSerializer",
    "WeekWindowResultSerializer",
]
