from .bonus_policy import IndividualQuotaBonusSetting, PartnerBonusPolicy
from .holiday import Holiday
from .quota_period import QuotaPeriod
from .resource_quota import ResourceQuota
from .time_off import TimeOff

__all__ = [
    "Holiday",
    "IndividualQuotaBonusSetting",
    "PartnerBonusPolicy",
    "QuotaPeriod",
    "ResourceQuota",
    "TimeOff",
]
