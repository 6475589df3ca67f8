from .quota_period import QuotaPeriodViewSet
from .quota_tracker import QuotaTrackerViewSet

__all__ = ["QuotaPeriodViewSet", "QuotaTrackerViewSet"]
