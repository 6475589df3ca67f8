from rest_framework.routers import DefaultRouter

from apps.capacity.api.views import QuotaPeriodViewSet, QuotaTrackerViewSet

app_name = "capacity"

router = DefaultRouter()
router.register(r"quota-trackers", QuotaTrackerViewSet, basename="quota-trackers")
router.register(r"quota-periods", QuotaPeriodViewSet, basename="quota-periods")

urlpatterns = router.urls
