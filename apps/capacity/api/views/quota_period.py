from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import viewsets

from apps.capacity.api.serializers import QuotaPeriodListSerializer, QuotaPeriodSerializer
from apps.capacity.models import QuotaPeriod


@extend_schema_view(
    list=extend_schema(
        summary="List quota periods",
        description="Months whose quota trackers were captured with the snapshot command.",
        tags=["Quota Periods"],
    ),
    retrieve=extend_schema(
        summary="Get quota period",
        description="Captured tracker rows of one month, looked up by YYYY-MM.",
        tags=["Quota Periods"],
    ),
)
class QuotaPeriodViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = QuotaPeriod.objects.all()
    lookup_field = "year_month"
    lookup_value_regex = r"\d{4}-\d{2}"

    def get_serializer_class(self):
        if self.action == "list":
            return QuotaPeriodListSerializer
        return QuotaPeriodSerializer
