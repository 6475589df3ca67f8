"""ViewSet for the quota tracker read APIs."""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.capacity.api.serializers import (
    AccountHoursSerializer,
    AccountTrackerQuerySerializer,
    BonusPayoutSummarySerializer,
    EfficiencyQuerySerializer,
    EfficiencyRateSerializer,
    EligibilityResultSerializer,
    HoursSummaryQuerySerializer,
    HoursSummarySerializer,
    PolicyQuerySerializer,
    TargetProgressSerializer,
    TrackerQuerySerializer,
    TrackerResultSerializer,
)
from apps.capacity.constants import EfficiencyScope, HoursGranularity
from apps.capacity.services.analytics import (
    get_client_target_progress,
    get_efficiency_by_account,
    get_efficiency_by_client,
    get_hours_by_account,
    get_hours_summary,
)
from apps.capacity.services.bonus import get_weekly_bonus_eligibility
from apps.capacity.services.payouts import get_bonus_payouts
from apps.capacity.services.trackers import (
    get_account_quota_tracker,
    get_client_quota_tracker,
    get_resource_quota_tracker,
)

TAG = "Quota Trackers"

MONTH_PARAMETER = OpenApiParameter(
    name="month",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.QUERY,
    required=True,
    description="Month in YYYY-MM format",
    examples=[OpenApiExample("February 2024", value="2024-02")],
)
POLICY_PARAMETER = OpenApiParameter(
    name="policy",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.QUERY,
    enum=["current_only", "versioned"],
    description="Quota policy: current_only applies today's quota rows to every month",
)

TRACKER_ROW_EXAMPLE = OpenApiExample(
    "Person tracker row",
    value={
        "success": True,
        "data": [
            {
                "subject_id": 7,
                "subject_name": "Jane Doe",
                "client_id": None,
                "client_name": None,
                "monthly_target": 160.0,
                "adjusted_target": 152.4,
                "expected_hours_to_date": 91.4,
                "billed_hours": 88.5,
                "prebilled_hours": 4.0,
                "pacing": -2.9,
                "percentage_complete": 58.1,
                "standard_working_days": 21,
                "available_working_days": 20,
                "working_days_elapsed": 13,
            }
        ],
        "error": None,
    },
    response_only=True,
)


class QuotaTrackerViewSet(viewsets.ViewSet):
    """Read-only quota tracker reports, recomputed from the database on every call."""

    def _validated_query(self, serializer_class):
        serializer = serializer_class(data=self.request.query_params)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data

    @extend_schema(
        summary="Resource quota tracker",
        description="Per-person adjusted target, expected hours to date, billed and pre-billed hours for a month.",
        parameters=[MONTH_PARAMETER, POLICY_PARAMETER],
        responses={200: TrackerResultSerializer(many=True)},
        examples=[TRACKER_ROW_EXAMPLE],
        tags=[TAG],
    )
    @action(detail=False, methods=["get"], url_path="resources")
    def resources(self, request):
        query = self._validated_query(TrackerQuerySerializer)
        results = get_resource_quota_tracker(query["month"], policy=query.get("policy"))
        return Response(TrackerResultSerializer(results, many=True).data)

    @extend_schema(
        summary="Client quota tracker",
        description="Per-client adjusted target and billed hours for a month. Only billed hours count.",
        parameters=[MONTH_PARAMETER, POLICY_PARAMETER],
        responses={200: TrackerResultSerializer(many=True)},
        tags=[TAG],
    )
    @action(detail=False, methods=["get"], url_path="clients")
    def clients(self, request):
        query = self._validated_query(TrackerQuerySerializer)
        results = get_client_quota_tracker(query["month"], policy=query.get("policy"))
        return Response(TrackerResultSerializer(results, many=True).data)

    @extend_schema(
        summary="Sub-account quota tracker",
        description="Per-sub-account adjusted target and billed hours for a month, optionally for one client.",
        parameters=[
            MONTH_PARAMETER,
            POLICY_PARAMETER,
            OpenApiParameter(name="client_id", type=OpenApiTypes.INT, location=OpenApiParameter.QUERY),
        ],
        responses={200: TrackerResultSerializer(many=True)},
        tags=[TAG],
    )
    @action(detail=False, methods=["get"], url_path="accounts")
    def accounts(self, request):
        query = self._validated_query(AccountTrackerQuerySerializer)
        results = get_account_quota_tracker(query["month"], query.get("client_id"), policy=query.get("policy"))
        return Response(TrackerResultSerializer(results, many=True).data)

    @extend_schema(
        summary="Weekly bonus eligibility",
        description=(
            "Monday-Sunday windows of the current month, each checked against the monthly target "
            "prorated by calendar days. A client is eligible when every window (at least 4) hits its target."
        ),
        parameters=[POLICY_PARAMETER],
        responses={200: EligibilityResultSerializer(many=True)},
        tags=[TAG],
    )
    @action(detail=False, methods=["get"], url_path="bonus-eligibility")
    def bonus_eligibility(self, request):
        query = self._validated_query(PolicyQuerySerializer)
        results = get_weekly_bonus_eligibility(policy=query.get("policy"))
        return Response(EligibilityResultSerializer(results, many=True).data)

    @extend_schema(
        summary="Client target progress",
        description="Week-to-date and month-to-date hours of visible clients with their prorated weekly target.",
        responses={200: TargetProgressSerializer(many=True)},
        tags=[TAG],
    )
    @action(detail=False, methods=["get"], url_path="target-progress")
    def target_progress(self, request):
        results = get_client_target_progress()
        return Response(TargetProgressSerializer(results, many=True).data)

    @extend_schema(
        summary="Efficiency rates",
        description="Billed over actual hours per client or per sub-account, all time or for one month.",
        parameters=[
            OpenApiParameter(
                name="scope",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                enum=[EfficiencyScope.CLIENT.value, EfficiencyScope.ACCOUNT.value],
            ),
            OpenApiParameter(name="month", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY),
        ],
        responses={200: EfficiencyRateSerializer(many=True)},
        tags=[TAG],
    )
    @action(detail=False, methods=["get"], url_path="efficiency")
    def efficiency(self, request):
        query = self._validated_query(EfficiencyQuerySerializer)
        if query["scope"] == EfficiencyScope.ACCOUNT:
            results = get_efficiency_by_account(query.get("month"))
        else:
            results = get_efficiency_by_client(query.get("month"))
        return Response(EfficiencyRateSerializer(results, many=True).data)

    @extend_schema(
        summary="Bonus payouts",
        description=(
            "Partner, quota and overage bonuses of every tracked person for a month. Partner bonuses are paid "
            "for each partner client at 100% or more of its adjusted target. The quota bonus needs billed plus "
            "pre-billed hours at or above the person's adjusted target, and hours above it earn the overage rate."
        ),
        parameters=[MONTH_PARAMETER, POLICY_PARAMETER],
        responses={200: BonusPayoutSummarySerializer},
        tags=[TAG],
    )
    @action(detail=False, methods=["get"], url_path="bonus-payouts")
    def bonus_payouts(self, request):
        query = self._validated_query(TrackerQuerySerializer)
        summary = get_bonus_payouts(query["month"], policy=query.get("policy"))
        return Response(BonusPayoutSummarySerializer(summary).data)

    @extend_schema(
        summary="Hours summary",
        description="Actual and billed hours of all time entries per week (counted from start) or per calendar month.",
        parameters=[
            OpenApiParameter(name="start", type=OpenApiTypes.DATE, location=OpenApiParameter.QUERY, required=True),
            OpenApiParameter(name="end", type=OpenApiTypes.DATE, location=OpenApiParameter.QUERY, required=True),
            OpenApiParameter(
                name="granularity",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                enum=[HoursGranularity.WEEK.value, HoursGranularity.MONTH.value],
            ),
        ],
        responses={200: HoursSummarySerializer(many=True)},
        tags=[TAG],
    )
    @action(detail=False, methods=["get"], url_path="hours-summary")
    def hours_summary(self, request):
        query = self._validated_query(HoursSummaryQuerySerializer)
        results = get_hours_summary(query["start"], query["end"], query["granularity"])
        return Response(HoursSummarySerializer(results, many=True).data)

    @extend_schema(
        summary="Hours by sub-account",
        description="Week-to-date and month-to-date actual and billed hours of every active sub-account.",
        responses={200: AccountHoursSerializer(many=True)},
        tags=[TAG],
    )
    @action(detail=False, methods=["get"], url_path="hours-by-account")
    def hours_by_account(self, request):
        results = get_hours_by_account()
        return Response(AccountHoursSerializer(results, many=True).data)
