"""Serializers for the quota tracker APIs."""

from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from apps.capacity.constants import MONTH_FORMAT_ERROR, EfficiencyScope, HoursGranularity, QuotaPolicy
from apps.capacity.utils.calendar import parse_month


class MonthQuerySerializer(serializers.Serializer):
    """Validate the ``month`` query parameter (YYYY-MM) into a MonthWindow."""

    month = serializers.CharField(
        help_text=_("Month in YYYY-MM format"),
        error_messages={"required": MONTH_FORMAT_ERROR, "blank": MONTH_FORMAT_ERROR},
    )

    def validate_month(self, value):
        try:
            return parse_month(value)
        except ValueError:
            raise serializers.ValidationError(MONTH_FORMAT_ERROR)


class PolicyQuerySerializer(serializers.Serializer):
    policy = serializers.ChoiceField(
        choices=QuotaPolicy.choices,
        required=False,
        help_text=_("Quota policy, defaults to the server setting"),
    )


class TrackerQuerySerializer(MonthQuerySerializer, PolicyQuerySerializer):
    pass


class AccountTrackerQuerySerializer(TrackerQuerySerializer):
    client_id = serializers.IntegerField(required=False, min_value=1, help_text=_("Only sub-accounts of this client"))


class EfficiencyQuerySerializer(serializers.Serializer):
    scope = serializers.ChoiceField(choices=EfficiencyScope.choices, default=EfficiencyScope.CLIENT)
    month = serializers.CharField(required=False, help_text=_("Month in YYYY-MM format, all time when empty"))

    def validate_month(self, value):
        try:
            return parse_month(value)
        except ValueError:
            raise serializers.ValidationError(MONTH_FORMAT_ERROR)


class HoursSummaryQuerySerializer(serializers.Serializer):
    start = serializers.DateField(help_text=_("First day of the range"))
    end = serializers.DateField(help_text=_("Last day of the range"))
    granularity = serializers.ChoiceField(choices=HoursGranularity.choices, default=HoursGranularity.WEEK)

    def validate(self, attrs):
        if attrs["end"] < attrs["start"]:
            raise serializers.ValidationError({"end": _("End date must be greater than or equal to start date")})
        return attrs


class TrackerResultSerializer(serializers.Serializer):
    """One row of a quota tracker (person, client or sub-account)."""

    subject_id = serializers.IntegerField()
    subject_name = serializers.CharField()
    client_id = serializers.IntegerField(allow_null=True, required=False)
    client_name = serializers.CharField(allow_null=True, required=False)
    monthly_target = serializers.FloatField()
    adjusted_target = serializers.FloatField(help_text=_("Monthly target scaled to the available working days"))
    expected_hours_to_date = serializers.FloatField()
    billed_hours = serializers.FloatField()
    prebilled_hours = serializers.FloatField()
    pacing = serializers.FloatField(help_text=_("Billed minus expected hours, negative when behind"))
    percentage_complete = serializers.FloatField()
    standard_working_days = serializers.IntegerField()
    available_working_days = serializers.IntegerField()
    working_days_elapsed = serializers.IntegerField()


class WeekWindowResultSerializer(serializers.Serializer):
    week_number = serializers.IntegerField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    days_in_window = serializers.IntegerField()
    billed_hours = serializers.FloatField()
    weekly_target = serializers.FloatField()
    hit_target = serializers.BooleanField()


class EligibilityResultSerializer(serializers.Serializer):
    client_id = serializers.IntegerField()
    client_name = serializers.CharField()
    month = serializers.CharField()
    monthly_target = serializers.FloatField()
    weeks = WeekWindowResultSerializer(many=True)
    weeks_hit = serializers.IntegerField()
    total_weeks = serializers.IntegerField()
    eligible_for_bonus = serializers.BooleanField()


class TargetProgressSerializer(serializers.Serializer):
    client_id = serializers.IntegerField()
    client_name = serializers.CharField()
    week_start = serializers.DateField()
    week_end = serializers.DateField()
    weekly_actual = serializers.FloatField()
    monthly_actual = serializers.FloatField()
    weekly_billable = serializers.FloatField()
    monthly_billable = serializers.FloatField()
    weekly_prebilled = serializers.FloatField()
    monthly_prebilled = serializers.FloatField()
    weekly_target = serializers.FloatField()
    monthly_target = serializers.FloatField()
    show_billable = serializers.BooleanField()
    show_prebilled = serializers.BooleanField()
    no_quota = serializers.BooleanField()


class EfficiencyRateSerializer(serializers.Serializer):
    subject_id = serializers.IntegerField()
    subject_name = serializers.CharField()
    client_id = serializers.IntegerField(allow_null=True, required=False)
    client_name = serializers.CharField(allow_null=True, required=False)
    actual_hours = serializers.FloatField()
    billed_hours = serializers.FloatField()
    efficiency = serializers.FloatField(help_text=_("Billed over actual hours, in percent"))


class HoursSummarySerializer(serializers.Serializer):
    period_start = serializers.DateField()
    period_end = serializers.DateField()
    label = serializers.CharField()
    actual_hours = serializers.FloatField()
    billed_hours = serializers.FloatField()


class AccountHoursSerializer(serializers.Serializer):
    sub_account_id = serializers.IntegerField()
    sub_account_name = serializers.CharField()
    client_id = serializers.IntegerField()
    client_name = serializers.CharField()
    week_start = serializers.DateField()
    week_end = serializers.DateField()
    weekly_actual = serializers.FloatField()
    monthly_actual = serializers.FloatField()
    weekly_billed = serializers.FloatField()
    monthly_billed = serializers.FloatField()


class PartnerPayoutResultSerializer(serializers.Serializer):
    client_id = serializers.IntegerField()
    client_name = serializers.CharField()
    adjusted_target = serializers.FloatField()
    billed_hours = serializers.FloatField()
    percentage_complete = serializers.FloatField()
    quota_met = serializers.BooleanField()
    bonus_full_time = serializers.FloatField()
    bonus_part_time = serializers.FloatField()


class IndividualPayoutResultSerializer(serializers.Serializer):
    person_id = serializers.IntegerField()
    person_name = serializers.CharField()
    employment_type = serializers.CharField()
    adjusted_target = serializers.FloatField()
    total_hours = serializers.FloatField(help_text=_("Billed plus pre-billed hours"))
    quota_met = serializers.BooleanField()
    partners_hit = serializers.IntegerField()
    partner_bonus = serializers.FloatField()
    quota_bonus = serializers.FloatField()
    overage_hours = serializers.FloatField()
    overage_bonus = serializers.FloatField()
    total_bonus = serializers.FloatField()


class BonusPayoutSummarySerializer(serializers.Serializer):
    month = serializers.CharField()
    partner_results = PartnerPayoutResultSerializer(many=True)
    individual_results = IndividualPayoutResultSerializer(many=True)
    total_partner_bonuses_paid = serializers.FloatField()
    total_individual_bonuses_paid = serializers.FloatField()
    total_overage_bonuses_paid = serializers.FloatField()
    grand_total = serializers.FloatField()
