from rest_framework import serializers

from apps.capacity.models import QuotaPeriod


class QuotaPeriodListSerializer(serializers.ModelSerializer):
    class Meta:
        model = QuotaPeriod
        fields = ["id", "year_month", "calculated_at", "is_finalized"]
        read_only_fields = fields


class QuotaPeriodSerializer(serializers.ModelSerializer):
    """Full snapshot of one month, tracker rows and bonus payouts included."""

    total_partner_bonuses_paid = serializers.FloatField(read_only=True)
    total_individual_bonuses_paid = serializers.FloatField(read_only=True)
    total_overage_bonuses_paid = serializers.FloatField(read_only=True)

    class Meta:
        model = QuotaPeriod
        fields = [
            "id",
            "year_month",
            "calculated_at",
            "is_finalized",
            "resource_results",
            "client_results",
            "account_results",
            "bonus_results",
            "partner_results",
            "individual_results",
            "total_partner_bonuses_paid",
            "total_individual_bonuses_paid",
            "total_overage_bonuses_paid",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
