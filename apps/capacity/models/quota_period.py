from django.db import models

from libs.models import BaseModel


class QuotaPeriod(BaseModel):
    """Point-in-time capture of the quota trackers for one month.

    Trackers are always computed live from the current quota rows. A period is
    the explicit way to keep the figures of a closed month unchanged after
    later quota edits. Bonus payouts of the month are stored next to the
    tracker rows.
    """

    year_month = models.CharField(max_length=7, unique=True, verbose_name="Month (YYYY-MM)")
    calculated_at = models.DateTimeField(verbose_name="Calculated at")
    resource_results = models.JSONField(default=list, verbose_name="Resource results")
    client_results = models.JSONField(default=list, verbose_name="Client results")
    account_results = models.JSONField(default=list, verbose_name="Account results")
    bonus_results = models.JSONField(default=list, verbose_name="Bonus results")
    partner_results = models.JSONField(default=list, verbose_name="Partner bonus results")
    individual_results = models.JSONField(default=list, verbose_name="Individual bonus results")
    total_partner_bonuses_paid = models.DecimalField(
        max_digits=10, decimal_places=2, default=0, verbose_name="Total partner bonuses paid"
    )
    total_individual_bonuses_paid = models.DecimalField(
        max_digits=10, decimal_places=2, default=0, verbose_name="Total individual bonuses paid"
    )
    total_overage_bonuses_paid = models.DecimalField(
        max_digits=10, decimal_places=2, default=0, verbose_name="Total overage bonuses paid"
    )
    is_finalized = models.BooleanField(default=False, verbose_name="Finalized")

    class Meta:
        verbose_name = "Quota period"
        verbose_name_plural = "Quota periods"
        db_table = "capacity_quota_period"
        ordering = ["-year_month"]

    def __str__(self):
        return self.year_month
