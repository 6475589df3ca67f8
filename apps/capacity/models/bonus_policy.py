from django.core.validators import MinValueValidator
from django.db import models

from apps.capacity.constants import (
    DEFAULT_INDIVIDUAL_OVERAGE_RATE,
    DEFAULT_PARTNER_BONUS_FULL_TIME,
    DEFAULT_PARTNER_BONUS_PART_TIME,
)
from apps.core.constants import EmploymentType
from libs.models import ActiveFlagMixin, BaseModel


class PartnerBonusPolicy(ActiveFlagMixin, BaseModel):
    """Marks a client as a partner whose monthly quota pays a team-wide bonus.

    When the client reaches 100% of its adjusted target, every tracked person
    receives the full-time or part-time amount according to their employment type.
    """

    client = models.OneToOneField(
        "agency.Client",
        on_delete=models.CASCADE,
        related_name="partner_bonus_policy",
        verbose_name="Client",
    )
    bonus_full_time = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=DEFAULT_PARTNER_BONUS_FULL_TIME,
        validators=[MinValueValidator(0)],
        verbose_name="Bonus per full-time member",
    )
    bonus_part_time = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=DEFAULT_PARTNER_BONUS_PART_TIME,
        validators=[MinValueValidator(0)],
        verbose_name="Bonus per part-time member",
    )

    class Meta:
        verbose_name = "Partner bonus policy"
        verbose_name_plural = "Partner bonus policies"
        db_table = "capacity_partner_bonus_policy"

    def __str__(self):
        return f"Partner bonus: {self.client}"

    def bonus_for(self, employment_type: str):
        if employment_type == EmploymentType.PART_TIME:
            return self.bonus_part_time
        return self.bonus_full_time


class IndividualQuotaBonusSetting(BaseModel):
    """Personal quota bonus and overage rate of one employment type."""

    employment_type = models.CharField(
        max_length=20,
        choices=EmploymentType.choices,
        unique=True,
        verbose_name="Employment type",
    )
    quota_bonus = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name="Quota bonus",
    )
    overage_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=DEFAULT_INDIVIDUAL_OVERAGE_RATE,
        validators=[MinValueValidator(0)],
        verbose_name="Overage rate per hour",
    )

    class Meta:
        verbose_name = "Individual quota bonus setting"
        verbose_name_plural = "Individual quota bonus settings"
        db_table = "capacity_individual_quota_bonus_setting"
        ordering = ["employment_type"]

    def __str__(self):
        return f"{self.get_employment_type_display()}: {self.quota_bonus}"
