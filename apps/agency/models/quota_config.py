from django.core.validators import MinValueValidator
from django.db import models

from apps.agency.constants import DEFAULT_MONTHLY_TARGET_HOURS
from libs.models import ActiveFlagMixin, BaseModel


class ClientQuotaConfig(BaseModel):
    """Monthly billed-hours target of a client.

    There is exactly one current row per client. It is not versioned: editing it
    changes the target used for every month, past months included.

    Attributes:
        monthly_target: Billed hours the client is expected to reach per month
        show_billable / show_prebilled: Display flags for the target progress widget
        no_quota: Client is tracked for hours only, without a target
        is_visible: Hidden clients are left out of quota trackers
        effective_from: First day the target applies under the "versioned" policy
    """

    client = models.OneToOneField(
        "agency.Client",
        on_delete=models.CASCADE,
        related_name="quota_config",
        verbose_name="Client",
    )
    monthly_target = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        default=DEFAULT_MONTHLY_TARGET_HOURS,
        validators=[MinValueValidator(0)],
        verbose_name="Monthly target hours",
    )
    show_billable = models.BooleanField(default=True, verbose_name="Show billable")
    show_prebilled = models.BooleanField(default=True, verbose_name="Show pre-billed")
    no_quota = models.BooleanField(default=False, verbose_name="No quota")
    is_visible = models.BooleanField(default=True, verbose_name="Visible")
    effective_from = models.DateField(null=True, blank=True, verbose_name="Effective from")

    class Meta:
        verbose_name = "Client quota config"
        verbose_name_plural = "Client quota configs"
        db_table = "agency_client_quota_config"

    def __str__(self):
        return f"{self.client.name}: {self.monthly_target}h"


class SubAccountQuotaConfig(ActiveFlagMixin, BaseModel):
    """Monthly billed-hours target of a sub-account (single current row)."""

    sub_account = models.OneToOneField(
        "agency.SubAccount",
        on_delete=models.CASCADE,
        related_name="quota_config",
        verbose_name="Sub-account",
    )
    monthly_target = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name="Monthly target hours",
    )
    effective_from = models.DateField(null=True, blank=True, verbose_name="Effective from")

    class Meta:
        verbose_name = "Sub-account quota config"
        verbose_name_plural = "Sub-account quota configs"
        db_table = "agency_sub_account_quota_config"

    def __str__(self):
        return f"{self.sub_account}: {self.monthly_target}h"
