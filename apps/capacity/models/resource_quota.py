from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from apps.capacity.constants import DEFAULT_RESOURCE_MONTHLY_TARGET
from libs.models import ActiveFlagMixin, BaseModel


class ResourceQuota(ActiveFlagMixin, BaseModel):
    """Monthly billed-hours target of one team member.

    One current row per person, applied to whichever month is queried.
    ``effective_from`` is only read under the versioned quota policy.
    """

    person = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="resource_quota",
        verbose_name="Person",
    )
    monthly_target = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        default=DEFAULT_RESOURCE_MONTHLY_TARGET,
        validators=[MinValueValidator(0)],
        verbose_name="Monthly target hours",
    )
    notes = models.TextField(blank=True, verbose_name="Notes")
    effective_from = models.DateField(null=True, blank=True, verbose_name="Effective from")

    class Meta:
        verbose_name = "Resource quota"
        verbose_name_plural = "Resource quotas"
        db_table = "capacity_resource_quota"

    def __str__(self):
        return f"{self.person}: {self.monthly_target}h"
