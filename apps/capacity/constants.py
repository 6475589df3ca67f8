# Capacity Module Constants
from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _

DEFAULT_RESOURCE_MONTHLY_TARGET = Decimal("160")

DEFAULT_PARTNER_BONUS_FULL_TIME = Decimal("150")
DEFAULT_PARTNER_BONUS_PART_TIME = Decimal("75")
DEFAULT_INDIVIDUAL_OVERAGE_RATE = Decimal("5")

# A partner client pays its bonus once its tracker row reaches this percentage
PARTNER_QUOTA_PERCENTAGE = Decimal("100")

# Fewer weeks than this in a month never qualifies for the weekly bonus
MIN_BONUS_WEEKS = 4

MONTH_FORMAT_ERROR = "Invalid month format. Use YYYY-MM (e.g., 2024-02)"


class QuotaPolicy(models.TextChoices):
    """Which quota row applies to a queried month.

    CURRENT_ONLY applies the single current row to every month, past months
    included. VERSIONED ignores rows whose effective_from falls after the month.
    """

    CURRENT_ONLY = "current_only", _("Current row for every month")
    VERSIONED = "versioned", _("Respect effective_from")


class EfficiencyScope(models.TextChoices):
    CLIENT = "client", _("Client")
    ACCOUNT = "account", _("Account")


class HoursGranularity(models.TextChoices):
    WEEK = "week", _("Week")
    MONTH = "month", _("Month")
