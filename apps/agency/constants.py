# Agency Module Constants
from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _

DEFAULT_MONTHLY_TARGET_HOURS = Decimal("160")


class ClientType(models.TextChoices):
    AGENCY = "agency", _("Agency")
    DIRECT = "direct", _("Direct")


class BillingType(models.TextChoices):
    """How the billed hours of a time entry count against quotas.

    BILLED hours count toward every quota. PREBILLED hours were invoiced ahead of
    the work; they are reported next to billed hours on the resource tracker but
    never count toward client or sub-account quotas.
    """

    BILLED = "billed", _("Billed")
    PREBILLED = "prebilled", _("Pre-billed")
