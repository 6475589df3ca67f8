from django.db import models

from apps.agency.constants import ClientType
from libs.models import ActiveFlagMixin, BaseModel


class Client(ActiveFlagMixin, BaseModel):
    """Top-level customer (an agency or a direct client)."""

    name = models.CharField(max_length=255, verbose_name="Client name")
    client_type = models.CharField(
        max_length=20,
        choices=ClientType.choices,
        default=ClientType.AGENCY,
        verbose_name="Client type",
    )
    description = models.TextField(blank=True, verbose_name="Description")

    class Meta:
        verbose_name = "Client"
        verbose_name_plural = "Clients"
        db_table = "agency_client"
        ordering = ["name"]

    def __str__(self):
        return self.name


class SubAccount(ActiveFlagMixin, BaseModel):
    """Account of a client; time entries may be attributed to one."""

    client = models.ForeignKey(
        Client,
        on_delete=models.CASCADE,
        related_name="sub_accounts",
        verbose_name="Client",
    )
    name = models.CharField(max_length=255, verbose_name="Account name")
    description = models.TextField(blank=True, verbose_name="Description")

    class Meta:
        verbose_name = "Sub-account"
        verbose_name_plural = "Sub-accounts"
        db_table = "agency_sub_account"
        ordering = ["name"]

    def __str__(self):
        return f"{self.client.name} / {self.name}"
