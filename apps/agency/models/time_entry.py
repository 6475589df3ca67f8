from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.agency.constants import BillingType
from libs.models import BaseModel


class TimeEntry(BaseModel):
    """Hours a person logged against a client on a calendar day.

    Attributes:
        person: Team member who did the work
        client: Client the hours belong to
        sub_account: Optional sub-account of that client
        date: Calendar day of the work (no time of day, no zone)
        actual_hours: Hours actually spent
        billed_hours: Hours billed to the client
        billing_type: Billed or pre-billed
    """

    person = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="time_entries",
        verbose_name="Person",
    )
    client = models.ForeignKey(
        "agency.Client",
        on_delete=models.CASCADE,
        related_name="time_entries",
        verbose_name="Client",
    )
    sub_account = models.ForeignKey(
        "agency.SubAccount",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="time_entries",
        verbose_name="Sub-account",
    )
    date = models.DateField(verbose_name="Date")
    task_name = models.CharField(max_length=255, blank=True, verbose_name="Task name")
    notes = models.TextField(blank=True, verbose_name="Notes")
    actual_hours = models.DecimalField(max_digits=8, decimal_places=2, verbose_name="Actual hours")
    billed_hours = models.DecimalField(max_digits=8, decimal_places=2, verbose_name="Billed hours")
    billing_type = models.CharField(
        max_length=20,
        choices=BillingType.choices,
        default=BillingType.BILLED,
        verbose_name="Billing type",
    )

    class Meta:
        verbose_name = "Time entry"
        verbose_name_plural = "Time entries"
        db_table = "agency_time_entry"
        ordering = ["-date", "-created_at"]
        indexes = [
            models.Index(fields=["date", "person"], name="agency_time_date_d7a1f2_idx"),
            models.Index(fields=["date", "client"], name="agency_time_date_4c9e0b_idx"),
            models.Index(fields=["date", "sub_account"], name="agency_time_date_81b3d6_idx"),
        ]

    def __str__(self):
        return f"{self.person} - {self.client} - {self.date}: {self.billed_hours}h"

    def clean(self):
        super().clean()

        if self.sub_account_id and self.client_id and self.sub_account.client_id != self.client_id:
            raise ValidationError({"sub_account": _("Sub-account must belong to the selected client")})
