from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from libs.models import ActiveFlagMixin, BaseModel


class TimeOff(ActiveFlagMixin, BaseModel):
    """Personal leave of one team member, inclusive on both ends."""

    person = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="time_off",
        verbose_name="Person",
    )
    start_date = models.DateField(verbose_name="Start date")
    end_date = models.DateField(verbose_name="End date")
    reason = models.CharField(max_length=255, blank=True, verbose_name="Reason")
    notes = models.TextField(blank=True, verbose_name="Notes")

    class Meta:
        verbose_name = "Time off"
        verbose_name_plural = "Time off"
        db_table = "capacity_time_off"
        ordering = ["-start_date"]
        indexes = [
            models.Index(fields=["person", "start_date", "end_date"], name="capacity_ti_person__9b0c57_idx"),
        ]

    def __str__(self):
        return f"{self.person} ({self.start_date} - {self.end_date})"

    def clean(self):
        super().clean()

        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValidationError({"end_date": _("End date must be greater than or equal to start date")})
