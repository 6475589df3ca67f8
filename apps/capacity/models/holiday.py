from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from libs.models import ActiveFlagMixin, BaseModel


class Holiday(ActiveFlagMixin, BaseModel):
    """Company-wide non-working day or range of days.

    Attributes:
        name: Name of the holiday
        start_date: First day of the holiday (inclusive)
        end_date: Last day of the holiday (inclusive); empty means a single day
        notes: Additional notes about the holiday
    """

    name = models.CharField(max_length=255, verbose_name="Holiday name")
    start_date = models.DateField(verbose_name="Start date")
    end_date = models.DateField(null=True, blank=True, verbose_name="End date")
    notes = models.TextField(blank=True, verbose_name="Notes")

    class Meta:
        verbose_name = "Holiday"
        verbose_name_plural = "Holidays"
        db_table = "capacity_holiday"
        ordering = ["-start_date"]
        indexes = [
            models.Index(fields=["start_date", "end_date"], name="capacity_ho_start_d_2f61a4_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.start_date} - {self.last_day})"

    @property
    def last_day(self):
        return self.end_date or self.start_date

    def clean(self):
        """Validate holiday data."""
        super().clean()

        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValidationError({"end_date": _("End date must be greater than or equal to start date")})
