import decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Holiday",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255, verbose_name="Holiday name")),
                ("start_date", models.DateField(verbose_name="Start date")),
                ("end_date", models.DateField(blank=True, null=True, verbose_name="End date")),
                ("notes", models.TextField(blank=True, verbose_name="Notes")),
            ],
            options={
                "verbose_name": "Holiday",
                "verbose_name_plural": "Holidays",
                "db_table": "capacity_holiday",
                "ordering": ["-start_date"],
                "indexes": [
                    models.Index(fields=["start_date", "end_date"], name="capacity_ho_start_d_2f61a4_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="QuotaPeriod",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("year_month", models.CharField(max_length=7, unique=True, verbose_name="Month (YYYY-MM)")),
                ("calculated_at", models.DateTimeField(verbose_name="Calculated at")),
                ("resource_results", models.JSONField(default=list, verbose_name="Resource results")),
                ("client_results", models.JSONField(default=list, verbose_name="Client results")),
                ("account_results", models.JSONField(default=list, verbose_name="Account results")),
                ("bonus_results", models.JSONField(default=list, verbose_name="Bonus results")),
                ("is_finalized", models.BooleanField(default=False, verbose_name="Finalized")),
            ],
            options={
                "verbose_name": "Quota period",
                "verbose_name_plural": "Quota periods",
                "db_table": "capacity_quota_period",
                "ordering": ["-year_month"],
            },
        ),
        migrations.CreateModel(
            name="ResourceQuota",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "monthly_target",
                    models.DecimalField(
                        decimal_places=2,
                        default=decimal.Decimal("160"),
                        max_digits=8,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Monthly target hours",
                    ),
                ),
                ("notes", models.TextField(blank=True, verbose_name="Notes")),
                ("effective_from", models.DateField(blank=True, null=True, verbose_name="Effective from")),
                (
                    "person",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="resource_quota",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Person",
                    ),
                ),
            ],
            options={
                "verbose_name": "Resource quota",
                "verbose_name_plural": "Resource quotas",
                "db_table": "capacity_resource_quota",
            },
        ),
        migrations.CreateModel(
            name="TimeOff",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("start_date", models.DateField(verbose_name="Start date")),
                ("end_date", models.DateField(verbose_name="End date")),
                ("reason", models.CharField(blank=True, max_length=255, verbose_name="Reason")),
                ("notes", models.TextField(blank=True, verbose_name="Notes")),
                (
                    "person",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="time_off",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Person",
                    ),
                ),
            ],
            options={
                "verbose_name": "Time off",
                "verbose_name_plural": "Time off",
                "db_table": "capacity_time_off",
                "ordering": ["-start_date"],
                "indexes": [
                    models.Index(fields=["person", "start_date", "end_date"], name="capacity_ti_person__9b0c57_idx"),
                ],
            },
        ),
    ]
