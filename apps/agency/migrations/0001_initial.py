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
            name="Client",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255, verbose_name="Client name")),
                (
                    "client_type",
                    models.CharField(
                        choices=[("agency", "Agency"), ("direct", "Direct")],
                        default="agency",
                        max_length=20,
                        verbose_name="Client type",
                    ),
                ),
                ("description", models.TextField(blank=True, verbose_name="Description")),
            ],
            options={
                "verbose_name": "Client",
                "verbose_name_plural": "Clients",
                "db_table": "agency_client",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="SubAccount",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255, verbose_name="Account name")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                (
                    "client",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="sub_accounts",
                        to="agency.client",
                        verbose_name="Client",
                    ),
                ),
            ],
            options={
                "verbose_name": "Sub-account",
                "verbose_name_plural": "Sub-accounts",
                "db_table": "agency_sub_account",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="ClientQuotaConfig",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
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
                ("show_billable", models.BooleanField(default=True, verbose_name="Show billable")),
                ("show_prebilled", models.BooleanField(default=True, verbose_name="Show pre-billed")),
                ("no_quota", models.BooleanField(default=False, verbose_name="No quota")),
                ("is_visible", models.BooleanField(default=True, verbose_name="Visible")),
                ("effective_from", models.DateField(blank=True, null=True, verbose_name="Effective from")),
                (
                    "client",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="quota_config",
                        to="agency.client",
                        verbose_name="Client",
                    ),
                ),
            ],
            options={
                "verbose_name": "Client quota config",
                "verbose_name_plural": "Client quota configs",
                "db_table": "agency_client_quota_config",
            },
        ),
        migrations.CreateModel(
            name="SubAccountQuotaConfig",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "monthly_target",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=8,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Monthly target hours",
                    ),
                ),
                ("effective_from", models.DateField(blank=True, null=True, verbose_name="Effective from")),
                (
                    "sub_account",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="quota_config",
                        to="agency.subaccount",
                        verbose_name="Sub-account",
                    ),
                ),
            ],
            options={
                "verbose_name": "Sub-account quota config",
                "verbose_name_plural": "Sub-account quota configs",
                "db_table": "agency_sub_account_quota_config",
            },
        ),
        migrations.CreateModel(
            name="TimeEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("date", models.DateField(verbose_name="Date")),
                ("task_name", models.CharField(blank=True, max_length=255, verbose_name="Task name")),
                ("notes", models.TextField(blank=True, verbose_name="Notes")),
                ("actual_hours", models.DecimalField(decimal_places=2, max_digits=8, verbose_name="Actual hours")),
                ("billed_hours", models.DecimalField(decimal_places=2, max_digits=8, verbose_name="Billed hours")),
                (
                    "billing_type",
                    models.CharField(
                        choices=[("billed", "Billed"), ("prebilled", "Pre-billed")],
                        default="billed",
                        max_length=20,
                        verbose_name="Billing type",
                    ),
                ),
                (
                    "client",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="time_entries",
                        to="agency.client",
                        verbose_name="Client",
                    ),
                ),
                (
                    "person",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="time_entries",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Person",
                    ),
                ),
                (
                    "sub_account",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="time_entries",
                        to="agency.subaccount",
                        verbose_name="Sub-account",
                    ),
                ),
            ],
            options={
                "verbose_name": "Time entry",
                "verbose_name_plural": "Time entries",
                "db_table": "agency_time_entry",
                "ordering": ["-date", "-created_at"],
                "indexes": [
                    models.Index(fields=["date", "person"], name="agency_time_date_d7a1f2_idx"),
                    models.Index(fields=["date", "client"], name="agency_time_date_4c9e0b_idx"),
                    models.Index(fields=["date", "sub_account"], name="agency_time_date_81b3d6_idx"),
                ],
            },
        ),
    ]
