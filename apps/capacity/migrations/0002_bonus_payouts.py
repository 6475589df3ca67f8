import decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("agency", "0001_initial"),
        ("capacity", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="IndividualQuotaBonusSetting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "employment_type",
                    models.CharField(
                        choices=[("full_time", "Full-time"), ("part_time", "Part-time")],
                        max_length=20,
                        unique=True,
                        verbose_name="Employment type",
                    ),
                ),
                (
                    "quota_bonus",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Quota bonus",
                    ),
                ),
                (
                    "overage_rate",
                    models.DecimalField(
                        decimal_places=2,
                        default=decimal.Decimal("5"),
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Overage rate per hour",
                    ),
                ),
            ],
            options={
                "verbose_name": "Individual quota bonus setting",
                "verbose_name_plural": "Individual quota bonus settings",
                "db_table": "capacity_individual_quota_bonus_setting",
                "ordering": ["employment_type"],
            },
        ),
        migrations.CreateModel(
            name="PartnerBonusPolicy",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(db_index=True, default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "bonus_full_time",
                    models.DecimalField(
                        decimal_places=2,
                        default=decimal.Decimal("150"),
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Bonus per full-time member",
                    ),
                ),
                (
                    "bonus_part_time",
                    models.DecimalField(
                        decimal_places=2,
                        default=decimal.Decimal("75"),
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Bonus per part-time member",
                    ),
                ),
                (
                    "client",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="partner_bonus_policy",
                        to="agency.client",
                        verbose_name="Client",
                    ),
                ),
            ],
            options={
                "verbose_name": "Partner bonus policy",
                "verbose_name_plural": "Partner bonus policies",
                "db_table": "capacity_partner_bonus_policy",
            },
        ),
        migrations.AddField(
            model_name="quotaperiod",
            name="partner_results",
            field=models.JSONField(default=list, verbose_name="Partner bonus results"),
        ),
        migrations.AddField(
            model_name="quotaperiod",
            name="individual_results",
            field=models.JSONField(default=list, verbose_name="Individual bonus results"),
        ),
        migrations.AddField(
            model_name="quotaperiod",
            name="total_partner_bonuses_paid",
            field=models.DecimalField(
                decimal_places=2, default=0, max_digits=10, verbose_name="Total partner bonuses paid"
            ),
        ),
        migrations.AddField(
            model_name="quotaperiod",
            name="total_individual_bonuses_paid",
            field=models.DecimalField(
                decimal_places=2, default=0, max_digits=10, verbose_name="Total individual bonuses paid"
            ),
        ),
        migrations.AddField(
            model_name="quotaperiod",
            name="total_overage_bonuses_paid",
            field=models.DecimalField(
                decimal_places=2, default=0, max_digits=10, verbose_name="Total overage bonuses paid"
            ),
        ),
    ]
