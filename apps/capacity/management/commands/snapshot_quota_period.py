"""Management command to capture the quota trackers of a month."""

from dateutil.relativedelta import relativedelta
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from apps.capacity.constants import MONTH_FORMAT_ERROR, QuotaPolicy
from apps.capacity.services.snapshots import QuotaPeriodExists, snapshot_quota_period
from apps.capacity.utils.calendar import month_of, parse_month


class Command(BaseCommand):
    """Management command to snapshot a quota period."""

    help = "Capture the quota trackers and bonus payouts of a month into a quota period"

    def add_arguments(self, parser):
        parser.add_argument(
            "--month",
            type=str,
            help="Month in YYYY-MM format (e.g., 2024-02). If not provided, captures the previous month.",
        )
        parser.add_argument(
            "--override",
            action="store_true",
            help="Recalculate the period if it already exists (finalized periods are never overwritten)",
        )
        parser.add_argument(
            "--policy",
            choices=[choice.value for choice in QuotaPolicy],
            help="Quota policy applied to the trackers (defaults to the QUOTA_POLICY setting)",
        )

    def handle(self, *args, **options):
        """Execute command."""
        month_str = options.get("month")
        override = options.get("override", False)

        if month_str:
            try:
                month = parse_month(month_str)
            except ValueError:
                raise CommandError(MONTH_FORMAT_ERROR)
        else:
            # Default to previous month
            month = month_of(timezone.localdate() - relativedelta(months=1))

        self.stdout.write(f"Target month: {month.key}")

        try:
            period = snapshot_quota_period(month, override=override, policy=options.get("policy"))
        except QuotaPeriodExists as e:
            raise CommandError(str(e))

        self.stdout.write(
            self.style.SUCCESS(
                f"\nSuccessfully captured quota period {period.year_month}:\n"
                f"  - People: {len(period.resource_results)}\n"
                f"  - Clients: {len(period.client_results)}\n"
                f"  - Sub-accounts: {len(period.account_results)}\n"
                f"  - Bonus rows: {len(period.bonus_results)}\n"
                f"  - Partner bonuses: {period.total_partner_bonuses_paid}\n"
                f"  - Quota bonuses: {period.total_individual_bonuses_paid}\n"
                f"  - Overage bonuses: {period.total_overage_bonuses_paid}"
            )
        )
