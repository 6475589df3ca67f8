import logging
from datetime import date
from typing import FrozenSet, Set

from django.db.models.functions import Coalesce

from apps.capacity.models import Holiday
from apps.capacity.utils.calendar import MonthWindow, expand_clipped, parse_month

logger = logging.getLogger(__name__)


def fetch_holidays(start: date, end: date):
    """Active holidays overlapping the half-open range ``[start, end)``.

    A holiday without ``end_date`` lasts one day.
    """
    return (
        Holiday.objects.active()
        .annotate(last_date=Coalesce("end_date", "start_date"))
        .filter(start_date__lt=end, last_date__gte=start)
        .order_by("start_date")
    )


def resolve_holiday_dates(month) -> FrozenSet[date]:
    """Return every calendar day of ``month`` covered by an active holiday.

    Multi-day holidays crossing a month boundary contribute only the days inside
    the month.
    """
    window: MonthWindow = parse_month(month)

    dates: Set[date] = set()
    for holiday in fetch_holidays(window.start, window.end):
        dates |= expand_clipped(holiday.start_date, holiday.end_date, window.start, window.last_day)

    logger.debug("Resolved %s holiday dates for %s", len(dates), window.key)
    return frozenset(dates)
