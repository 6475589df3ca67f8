import logging
from collections import defaultdict
from datetime import date
from typing import Dict, FrozenSet, Optional, Set

from apps.capacity.models import TimeOff
from apps.capacity.utils.calendar import ONE_DAY, expand_clipped, parse_month

logger = logging.getLogger(__name__)


def fetch_time_off(start: date, end: date, person_id: Optional[int] = None):
    """Active time-off rows overlapping the half-open range ``[start, end)``."""
    queryset = TimeOff.objects.active().filter(start_date__lt=end, end_date__gte=start)
    if person_id is not None:
        queryset = queryset.filter(person_id=person_id)
    return queryset.order_by("person_id", "start_date")


def resolve_time_off_dates(
    month, person_id: Optional[int] = None, until: Optional[date] = None
) -> Dict[int, FrozenSet[date]]:
    """Map each person to the calendar days of ``month`` they are off.

    Overlapping rows of the same person are merged, so a day is never counted
    twice. With ``until`` only the days up to and including that date are
    returned (time off already elapsed).

    The resource tracker reads the whole month for everyone and lets
    ``compute_proration`` split off the elapsed days itself, so it passes neither
    ``person_id`` nor ``until``. They narrow the lookup to one person or to the
    days already taken.
    """
    window = parse_month(month)
    last_day = window.last_day if until is None else min(window.last_day, until)
    if last_day < window.start:
        return {}

    dates_by_person: Dict[int, Set[date]] = defaultdict(set)
    for time_off in fetch_time_off(window.start, last_day + ONE_DAY, person_id=person_id):
        dates_by_person[time_off.person_id] |= expand_clipped(
            time_off.start_date, time_off.end_date, window.start, last_day
        )

    return {person: frozenset(days) for person, days in dates_by_person.items() if days}
