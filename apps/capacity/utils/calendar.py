"""Calendar arithmetic used by quota proration.

Every value here is a calendar date (``datetime.date``). Timestamps are reduced to
their date before any comparison so that a holiday stored as ``2024-02-19`` always
matches the working day ``2024-02-19`` whatever the server time zone.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, Optional, Set

ONE_DAY = timedelta(days=1)

# date.weekday(): Monday=0 .. Sunday=6
SATURDAY = 5

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def is_working_day(day: date) -> bool:
    return as_date(day).weekday() < SATURDAY


def count_working_days(start: date, end: date, excluded: Iterable[date] = ()) -> int:
    """Count Monday-Friday days in the half-open range ``[start, end)``.

    Args:
        start: First day of the range (inclusive)
        end: Day after the last day of the range (exclusive)
        excluded: Days that never count, typically holidays and time off

    Returns:
        int: Number of working days, 0 when ``end <= start``
    """
    start = as_date(start)
    end = as_date(end)
    if end <= start:
        return 0

    excluded_days = {as_date(day) for day in excluded}

    working_days = 0
    current_date = start
    while current_date < end:
        if current_date.weekday() < SATURDAY and current_date not in excluded_days:
            working_days += 1
        current_date += ONE_DAY

    return working_days


@dataclass(frozen=True)
class MonthWindow:
    """A calendar month as the half-open range ``[start, end)``."""

    year: int
    month: int

    def __post_init__(self):
        # date() raises ValueError for out of range years and months
        date(self.year, self.month, 1)

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    @property
    def end(self) -> date:
        return self.last_day + ONE_DAY

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def __contains__(self, day) -> bool:
        return self.start <= as_date(day) <= self.last_day

    def __str__(self):
        return self.key


def parse_month(value) -> MonthWindow:
    """Parse a ``YYYY-MM`` string into a MonthWindow.

    Raises:
        ValueError: When the value is not a valid ``YYYY-MM`` month
    """
    if isinstance(value, MonthWindow):
        return value

    match = MONTH_PATTERN.match(str(value or "").strip())
    if not match:
        raise ValueError(f"Invalid month: {value!r}")

    year, month = map(int, match.groups())
    try:
        return MonthWindow(year, month)
    except ValueError as e:
        raise ValueError(f"Invalid month: {value!r}") from e


def month_of(day: date) -> MonthWindow:
    day = as_date(day)
    return MonthWindow(day.year, day.month)


def iter_days(start: date, end_inclusive: date) -> Iterator[date]:
    current_date = as_date(start)
    last = as_date(end_inclusive)
    while current_date <= last:
        yield current_date
        current_date += ONE_DAY


def expand_clipped(start: date, end: Optional[date], window_start: date, window_last: date) -> Set[date]:
    """Enumerate the days of ``[start, end]`` that fall inside ``[window_start, window_last]``.

    A missing ``end`` means a single-day range. A reversed range yields no days.
    """
    start = as_date(start)
    end = as_date(end) if end is not None else start
    if end < start:
        return set()

    clipped_start = max(start, as_date(window_start))
    clipped_end = min(end, as_date(window_last))
    return set(iter_days(clipped_start, clipped_end))


def first_monday_on_or_after(day: date) -> date:
    day = as_date(day)
    return day + timedelta(days=(7 - day.weekday()) % 7)


def week_start(day: date) -> date:
    """Monday of the week containing ``day``."""
    day = as_date(day)
    return day - timedelta(days=day.weekday())
