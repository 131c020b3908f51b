"""Bucket tap events into a Sunday-first month grid."""

import calendar
import logging
from collections import Counter
from collections.abc import Iterable
from datetime import date, tzinfo

from myride_explorer.domain.models.day_cell import DayCell
from myride_explorer.domain.models.tap_event import TapEvent

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def first_weekday(year: int, month: int) -> int:
    """Return the weekday of the 1st of the month, 0=Sunday .. 6=Saturday."""
    # calendar.weekday counts from Monday=0
    return (calendar.weekday(year, month, 1) + 1) % DAYS_PER_WEEK


def _previous_month_length(year: int, month: int) -> int:
    if month == 1:
        return days_in_month(year - 1, 12)
    return days_in_month(year, month - 1)


def count_by_local_date(events: Iterable[TapEvent], tz: tzinfo) -> Counter[date]:
    """Count events per viewer-local calendar day."""
    return Counter(event.local_date(tz) for event in events)


def build_month_grid(
    events: Iterable[TapEvent], year: int, month: int, tz: tzinfo
) -> list[DayCell]:
    """Build the day cells for a month view.

    The grid starts with the trailing days of the previous month so the 1st
    lands in its weekday column, lists every day of the month with the
    number of taps on it, and is padded with the leading days of the next
    month to complete the final week.

    Args:
        events: Tap events to count; events outside the month are ignored.
        year: Year to display.
        month: Month to display (1-12).
        tz: Viewer timezone used to assign taps to calendar days.

    Returns:
        Day cells, always a whole number of weeks long.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")

    counts = count_by_local_date(events, tz)
    leading = first_weekday(year, month)
    month_length = days_in_month(year, month)
    previous_length = _previous_month_length(year, month)

    days = [
        DayCell(day=previous_length - offset, is_current_month=False)
        for offset in range(leading - 1, -1, -1)
    ]
    days.extend(
        DayCell(
            day=day,
            is_current_month=True,
            boarding_count=counts.get(date(year, month, day), 0),
        )
        for day in range(1, month_length + 1)
    )

    trailing = -len(days) % DAYS_PER_WEEK
    days.extend(DayCell(day=day, is_current_month=False) for day in range(1, trailing + 1))

    logger.debug(
        f"Built grid for {year}-{month:02d}: {len(days)} cells, "
        f"{sum(cell.boarding_count for cell in days)} boardings"
    )
    return days


def sort_chronologically(events: Iterable[TapEvent]) -> list[TapEvent]:
    """Return events ordered by timestamp, earliest first; ties keep input order."""
    return sorted(events, key=lambda event: event.server_timestamp)
