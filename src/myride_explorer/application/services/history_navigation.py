"""Navigation rules for the month calendar and the day detail view.

All comparisons use the viewer's local calendar; callers pass ``today`` as
computed by :func:`today_in` for the configured timezone.
"""

import logging
import re
from datetime import UTC, date, datetime, timedelta, tzinfo

from myride_explorer.domain.models.day_cell import DayCell
from myride_explorer.domain.models.history_target import HistoryTarget

logger = logging.getLogger(__name__)

HISTORY_PATH = "/history"

_MONTH_SEGMENT = re.compile(r"^(\d{4})-(\d{1,2})$")
_DAY_SEGMENT = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


def today_in(tz: tzinfo) -> date:
    """Return the current calendar date in the viewer's timezone."""
    return datetime.now(UTC).astimezone(tz).date()


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) of the month before, rolling January back to December."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) of the month after, rolling December over to January."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def is_current_or_future_month(year: int, month: int, today: date) -> bool:
    """True when (year, month) is today's month or later."""
    return (year, month) >= (today.year, today.month)


def is_future_date(year: int, month: int, cell: DayCell, today: date) -> bool:
    """True for current-month cells dated strictly after today.

    Padding cells are never considered future.
    """
    if not cell.is_current_month:
        return False
    return date(year, month, cell.day) > today


def is_clickable(year: int, month: int, cell: DayCell, today: date) -> bool:
    """Only days of the displayed month up to and including today open a day view."""
    return cell.is_current_month and not is_future_date(year, month, cell, today)


def previous_day(day: date) -> date:
    return day - timedelta(days=1)


def next_day(day: date) -> date:
    return day + timedelta(days=1)


def is_today(day: date, today: date) -> bool:
    return day == today


def month_path(year: int, month: int) -> str:
    """Return the history path for a month, e.g. ``/history/2024-03``."""
    return f"{HISTORY_PATH}/{year}-{month:02d}"


def day_path(day: date) -> str:
    """Return the history path for a day, e.g. ``/history/2024-03-04``."""
    return f"{HISTORY_PATH}/{day.year}-{day.month:02d}-{day.day:02d}"


def parse_history_target(segment: str | None, today: date) -> HistoryTarget:
    """Parse a ``YYYY-MM`` or ``YYYY-MM-DD`` path segment.

    A missing or malformed segment (including impossible dates) falls back
    to the current month.
    """
    current = HistoryTarget(year=today.year, month=today.month)
    if not segment:
        return current

    if match := _DAY_SEGMENT.match(segment):
        year, month, day = (int(part) for part in match.groups())
        try:
            date(year, month, day)
        except ValueError:
            logger.warning(f"Ignoring invalid history date '{segment}'")
            return current
        return HistoryTarget(year=year, month=month, day=day)

    if match := _MONTH_SEGMENT.match(segment):
        year, month = (int(part) for part in match.groups())
        try:
            date(year, month, 1)
        except ValueError:
            logger.warning(f"Ignoring invalid history date '{segment}'")
            return current
        return HistoryTarget(year=year, month=month)

    logger.warning(f"Ignoring invalid history date '{segment}'")
    return current
