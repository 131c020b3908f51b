"""Tests for history navigation rules."""

from datetime import date, datetime
from unittest.mock import patch
from zoneinfo import ZoneInfo

from myride_explorer.application.services import history_navigation
from myride_explorer.application.services.history_navigation import (
    day_path,
    is_clickable,
    is_current_or_future_month,
    is_future_date,
    is_today,
    month_path,
    next_day,
    next_month,
    parse_history_target,
    previous_day,
    previous_month,
)
from myride_explorer.domain.models import DayCell, HistoryTarget

TODAY = date(2026, 10, 18)


def test_previous_month_rolls_january_back_to_december() -> None:
    """Given January, when going back, then December of the previous year is returned."""
    assert previous_month(2024, 1) == (2023, 12)
    assert previous_month(2024, 7) == (2024, 6)


def test_next_month_rolls_december_over_to_january() -> None:
    """Given December, when going forward, then January of the next year is returned."""
    assert next_month(2024, 12) == (2025, 1)
    assert next_month(2024, 7) == (2024, 8)


def test_current_and_future_months_are_detected() -> None:
    """Given months around today, when checking, then current and later months are flagged."""
    assert is_current_or_future_month(2026, 10, TODAY) is True
    assert is_current_or_future_month(2026, 11, TODAY) is True
    assert is_current_or_future_month(2027, 1, TODAY) is True
    assert is_current_or_future_month(2026, 9, TODAY) is False
    assert is_current_or_future_month(2025, 12, TODAY) is False


def test_future_date_only_for_current_month_days_after_today() -> None:
    """Given cells in October 2026, when checking, then only days after the 18th are future."""
    assert is_future_date(2026, 10, DayCell(day=19, is_current_month=True), TODAY) is True
    assert is_future_date(2026, 10, DayCell(day=18, is_current_month=True), TODAY) is False
    assert is_future_date(2026, 10, DayCell(day=30, is_current_month=False), TODAY) is False


def test_clickable_cells_are_month_days_up_to_today() -> None:
    """Given padding, past, today and future cells, when checking, then only past and today click."""
    assert is_clickable(2026, 10, DayCell(day=1, is_current_month=True), TODAY) is True
    assert is_clickable(2026, 10, DayCell(day=18, is_current_month=True), TODAY) is True
    assert is_clickable(2026, 10, DayCell(day=19, is_current_month=True), TODAY) is False
    assert is_clickable(2026, 10, DayCell(day=28, is_current_month=False), TODAY) is False


def test_day_navigation_crosses_month_and_year_boundaries() -> None:
    """Given boundary days, when stepping, then month and year roll over."""
    assert previous_day(date(2024, 3, 1)) == date(2024, 2, 29)
    assert next_day(date(2024, 12, 31)) == date(2025, 1, 1)
    assert previous_day(date(2025, 1, 1)) == date(2024, 12, 31)


def test_is_today() -> None:
    """Given today and another day, when checking, then only today matches."""
    assert is_today(TODAY, TODAY) is True
    assert is_today(date(2026, 10, 17), TODAY) is False


def test_paths_are_zero_padded() -> None:
    """Given single-digit months and days, when building paths, then they are zero padded."""
    assert month_path(2024, 3) == "/history/2024-03"
    assert day_path(date(2024, 3, 4)) == "/history/2024-03-04"


def test_parse_month_segment() -> None:
    """Given YYYY-MM, when parsing, then a month target is returned."""
    assert parse_history_target("2024-03", TODAY) == HistoryTarget(year=2024, month=3)


def test_parse_day_segment() -> None:
    """Given YYYY-MM-DD, when parsing, then a day target is returned."""
    target = parse_history_target("2024-03-04", TODAY)

    assert target == HistoryTarget(year=2024, month=3, day=4)
    assert target.is_day
    assert target.as_date() == date(2024, 3, 4)


def test_parse_missing_or_invalid_segment_falls_back_to_current_month() -> None:
    """Given no segment or a malformed one, when parsing, then the current month is returned."""
    current = HistoryTarget(year=2026, month=10)

    assert parse_history_target(None, TODAY) == current
    assert parse_history_target("", TODAY) == current
    assert parse_history_target("march", TODAY) == current
    assert parse_history_target("2024-13", TODAY) == current
    assert parse_history_target("2023-02-29", TODAY) == current
    assert parse_history_target("2024-03-04-05", TODAY) == current


def test_parse_year_zero_falls_back_to_current_month() -> None:
    """Given year 0000, when parsing, then the current month is returned."""
    current = HistoryTarget(year=2026, month=10)

    assert parse_history_target("0000-05", TODAY) == current
    assert parse_history_target("0000-05-01", TODAY) == current


def test_today_in_uses_viewer_timezone() -> None:
    """Given 03:00 UTC, when computing today in Denver, then it is still the previous day."""
    fixed = datetime(2026, 10, 19, 3, 0, tzinfo=ZoneInfo("UTC"))

    with patch.object(history_navigation, "datetime") as mock_datetime:
        mock_datetime.now.return_value = fixed
        result = history_navigation.today_in(ZoneInfo("America/Denver"))

    assert result == date(2026, 10, 18)
