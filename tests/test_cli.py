"""Tests for CLI rendering helpers."""

from datetime import date, datetime

import pytest

from myride_explorer.adapters.web.views import DayDetailView, HistoryCalendarView
from myride_explorer.cli import render_calendar, render_day, view_to_json
from tests.factories import DENVER, SESSION, FakeRepository, make_event

TODAY = date(2024, 3, 15)


@pytest.mark.asyncio
async def test_render_calendar_marks_busy_days() -> None:
    """Given a loaded month, when rendering, then headers, weeks and counts are printed."""
    repository = FakeRepository([make_event(datetime(2024, 3, 4, 8, 0, tzinfo=DENVER))])
    view = HistoryCalendarView(repository, SESSION, 2024, 3, DENVER, today=TODAY)
    await view.load()

    lines = render_calendar(view).splitlines()

    assert lines[0] == "March 2024"
    assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert len(lines) == 2 + len(view.state.days) // 7
    assert "4(1)" in render_calendar(view)


@pytest.mark.asyncio
async def test_render_day_without_taps() -> None:
    """Given an empty day, when rendering, then the empty message is printed."""
    view = DayDetailView(FakeRepository(), SESSION, 2024, 3, 4, DENVER, today=TODAY)
    await view.load()

    text = render_day(view)

    assert "Monday, March 4, 2024" in text
    assert "No boardings recorded for this day." in text


@pytest.mark.asyncio
async def test_view_to_json_for_day() -> None:
    """Given a loaded day, when converting to JSON, then boardings carry local times."""
    repository = FakeRepository(
        [make_event(datetime(2024, 3, 4, 7, 15, tzinfo=DENVER), "scan-7", route_id="15L")]
    )
    view = DayDetailView(repository, SESSION, 2024, 3, 4, DENVER, today=TODAY)
    await view.load()

    data = view_to_json(view)

    assert data["day"] == "2024-03-04"
    assert data["boardings"][0]["scan_id"] == "scan-7"
    assert data["boardings"][0]["route_id"] == "15L"
    assert data["boardings"][0]["local_time"] == "2024-03-04T07:15:00-07:00"
