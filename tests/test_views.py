"""Tests for the calendar, day detail and page views."""

from datetime import date, datetime

import pytest

from myride_explorer.adapters.web.views import (
    DayDetailView,
    HistoryCalendarView,
    HomeView,
    TapHistoryPage,
)
from myride_explorer.domain.errors import FetchFailure, TokenFailure
from myride_explorer.domain.models import DayCell
from tests.factories import DENVER, SESSION, FakeRepository, make_event

TODAY = date(2024, 3, 15)


def current_cell(view: HistoryCalendarView, day: int) -> DayCell:
    return next(c for c in view.state.days if c.is_current_month and c.day == day)


@pytest.mark.asyncio
async def test_calendar_counts_boardings_per_local_day() -> None:
    """Given taps in March, when loading the calendar, then cells carry per-day counts."""
    repository = FakeRepository(
        [
            make_event(datetime(2024, 3, 4, 7, 15, tzinfo=DENVER), "a"),
            make_event(datetime(2024, 3, 4, 17, 40, tzinfo=DENVER), "b"),
            make_event(datetime(2024, 3, 9, 12, 0, tzinfo=DENVER), "c"),
        ]
    )
    view = HistoryCalendarView(repository, SESSION, 2024, 3, DENVER, today=TODAY)

    state = await view.load()

    assert repository.calls == [("month", "acc-42", 2024, 3)]
    assert state.title == "March 2024"
    assert state.loading is False
    assert state.error is None
    assert len(state.days) % 7 == 0
    assert current_cell(view, 4).boarding_count == 2
    assert current_cell(view, 9).boarding_count == 1
    assert current_cell(view, 5).boarding_count == 0


@pytest.mark.asyncio
async def test_calendar_error_keeps_grid_and_navigation() -> None:
    """Given the token exchange fails, when loading, then the error is shown on an empty grid."""
    repository = FakeRepository(error=TokenFailure("Failed to get JWT token", status_code=403))
    view = HistoryCalendarView(repository, SESSION, 2024, 2, DENVER, today=TODAY)

    state = await view.load()

    assert state.error is not None
    assert state.error.status_code == 403
    assert state.error.reason == "Failed to get JWT token"
    assert sum(c.is_current_month for c in state.days) == 29
    assert all(c.boarding_count == 0 for c in state.days)
    assert view.handle_prev_month() == "/history/2024-01"
    assert view.handle_next_month() == "/history/2024-03"


@pytest.mark.asyncio
async def test_calendar_without_session_does_not_fetch() -> None:
    """Given no signed-in session, when loading, then nothing is fetched."""
    repository = FakeRepository()
    view = HistoryCalendarView(repository, None, 2024, 3, DENVER, today=TODAY)

    state = await view.load()

    assert repository.calls == []
    assert sum(c.is_current_month for c in state.days) == 31


def test_calendar_next_month_disabled_in_current_month() -> None:
    """Given the current month, when asking for the next month, then the action is disabled."""
    view = HistoryCalendarView(FakeRepository(), SESSION, 2024, 3, DENVER, today=TODAY)

    assert view.state.next_month_disabled is True
    assert view.handle_next_month() is None
    assert view.handle_prev_month() == "/history/2024-02"


def test_calendar_wraps_year_boundaries() -> None:
    """Given January, when going back, then December of the previous year is opened."""
    view = HistoryCalendarView(FakeRepository(), SESSION, 2024, 1, DENVER, today=TODAY)

    assert view.handle_prev_month() == "/history/2023-12"
    assert view.handle_next_month() == "/history/2024-02"


@pytest.mark.asyncio
async def test_calendar_day_click_rules() -> None:
    """Given the current month, when clicking cells, then only past days and today open."""
    view = HistoryCalendarView(FakeRepository(), SESSION, 2024, 3, DENVER, today=TODAY)
    await view.load()
    padding = next(c for c in view.state.days if not c.is_current_month)

    assert view.handle_day_click(current_cell(view, 15)) == "/history/2024-03-15"
    assert view.handle_day_click(current_cell(view, 1)) == "/history/2024-03-01"
    assert view.handle_day_click(current_cell(view, 16)) is None
    assert view.handle_day_click(padding) is None
    assert view.is_future_cell(current_cell(view, 16)) is True
    assert view.is_future_cell(padding) is False


def test_calendar_cell_color_follows_boarding_count() -> None:
    """Given busy and idle days, when colouring cells, then the palette is indexed by count."""
    view = HistoryCalendarView(FakeRepository(), SESSION, 2024, 3, DENVER, today=TODAY)

    assert view.cell_color(DayCell(day=1, is_current_month=True)) == "#ffffff"
    assert view.cell_color(DayCell(day=1, is_current_month=True, boarding_count=20)) == "#f87171"


@pytest.mark.asyncio
async def test_day_detail_sorts_taps_earliest_first() -> None:
    """Given unordered taps, when loading a day, then they are shown chronologically."""
    repository = FakeRepository(
        [
            make_event(datetime(2024, 3, 4, 17, 40, tzinfo=DENVER), "evening"),
            make_event(datetime(2024, 3, 4, 7, 15, tzinfo=DENVER), "morning"),
        ]
    )
    view = DayDetailView(repository, SESSION, 2024, 3, 4, DENVER, today=TODAY)

    state = await view.load()

    assert repository.calls == [("day", "acc-42", 2024, 3, 4)]
    assert [e.scan_id for e in state.events] == ["morning", "evening"]
    assert state.title == "Monday, March 4, 2024"
    assert state.summary == "2 boardings on this day"


@pytest.mark.asyncio
async def test_day_detail_error_is_reported() -> None:
    """Given the history fetch fails, when loading a day, then the error is kept and no taps shown."""
    repository = FakeRepository(error=FetchFailure("Failed to fetch tap history", 500))
    view = DayDetailView(repository, SESSION, 2024, 3, 4, DENVER, today=TODAY)

    state = await view.load()

    assert state.events == []
    assert state.error is not None
    assert state.error.reason == "Failed to fetch tap history"
    assert state.summary == "0 boardings on this day"


def test_day_detail_navigation() -> None:
    """Given a past day, when navigating, then neighbours and the month are reachable."""
    view = DayDetailView(FakeRepository(), SESSION, 2024, 3, 1, DENVER, today=TODAY)

    assert view.handle_back() == "/history/2024-03"
    assert view.handle_prev_day() == "/history/2024-02-29"
    assert view.handle_next_day() == "/history/2024-03-02"


def test_day_detail_next_day_disabled_on_today() -> None:
    """Given today, when asking for the next day, then the action is disabled."""
    view = DayDetailView(FakeRepository(), SESSION, 2024, 3, 15, DENVER, today=TODAY)

    assert view.state.next_day_disabled is True
    assert view.handle_next_day() is None


def test_page_resolves_month_day_and_invalid_segments() -> None:
    """Given history path segments, when resolving, then the matching view is built."""
    page = TapHistoryPage(FakeRepository(), SESSION, DENVER)

    month_view = page.resolve("2023-11", today=TODAY)
    day_view = page.resolve("2024-02-29", today=TODAY)
    fallback = page.resolve("2023-02-29", today=TODAY)
    missing = page.resolve(None, today=TODAY)
    year_zero = page.resolve("0000-05", today=TODAY)

    assert isinstance(month_view, HistoryCalendarView)
    assert (month_view.state.year, month_view.state.month) == (2023, 11)
    assert isinstance(day_view, DayDetailView)
    assert day_view.state.day == date(2024, 2, 29)
    assert isinstance(fallback, HistoryCalendarView)
    assert (fallback.state.year, fallback.state.month) == (2024, 3)
    assert isinstance(missing, HistoryCalendarView)
    assert (missing.state.year, missing.state.month) == (2024, 3)
    assert isinstance(year_zero, HistoryCalendarView)
    assert (year_zero.state.year, year_zero.state.month) == (2024, 3)


def test_home_view_greets_rider() -> None:
    """Given a session, when rendering home, then the name and account are shown."""
    home = HomeView(SESSION)

    assert home.greeting == "Welcome, Rider!"
    assert home.account_line == "Account: acc-42"
