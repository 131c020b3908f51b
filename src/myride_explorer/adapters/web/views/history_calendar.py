"""Month calendar view of a rider's tap history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, tzinfo

from myride_explorer.adapters.web.formatters import TapEventFormatter
from myride_explorer.adapters.web.formatters.tap_event_formatter import WEEKDAY_HEADERS
from myride_explorer.application.services.calendar_aggregator import build_month_grid
from myride_explorer.application.services.history_navigation import (
    day_path,
    is_clickable,
    is_current_or_future_month,
    is_future_date,
    month_path,
    next_month,
    previous_month,
    today_in,
)
from myride_explorer.domain.errors import JustRideError
from myride_explorer.domain.models import DayCell, ErrorDetails, Session, TapEvent
from myride_explorer.domain.ports import TapHistoryRepository

logger = logging.getLogger(__name__)


@dataclass
class HistoryCalendarState:
    """State of the month calendar."""

    year: int
    month: int
    title: str = ""
    weekday_headers: tuple[str, ...] = WEEKDAY_HEADERS
    days: list[DayCell] = field(default_factory=list)
    events: list[TapEvent] = field(default_factory=list)
    loading: bool = True
    error: ErrorDetails | None = None
    next_month_disabled: bool = False


class HistoryCalendarView:
    """Loads one month of taps and answers the calendar's navigation actions.

    Navigation handlers return the history path to go to, or None when the
    action is disabled. A failed fetch is kept as ``state.error``; the view
    stays navigable.
    """

    def __init__(
        self,
        repository: TapHistoryRepository,
        session: Session | None,
        year: int,
        month: int,
        tz: tzinfo,
        today: date | None = None,
        formatter: TapEventFormatter | None = None,
    ) -> None:
        self.repository = repository
        self.session = session
        self.tz = tz
        self.today = today or today_in(tz)
        self.formatter = formatter or TapEventFormatter(tz)
        self.state = HistoryCalendarState(
            year=year,
            month=month,
            title=self.formatter.format_month_title(year, month),
            next_month_disabled=is_current_or_future_month(year, month, self.today),
        )

    async def load(self) -> HistoryCalendarState:
        """Fetch the month's taps and rebuild the grid."""
        state = self.state
        state.loading = True
        state.error = None
        state.events = []
        if self.session and self.session.account_id:
            try:
                state.events = await self.repository.get_tap_history_for_month(
                    self.session.account_id, state.year, state.month
                )
            except JustRideError as e:
                logger.warning(f"Failed to load {state.year}-{state.month:02d}: {e.message}")
                state.error = ErrorDetails(status_code=e.status_code, reason=e.message)
        state.loading = False

        state.days = build_month_grid(state.events, state.year, state.month, self.tz)
        return state

    def is_future_cell(self, cell: DayCell) -> bool:
        return is_future_date(self.state.year, self.state.month, cell, self.today)

    def is_clickable(self, cell: DayCell) -> bool:
        return is_clickable(self.state.year, self.state.month, cell, self.today)

    def cell_color(self, cell: DayCell) -> str:
        return self.formatter.boarding_count_color(cell.boarding_count)

    def handle_prev_month(self) -> str:
        return month_path(*previous_month(self.state.year, self.state.month))

    def handle_next_month(self) -> str | None:
        """Path of the next month, or None from the current (or a future) month."""
        if self.state.next_month_disabled:
            return None
        return month_path(*next_month(self.state.year, self.state.month))

    def handle_day_click(self, cell: DayCell) -> str | None:
        """Path of the clicked day, or None for padding and future cells."""
        if not self.is_clickable(cell):
            return None
        return day_path(date(self.state.year, self.state.month, cell.day))
