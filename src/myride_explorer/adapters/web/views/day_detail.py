"""Day detail view: one day's taps in chronological order."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, tzinfo

from myride_explorer.adapters.web.formatters import TapEventFormatter
from myride_explorer.application.services.calendar_aggregator import sort_chronologically
from myride_explorer.application.services.history_navigation import (
    day_path,
    is_today,
    month_path,
    next_day,
    previous_day,
    today_in,
)
from myride_explorer.domain.errors import JustRideError
from myride_explorer.domain.models import ErrorDetails, Session, TapEvent
from myride_explorer.domain.ports import TapHistoryRepository

logger = logging.getLogger(__name__)


@dataclass
class DayDetailState:
    """State of the day detail view."""

    day: date
    title: str = ""
    events: list[TapEvent] = field(default_factory=list)
    summary: str = ""
    loading: bool = True
    error: ErrorDetails | None = None
    next_day_disabled: bool = False


class DayDetailView:
    """Loads one day of taps and answers prev/next/back navigation."""

    def __init__(
        self,
        repository: TapHistoryRepository,
        session: Session | None,
        year: int,
        month: int,
        day: int,
        tz: tzinfo,
        today: date | None = None,
        formatter: TapEventFormatter | None = None,
    ) -> None:
        self.repository = repository
        self.session = session
        self.tz = tz
        self.today = today or today_in(tz)
        self.formatter = formatter or TapEventFormatter(tz)
        displayed = date(year, month, day)
        self.state = DayDetailState(
            day=displayed,
            title=self.formatter.format_day_title(displayed),
            next_day_disabled=is_today(displayed, self.today),
        )

    async def load(self) -> DayDetailState:
        """Fetch the day's taps, earliest first."""
        state = self.state
        state.loading = True
        state.error = None
        state.events = []
        if self.session and self.session.account_id:
            try:
                events = await self.repository.get_tap_history_for_day(
                    self.session.account_id, state.day.year, state.day.month, state.day.day
                )
                state.events = sort_chronologically(events)
            except JustRideError as e:
                logger.warning(f"Failed to load {state.day.isoformat()}: {e.message}")
                state.error = ErrorDetails(status_code=e.status_code, reason=e.message)
        state.loading = False

        state.summary = self.formatter.format_boarding_summary(len(state.events))
        return state

    def handle_back(self) -> str:
        """Path of the month containing the displayed day."""
        return month_path(self.state.day.year, self.state.day.month)

    def handle_prev_day(self) -> str:
        return day_path(previous_day(self.state.day))

    def handle_next_day(self) -> str | None:
        """Path of the next day, or None while showing today."""
        if self.state.next_day_disabled:
            return None
        return day_path(next_day(self.state.day))
