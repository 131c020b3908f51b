"""Picks the calendar or the day view for a history path segment."""

from __future__ import annotations

from datetime import date, tzinfo

from myride_explorer.adapters.web.formatters import TapEventFormatter
from myride_explorer.adapters.web.views.day_detail import DayDetailView
from myride_explorer.adapters.web.views.history_calendar import HistoryCalendarView
from myride_explorer.application.services.history_navigation import (
    parse_history_target,
    today_in,
)
from myride_explorer.domain.models import Session
from myride_explorer.domain.ports import TapHistoryRepository


class TapHistoryPage:
    """Routes ``/history/<segment>`` to a view.

    ``YYYY-MM`` opens the month calendar, ``YYYY-MM-DD`` the day detail; a
    missing or invalid segment opens the current month.
    """

    def __init__(
        self,
        repository: TapHistoryRepository,
        session: Session | None,
        tz: tzinfo,
        theme: str = "light",
    ) -> None:
        self.repository = repository
        self.session = session
        self.tz = tz
        self.formatter = TapEventFormatter(tz, theme)

    def resolve(
        self, segment: str | None, today: date | None = None
    ) -> HistoryCalendarView | DayDetailView:
        today = today or today_in(self.tz)
        target = parse_history_target(segment, today)
        if target.day is not None:
            return DayDetailView(
                self.repository,
                self.session,
                target.year,
                target.month,
                target.day,
                self.tz,
                today=today,
                formatter=self.formatter,
            )
        return HistoryCalendarView(
            self.repository,
            self.session,
            target.year,
            target.month,
            self.tz,
            today=today,
            formatter=self.formatter,
        )
