"""View models for the tap history pages."""

from myride_explorer.adapters.web.views.day_detail import DayDetailState, DayDetailView
from myride_explorer.adapters.web.views.history_calendar import (
    HistoryCalendarState,
    HistoryCalendarView,
)
from myride_explorer.adapters.web.views.home import HomeView
from myride_explorer.adapters.web.views.tap_history_page import TapHistoryPage

__all__ = [
    "DayDetailState",
    "DayDetailView",
    "HistoryCalendarState",
    "HistoryCalendarView",
    "HomeView",
    "TapHistoryPage",
]
