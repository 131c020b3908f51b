"""Domain models for MyRide Explorer."""

from myride_explorer.domain.models.day_cell import DayCell
from myride_explorer.domain.models.error_details import ErrorDetails
from myride_explorer.domain.models.history_target import HistoryTarget
from myride_explorer.domain.models.session import Session
from myride_explorer.domain.models.tap_event import DisplayAnnotation, TapEvent

__all__ = [
    "DayCell",
    "DisplayAnnotation",
    "ErrorDetails",
    "HistoryTarget",
    "Session",
    "TapEvent",
]
