"""Application services for tap history."""

from myride_explorer.application.services.authentication_service import (
    AuthenticationService,
)
from myride_explorer.application.services.calendar_aggregator import (
    build_month_grid,
    days_in_month,
    first_weekday,
    is_leap_year,
    sort_chronologically,
)

__all__ = [
    "AuthenticationService",
    "build_month_grid",
    "days_in_month",
    "first_weekday",
    "is_leap_year",
    "sort_chronologically",
]
