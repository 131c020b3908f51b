"""Day cell domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DayCell:
    """One cell of a rendered month grid."""

    day: int
    is_current_month: bool
    boarding_count: int = 0  # Always 0 for padding cells from adjacent months
