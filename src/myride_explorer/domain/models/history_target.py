"""History target domain model."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class HistoryTarget:
    """A month, or a single day within it, selected in the tap history."""

    year: int
    month: int
    day: int | None = None

    @property
    def is_day(self) -> bool:
        """True when the target points at a single day."""
        return self.day is not None

    def as_date(self) -> date:
        """Return the targeted day, or the first of the month for month targets."""
        return date(self.year, self.month, self.day or 1)
