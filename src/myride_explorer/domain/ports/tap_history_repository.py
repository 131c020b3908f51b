"""Tap history repository port."""

from datetime import datetime
from typing import Protocol

from myride_explorer.domain.models.session import Session
from myride_explorer.domain.models.tap_event import TapEvent


class TapHistoryRepository(Protocol):
    """Port for signing in and retrieving a rider's tap history."""

    async def login(self, email: str, password: str) -> Session:
        """Exchange credentials for a session."""
        ...

    async def get_tap_history(
        self, account_id: str, page_size: int | None = None
    ) -> list[TapEvent]:
        """Get the most recent taps for an account; None uses the configured page size."""
        ...

    async def get_tap_history_for_date_range(
        self,
        account_id: str,
        start: datetime,
        end: datetime,
        page_size: int | None = None,
    ) -> list[TapEvent]:
        """Get taps between two instants (inclusive)."""
        ...

    async def get_tap_history_for_month(
        self, account_id: str, year: int, month: int
    ) -> list[TapEvent]:
        """Get taps for a viewer-local calendar month."""
        ...

    async def get_tap_history_for_day(
        self, account_id: str, year: int, month: int, day: int
    ) -> list[TapEvent]:
        """Get taps for a viewer-local calendar day."""
        ...
