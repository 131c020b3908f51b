"""Tap event domain model."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, tzinfo
from typing import Any


def from_epoch_millis(millis: int, tz: tzinfo) -> datetime:
    """Convert an epoch millisecond value to an aware datetime in ``tz``."""
    return datetime.fromtimestamp(millis / 1000, tz=UTC).astimezone(tz)


def to_epoch_millis(moment: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds."""
    return round(moment.timestamp() * 1000)


@dataclass(frozen=True)
class DisplayAnnotation:
    """A (label, value) pair the upstream attaches to a tap for display."""

    label: str
    data: str


@dataclass(frozen=True)
class TapEvent:
    """A single fare validation ("tap") recorded by the ticketing system."""

    scan_id: str
    route_id: str
    server_timestamp: int  # Epoch milliseconds, no zone attached
    vehicle_id: str
    outcome: str
    display_context: tuple[DisplayAnnotation, ...] = ()
    product_name: str = ""
    media_format: str = ""
    token_name: str = ""
    trip_start: int | None = None
    product_end: int | None = None
    record_type: str = ""
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "TapEvent":
        """Build a tap event from one history hit (``{"type": ..., "doc": {...}}``).

        Raises:
            ValueError: If the record has no numeric ``serverTimestamp``.
        """
        doc = record.get("doc") or {}
        timestamp = doc.get("serverTimestamp")
        if isinstance(timestamp, bool) or not isinstance(timestamp, int | float):
            raise ValueError(f"Tap record {doc.get('scanId')!r} has no serverTimestamp")

        annotations = tuple(
            DisplayAnnotation(label=str(item.get("label", "")), data=str(item.get("data", "")))
            for item in doc.get("displayContext") or []
            if isinstance(item, dict)
        )

        return cls(
            scan_id=str(doc.get("scanId", "")),
            route_id=str(doc.get("routeId", "")),
            server_timestamp=int(timestamp),
            vehicle_id=str(doc.get("vehicleId", "")),
            outcome=str(doc.get("outcome", "")),
            display_context=annotations,
            product_name=str(doc.get("productName", "")),
            media_format=str(doc.get("mediaFormat", "")),
            token_name=str(doc.get("tokenName", "")),
            trip_start=doc.get("tripStart"),
            product_end=doc.get("productEnd"),
            record_type=str(record.get("type", "")),
            raw=record,
        )

    def local_datetime(self, tz: tzinfo) -> datetime:
        """Return when the tap happened, in the viewer's timezone."""
        return from_epoch_millis(self.server_timestamp, tz)

    def local_date(self, tz: tzinfo) -> date:
        """Return the viewer-local calendar day of the tap."""
        return self.local_datetime(tz).date()
