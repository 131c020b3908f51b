"""Formatter for tap events and calendar labels."""

from datetime import date, tzinfo

from myride_explorer.domain.models.tap_event import TapEvent

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Indexed by date.weekday() (Monday=0)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Column headers of the Sunday-first month grid
WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# Heat colours by boarding count; 8 and above share the last colour
BOARDING_COUNT_COLORS = {
    "light": (
        "#ffffff",
        "#dbeafe",
        "#93c5fd",
        "#6ee7b7",
        "#34d399",
        "#fde047",
        "#fbbf24",
        "#fb923c",
        "#f87171",
    ),
    "dark": (
        "#1a1a1a",
        "#1e3a8a",
        "#1e40af",
        "#047857",
        "#059669",
        "#ca8a04",
        "#d97706",
        "#c2410c",
        "#b91c1c",
    ),
}


class TapEventFormatter:
    """Formats taps, dates and boarding counts for display in the viewer's timezone."""

    def __init__(self, tz: tzinfo, theme: str = "light") -> None:
        """Initialize the formatter.

        Args:
            tz: Viewer timezone.
            theme: 'light', 'dark' or 'auto'; 'auto' uses the light palette.
        """
        self.tz = tz
        self.theme = theme

    def format_month_title(self, year: int, month: int) -> str:
        """Format a month heading, e.g. 'March 2024'."""
        return f"{MONTH_NAMES[month - 1]} {year}"

    def format_day_title(self, day: date) -> str:
        """Format a day heading, e.g. 'Monday, March 4, 2024'."""
        return f"{WEEKDAY_NAMES[day.weekday()]}, {MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"

    def format_tap_time(self, event: TapEvent) -> str:
        """Format the local time of a tap (HH:MM:SS)."""
        return event.local_datetime(self.tz).strftime("%H:%M:%S")

    def format_route(self, event: TapEvent) -> str:
        return f"Route {event.route_id}"

    def format_vehicle(self, event: TapEvent) -> str:
        return f"Vehicle {event.vehicle_id} • {event.token_name}"

    def format_product(self, event: TapEvent) -> str:
        return f"Product: {event.product_name} • Media: {event.media_format}"

    def format_annotations(self, event: TapEvent) -> list[str]:
        """Format display annotations as 'label: data' chips, in upstream order."""
        return [f"{item.label}: {item.data}" for item in event.display_context]

    def format_boarding_summary(self, count: int) -> str:
        """Format the boarding total of a day view."""
        return f"{count} boarding{'' if count == 1 else 's'} on this day"

    def boarding_count_color(self, count: int) -> str:
        """Return the heat colour for a day's boarding count."""
        palette = BOARDING_COUNT_COLORS["dark" if self.theme == "dark" else "light"]
        return palette[min(max(count, 0), len(palette) - 1)]
