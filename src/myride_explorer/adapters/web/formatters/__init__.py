"""Display formatters."""

from myride_explorer.adapters.web.formatters.tap_event_formatter import TapEventFormatter

__all__ = ["TapEventFormatter"]
