"""Command-line interface for MyRide Explorer."""

import argparse
import asyncio
import getpass
import json
import os
import sys
from typing import Any

import aiohttp

from myride_explorer.adapters.config import AppConfig
from myride_explorer.adapters.justride_api import JustRideClient
from myride_explorer.adapters.web.formatters import TapEventFormatter
from myride_explorer.adapters.web.views import (
    DayDetailView,
    HistoryCalendarView,
    HomeView,
    TapHistoryPage,
)
from myride_explorer.application.services import AuthenticationService
from myride_explorer.domain.errors import JustRideError
from myride_explorer.domain.models import TapEvent
from myride_explorer.main import configure_logging, main as serve


def render_calendar(view: HistoryCalendarView) -> str:
    """Render a loaded month calendar as text, one week per line."""
    state = view.state
    lines = [state.title, " ".join(f"{header:>6}" for header in state.weekday_headers)]
    for week_start in range(0, len(state.days), 7):
        cells = []
        for cell in state.days[week_start : week_start + 7]:
            if not cell.is_current_month:
                cells.append(f"{'':>6}")
            elif cell.boarding_count:
                cells.append(f"{cell.day:>3}({cell.boarding_count})")
            else:
                cells.append(f"{cell.day:>6}")
        lines.append(" ".join(cells))
    return "\n".join(lines)


def render_day(view: DayDetailView) -> str:
    """Render a loaded day view as text."""
    state = view.state
    formatter = view.formatter
    lines = [state.title, state.summary]
    if not state.events:
        lines.append("No boardings recorded for this day.")
    for event in state.events:
        lines.append("")
        lines.append(
            f"{formatter.format_tap_time(event)}  {formatter.format_route(event)}  [{event.outcome}]"
        )
        lines.append(f"  {formatter.format_vehicle(event)}")
        for annotation in formatter.format_annotations(event):
            lines.append(f"  {annotation}")
        lines.append(f"  {formatter.format_product(event)}")
    return "\n".join(lines)


def event_to_json(event: TapEvent, formatter: TapEventFormatter) -> dict[str, Any]:
    return {
        "scan_id": event.scan_id,
        "route_id": event.route_id,
        "vehicle_id": event.vehicle_id,
        "outcome": event.outcome,
        "server_timestamp": event.server_timestamp,
        "local_time": event.local_datetime(formatter.tz).isoformat(),
        "display_context": formatter.format_annotations(event),
        "product_name": event.product_name,
        "media_format": event.media_format,
    }


def view_to_json(view: HistoryCalendarView | DayDetailView) -> dict[str, Any]:
    if isinstance(view, DayDetailView):
        state = view.state
        return {
            "day": state.day.isoformat(),
            "boardings": [event_to_json(e, view.formatter) for e in state.events],
        }
    return {
        "year": view.state.year,
        "month": view.state.month,
        "days": [
            {"day": cell.day, "boarding_count": cell.boarding_count}
            for cell in view.state.days
            if cell.is_current_month
        ],
    }


async def show_history(
    config: AppConfig, email: str, password: str, date_segment: str | None, as_json: bool
) -> int:
    """Sign in through the relay and print a month or a day of tap history."""
    # The relay usually listens on localhost; allow cookies for IP hosts
    async with aiohttp.ClientSession(cookie_jar=aiohttp.CookieJar(unsafe=True)) as session:
        client = JustRideClient(
            session,
            config.api_base_url,
            config.agency_id,
            config.tz,
            history_page_size=config.history_page_size,
            range_page_size=config.range_page_size,
        )
        auth = AuthenticationService(client)
        signed_in = await auth.sign_in(email, password)

        page = TapHistoryPage(client, auth.current, config.tz, config.theme)
        view = page.resolve(date_segment)
        state = await view.load()

        if as_json:
            print(json.dumps(view_to_json(view), indent=2, ensure_ascii=False))
        else:
            home = HomeView(signed_in)
            print(home.greeting)
            print(home.account_line)
            print()
            if isinstance(view, DayDetailView):
                print(render_day(view))
            else:
                print(render_calendar(view))

        auth.sign_out()

        if state.error is not None:
            print(f"Error: {state.error.reason}", file=sys.stderr)
            return 1
    return 0


async def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="MyRide Explorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the edge relay
  myride-explorer serve

  # Show this month's calendar
  myride-explorer history --email rider@example.com

  # Show a month or a single day
  myride-explorer history --email rider@example.com --date 2024-03
  myride-explorer history --email rider@example.com --date 2024-03-04 --json
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("serve", help="Run the edge relay server")

    history_parser = subparsers.add_parser("history", help="Show tap history")
    history_parser.add_argument("--email", required=True, help="Account email")
    history_parser.add_argument(
        "--password", help="Account password (default: $MYRIDE_PASSWORD or prompt)"
    )
    history_parser.add_argument("--date", help="Month (YYYY-MM) or day (YYYY-MM-DD)")
    history_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()

    if args.command == "serve":
        await serve(config)
        return

    configure_logging(config.log_level)
    password = args.password or os.getenv("MYRIDE_PASSWORD") or getpass.getpass("Password: ")
    try:
        exit_code = await show_history(config, args.email, password, args.date, args.json)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except JustRideError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
