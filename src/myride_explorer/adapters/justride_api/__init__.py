"""JustRide ticketing API adapter."""

from myride_explorer.adapters.justride_api.justride_client import JustRideClient

__all__ = ["JustRideClient"]
