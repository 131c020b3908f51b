"""MyRide Explorer - tap history dashboard over the JustRide ticketing API."""

__version__ = "0.1.0"
