"""Errors raised while talking to the JustRide ticketing API."""


class JustRideError(Exception):
    """Base class for all ticketing API failures."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthFailure(JustRideError):
    """Login was rejected by the upstream service."""


class TokenFailure(JustRideError):
    """The short-lived data token could not be obtained."""


class FetchFailure(JustRideError):
    """The tap history request failed."""


class TransportFailure(JustRideError):
    """The request never produced an HTTP response (network-level failure)."""
