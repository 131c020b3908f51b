"""Signed-in session domain model."""

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Session:
    """Identity of the signed-in rider.

    Sessions are never mutated; signing in or out replaces the value held by
    the authentication flow.
    """

    account_id: str
    name: str
    email: str
    sign_out: Callable[[], None] | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_login_response(cls, data: dict) -> "Session":
        """Build a session from the upstream login payload."""
        return cls(
            account_id=str(data.get("account", "")),
            name=str(data.get("username", "")),
            email=str(data.get("emailAddress", "")),
        )
