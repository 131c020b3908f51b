"""Sign-in and sign-out flow."""

import logging
from dataclasses import replace

from myride_explorer.domain.models.session import Session
from myride_explorer.domain.ports.tap_history_repository import TapHistoryRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """Holds the current session and replaces it wholesale on sign-in/sign-out.

    Views receive the :class:`Session` value itself and treat it as
    read-only; this service is its only writer.
    """

    def __init__(self, repository: TapHistoryRepository) -> None:
        """Initialize with the repository used to exchange credentials."""
        self._repository = repository
        self._current: Session | None = None

    @property
    def current(self) -> Session | None:
        """The signed-in session, or None when signed out."""
        return self._current

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    async def sign_in(self, email: str, password: str) -> Session:
        """Sign in with credentials.

        Raises:
            AuthFailure: If the upstream rejects the credentials. The previous
                session (if any) is kept.
        """
        logger.info("Signing in")
        session = await self._repository.login(email, password)
        self._current = replace(session, sign_out=self.sign_out)
        logger.info(f"Signed in as account {self._current.account_id}")
        return self._current

    def sign_out(self) -> None:
        """Drop the current session."""
        if self._current is not None:
            logger.info(f"Signed out account {self._current.account_id}")
        self._current = None
