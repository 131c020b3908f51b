"""Home view for a signed-in rider."""

from myride_explorer.domain.models import Session


class HomeView:
    """Welcome text for the signed-in session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    @property
    def greeting(self) -> str:
        return f"Welcome, {self.session.name}!"

    @property
    def account_line(self) -> str:
        return f"Account: {self.session.account_id}"
