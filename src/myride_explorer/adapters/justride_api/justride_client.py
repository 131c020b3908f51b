"""JustRide API client.

Talks to the ticketing service through the edge relay, so the session cookie
issued at login comes back scoped to the relay path and is replayed by the
aiohttp cookie jar on the token exchange.
"""

import base64
import calendar
import logging
from datetime import UTC, datetime, tzinfo
from typing import TYPE_CHECKING, Any

import aiohttp
from yarl import URL

from myride_explorer.adapters.api_request_logger import log_api_request
from myride_explorer.adapters.justride_api.constants import (
    DATA_SERVICE,
    DEFAULT_HISTORY_SIZE,
    DEFAULT_RANGE_SIZE,
    FETCH_FAILED,
    HISTORY_PATH,
    LOGIN_FAILED,
    LOGIN_PATH,
    MIN_START_TIME,
    TOKEN_FAILED,
    TOKENS_PATH,
)
from myride_explorer.domain.errors import (
    AuthFailure,
    FetchFailure,
    JustRideError,
    TokenFailure,
    TransportFailure,
)
from myride_explorer.domain.models.session import Session
from myride_explorer.domain.models.tap_event import TapEvent, to_epoch_millis
from myride_explorer.domain.ports.tap_history_repository import TapHistoryRepository

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

logger = logging.getLogger(__name__)


def _is_success(status: int) -> bool:
    return 200 <= status < 300


async def _upstream_message(response: "ClientResponse") -> str | None:
    """Extract ``message`` from a JSON error body, if there is one."""
    try:
        data = await response.json(content_type=None)
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None


class JustRideClient(TapHistoryRepository):
    """Adapter for the JustRide login, token and history endpoints."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str,
        agency_id: str,
        tz: tzinfo,
        history_page_size: int = DEFAULT_HISTORY_SIZE,
        range_page_size: int = DEFAULT_RANGE_SIZE,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session; its cookie jar carries the login cookie.
            base_url: Relay mount the API paths are appended to.
            agency_id: Agency namespace, e.g. ``RTDDENVER``.
            tz: Viewer timezone used for month and day boundaries.
            history_page_size: Default number of taps for the recent history.
            range_page_size: Default number of taps for date range queries.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._agency_id = agency_id
        self._tz = tz
        self._history_page_size = history_page_size
        self._range_page_size = range_page_size

    def _url(self, path_template: str, **path_params: str) -> URL:
        path = path_template.format(agency_id=self._agency_id, **path_params)
        return URL(f"{self._base_url}{path}")

    async def _send(
        self,
        method: str,
        url: URL,
        failure: type[JustRideError],
        default_message: str,
        *,
        headers: dict[str, str] | None = None,
        payload: Any = None,
        surface_upstream_message: bool = False,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Non-2xx responses raise ``failure``; network errors raise
        :class:`TransportFailure`. Nothing is retried.
        """
        log_api_request(method, str(url), headers, payload)
        try:
            async with self._session.request(
                method, url, headers=headers, json=payload
            ) as response:
                if not _is_success(response.status):
                    message = None
                    if surface_upstream_message:
                        message = await _upstream_message(response)
                    logger.warning(
                        f"JustRide API returned status {response.status} for {method} {url.path}"
                    )
                    raise failure(message or default_message, status_code=response.status)

                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    logger.warning(f"JustRide API returned invalid JSON for {method} {url.path}")
                    raise failure(default_message, status_code=response.status) from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error calling JustRide API {method} {url.path}: {e}")
            raise TransportFailure(str(e) or type(e).__name__) from e

    async def login(self, email: str, password: str) -> Session:
        """Sign in with HTTP Basic credentials.

        Raises:
            AuthFailure: On a non-2xx response; carries the upstream message
                when the error body provides one.
        """
        credentials = base64.b64encode(f"{email}:{password}".encode()).decode("ascii")
        data = await self._send(
            "POST",
            self._url(LOGIN_PATH),
            AuthFailure,
            LOGIN_FAILED,
            headers={"Authorization": f"Basic {credentials}"},
            payload={},
            surface_upstream_message=True,
        )
        if not isinstance(data, dict):
            raise AuthFailure(LOGIN_FAILED)
        return Session.from_login_response(data)

    async def get_jwt_token(self, service: str = DATA_SERVICE) -> str:
        """Exchange the login cookie for a short-lived bearer token."""
        data = await self._send(
            "POST",
            self._url(TOKENS_PATH),
            TokenFailure,
            TOKEN_FAILED,
            payload={"service": service},
        )
        token = data.get("jwtToken") if isinstance(data, dict) else None
        if not token:
            raise TokenFailure(TOKEN_FAILED)
        return str(token)

    async def fetch_tap_history(
        self,
        account_id: str,
        jwt_token: str,
        size: int = DEFAULT_HISTORY_SIZE,
        start_time: int = MIN_START_TIME,
        end_time: int | None = None,
    ) -> list[TapEvent]:
        """Fetch one page of tap history between two epoch-millisecond instants."""
        if end_time is None:
            end_time = to_epoch_millis(datetime.now(UTC))
        url = self._url(HISTORY_PATH, account_id=account_id).with_query(
            size=size,
            startTime=max(start_time, MIN_START_TIME),
            endTime=end_time,
        )
        data = await self._send(
            "GET",
            url,
            FetchFailure,
            FETCH_FAILED,
            headers={"Authorization": f"Bearer {jwt_token}"},
        )
        if not isinstance(data, dict):
            raise FetchFailure(FETCH_FAILED)
        return self._parse_hits(data.get("hits") or [])

    @staticmethod
    def _parse_hits(hits: list[Any]) -> list[TapEvent]:
        events = []
        for record in hits:
            if not isinstance(record, dict):
                continue
            try:
                events.append(TapEvent.from_record(record))
            except ValueError as e:
                logger.warning(f"Skipping tap record: {e}")
        return events

    async def get_tap_history(
        self, account_id: str, page_size: int | None = None
    ) -> list[TapEvent]:
        """Get the most recent taps for an account."""
        jwt_token = await self.get_jwt_token(DATA_SERVICE)
        return await self.fetch_tap_history(
            account_id, jwt_token, page_size or self._history_page_size
        )

    async def get_tap_history_for_date_range(
        self,
        account_id: str,
        start: datetime,
        end: datetime,
        page_size: int | None = None,
    ) -> list[TapEvent]:
        """Get taps between two aware datetimes (inclusive)."""
        jwt_token = await self.get_jwt_token(DATA_SERVICE)
        return await self.fetch_tap_history(
            account_id,
            jwt_token,
            page_size or self._range_page_size,
            to_epoch_millis(start),
            to_epoch_millis(end),
        )

    async def get_tap_history_for_month(
        self, account_id: str, year: int, month: int
    ) -> list[TapEvent]:
        """Get taps from local midnight on the 1st to the last millisecond of the month."""
        last_day = calendar.monthrange(year, month)[1]
        start = datetime(year, month, 1, tzinfo=self._tz)
        end = datetime(year, month, last_day, 23, 59, 59, 999000, tzinfo=self._tz)
        return await self.get_tap_history_for_date_range(account_id, start, end)

    async def get_tap_history_for_day(
        self, account_id: str, year: int, month: int, day: int
    ) -> list[TapEvent]:
        """Get taps from local midnight to the last millisecond of one day."""
        start = datetime(year, month, day, tzinfo=self._tz)
        end = datetime(year, month, day, 23, 59, 59, 999000, tzinfo=self._tz)
        return await self.get_tap_history_for_date_range(account_id, start, end)
