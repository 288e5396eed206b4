"""
Calendarific holidays API client.

    from calendarific import CalendarificClient

    with CalendarificClient(api_key="...") as client:
        for holiday in client.fetch_holidays("KE", 2025):
            print(holiday.date.iso, holiday.name)

One GET per fetch_holidays() call, no retries and no caching. Wrap the call
if you need backoff.
"""

import time
from typing import Any, List, Optional

import requests

from .exceptions import NetworkError
from .logging_config import get_logger
from .models import Holiday, load_json, parse_api_response
from .secure_logging import log_api_call, mask_api_key, redact_url

logger = get_logger(__name__)


def _is_success(code: int) -> bool:
    return 200 <= code < 300


def _error_type(payload: Any) -> Optional[str]:
    """Pull meta.error_type out of a provider error envelope, if present."""
    meta = payload.get("meta") if isinstance(payload, dict) else None
    if isinstance(meta, dict):
        return meta.get("error_type")
    return None


class CalendarificClient:
    """
    Client for the Calendarific holidays endpoint.

    The API key is passed explicitly; use calendarific.config.get_api_key()
    to resolve it from the environment or Secrets Manager.
    """

    BASE_URL = "https://calendarific.com/api/v2/holidays"
    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ):
        """
        Args:
            api_key: Calendarific API key
            base_url: Holidays endpoint. Override to point at a mock server.
            session: Transport to reuse. If omitted the client creates one
                     and closes it in close().
            timeout: Seconds passed to the transport, None to wait forever
        """
        if not api_key:
            raise ValueError("Calendarific API key required. Set CALENDARIFIC_API_KEY environment variable.")

        self._api_key = api_key
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def __repr__(self) -> str:
        return f"CalendarificClient(base_url={self.base_url!r}, api_key={mask_api_key(self._api_key)!r})"

    def __enter__(self) -> "CalendarificClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def fetch_holidays(self, country: str, year: int) -> List[Holiday]:
        """
        Fetch all holidays for a country and year.

        Args:
            country: ISO-3166 country code (e.g., "KE", "US")
            year: Calendar year

        Returns:
            Holidays in the order the provider returned them (may be empty)

        Raises:
            NetworkError: Transport failure, non-2xx HTTP status, or an
                          error code reported in the envelope's meta block
            MalformedPayload: Body is not JSON or is missing required fields
            TypeError: year is not an int
        """
        if isinstance(year, bool) or not isinstance(year, int):
            raise TypeError(f"year must be an int, got {type(year).__name__}")

        params = {
            "api_key": self._api_key,
            "country": country,
            "year": str(year),
        }

        start = time.monotonic()
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            log_api_call(
                logger, self.base_url, success=False,
                duration_ms=(time.monotonic() - start) * 1000, error=e,
            )
            # Suppress the cause: requests embeds the full URL, key included
            raise NetworkError(
                f"Request to Calendarific failed: {type(e).__name__}: {redact_url(str(e))}"
            ) from None

        duration_ms = (time.monotonic() - start) * 1000
        ok = _is_success(response.status_code)
        log_api_call(
            logger, response.url, success=ok,
            status_code=response.status_code, duration_ms=duration_ms,
        )

        if not ok:
            raise NetworkError(
                self._status_message(response.status_code, self._try_json(response)),
                status_code=response.status_code,
            )

        payload = load_json(response.content)

        # Calendarific can report failures in-band with HTTP 200
        meta = payload.get("meta") if isinstance(payload, dict) else None
        if isinstance(meta, dict):
            code = meta.get("code")
            if isinstance(code, int) and not _is_success(code):
                raise NetworkError(self._status_message(code, payload), status_code=code)

        envelope = parse_api_response(payload)
        logger.debug(
            "Parsed %d holidays", len(envelope.response.holidays),
            extra={'country': country, 'year': params["year"]},
        )
        return list(envelope.response.holidays)

    @staticmethod
    def _try_json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _status_message(code: int, payload: Any) -> str:
        msg = f"Calendarific returned status {code}"
        error_type = _error_type(payload)
        if error_type:
            msg += f" ({error_type})"
        return msg
