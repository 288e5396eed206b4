"""
Exceptions raised by the Calendarific client.

Everything a fetch can raise derives from CalendarificError so callers can
catch the whole family in one place:

    try:
        holidays = client.fetch_holidays("KE", 2025)
    except NetworkError as e:
        logger.warning("Provider unreachable (status=%s)", e.status_code)
    except MalformedPayload:
        logger.error("Provider returned an unexpected body")
"""

from typing import Optional


class CalendarificError(Exception):
    """Base class for client errors."""


class NetworkError(CalendarificError):
    """
    The provider could not be reached or reported a failure.

    Raised for transport errors (status_code is None), non-2xx HTTP
    responses, and 2xx responses whose envelope carries a non-2xx
    meta.code, which Calendarific uses for errors such as a bad API key.
    In the last two cases status_code holds the failing code.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedPayload(CalendarificError):
    """Response body is not JSON or does not match the expected envelope."""
