"""
calendarific - client for the Calendarific public holidays API.

Fetch holidays:
    from calendarific import CalendarificClient

    client = CalendarificClient(api_key="...")
    holidays = client.fetch_holidays("KE", 2025)

Parse a saved payload:
    from calendarific import parse_api_response_json

    envelope = parse_api_response_json(body)
"""

from .client import CalendarificClient
from .exceptions import CalendarificError, MalformedPayload, NetworkError
from .models import (
    ApiResponse,
    Holiday,
    HolidayDate,
    HolidaysResponse,
    Meta,
    parse_api_response,
    parse_api_response_json,
    parse_holiday,
)

__version__ = "0.1.0"
__all__ = [
    "CalendarificClient",
    "CalendarificError",
    "NetworkError",
    "MalformedPayload",
    "ApiResponse",
    "Holiday",
    "HolidayDate",
    "HolidaysResponse",
    "Meta",
    "parse_api_response",
    "parse_api_response_json",
    "parse_holiday",
]
