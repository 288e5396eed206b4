"""
Records mirroring the Calendarific holidays JSON payload.

    {
      "meta": {"code": 200},
      "response": {
        "holidays": [
          {
            "name": "New Year's Day",
            "description": "...",
            "date": {"iso": "2025-01-01"},
            "type": ["National holiday"],
            "locations": "All",
            "states": "All"
          }
        ]
      }
    }

Parsing is a structural mapping only: no date, country or text validation.
Optional fields that are absent or null come back as None. Sequences are
parsed into tuples so records stay immutable and hashable. Keys the provider
sends that are not modelled here are ignored.
"""

import json
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import MalformedPayload


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the provider's field names."""
        return self.model_dump(mode="json", by_alias=True)


class HolidayDate(_Record):
    """Date of a holiday, ISO-8601 text kept verbatim."""
    iso: str


class Holiday(_Record):
    """A single holiday entry."""
    name: str
    description: Optional[str] = None
    date: HolidayDate
    # "type" on the wire
    categories: Optional[Tuple[str, ...]] = Field(default=None, alias="type")
    locations: Optional[str] = None
    states: Optional[str] = None


class Meta(_Record):
    """Status block of the envelope. error_* are only set on failures."""
    code: int
    error_type: Optional[str] = None
    error_detail: Optional[str] = None


class HolidaysResponse(_Record):
    holidays: Tuple[Holiday, ...]


class ApiResponse(_Record):
    """Top-level envelope returned by the holidays endpoint."""
    meta: Meta
    response: HolidaysResponse


def _describe(error: ValidationError) -> str:
    """Summarize validation errors as 'path: reason' pairs."""
    parts = []
    for err in error.errors():
        path = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{path}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def load_json(body: Union[str, bytes]) -> Any:
    """
    Decode a response body as JSON.

    Raises:
        MalformedPayload: If the body is not valid JSON
    """
    try:
        return json.loads(body)
    except (TypeError, ValueError) as e:
        raise MalformedPayload(f"Response body is not valid JSON: {e}") from e


def parse_holiday(payload: Any) -> Holiday:
    """
    Build a Holiday from a decoded JSON object.

    Raises:
        MalformedPayload: If required fields (name, date.iso) are missing
    """
    try:
        return Holiday.model_validate(payload)
    except ValidationError as e:
        raise MalformedPayload(f"Invalid holiday: {_describe(e)}") from e


def parse_api_response(payload: Any) -> ApiResponse:
    """
    Build the full envelope from a decoded JSON object.

    Raises:
        MalformedPayload: If the payload does not match the envelope schema
    """
    try:
        return ApiResponse.model_validate(payload)
    except ValidationError as e:
        raise MalformedPayload(f"Invalid API response: {_describe(e)}") from e


def parse_api_response_json(body: Union[str, bytes]) -> ApiResponse:
    """Decode and parse a raw response body in one step."""
    return parse_api_response(load_json(body))
