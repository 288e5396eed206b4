"""
Shared pytest fixtures for calendarific tests.

Provides sample provider payloads and environment isolation.
"""

from typing import Any, Dict

import pytest


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_environment(monkeypatch):
    """Keep keys and log levels from the developer's shell out of tests."""
    for key in ['CALENDARIFIC_API_KEY', 'LOG_LEVEL']:
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# API Response Fixtures
# =============================================================================

@pytest.fixture
def full_holiday() -> Dict[str, Any]:
    """A holiday with every optional field populated."""
    return {
        "name": "Madaraka Day",
        "description": "Madaraka Day is a national holiday in Kenya",
        "date": {"iso": "2025-06-01"},
        "type": ["National holiday"],
        "locations": "All",
        "states": "All",
    }


@pytest.fixture
def minimal_holiday() -> Dict[str, Any]:
    """A holiday with only the required fields."""
    return {
        "name": "Jamhuri Day",
        "date": {"iso": "2025-12-12"},
    }


@pytest.fixture
def holidays_payload(full_holiday, minimal_holiday) -> Dict[str, Any]:
    """Envelope with two holidays, as returned by /api/v2/holidays."""
    return {
        "meta": {"code": 200},
        "response": {"holidays": [full_holiday, minimal_holiday]},
    }


@pytest.fixture
def empty_payload() -> Dict[str, Any]:
    return {"meta": {"code": 200}, "response": {"holidays": []}}


@pytest.fixture
def auth_error_payload() -> Dict[str, Any]:
    """Error envelope the provider sends for a bad key."""
    return {
        "meta": {
            "code": 401,
            "error_type": "auth failed",
            "error_detail": "Missing or invalid api credentials.",
        },
        "response": [],
    }
