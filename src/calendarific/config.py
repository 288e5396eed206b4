"""
API key lookup for the calendarific-holidays command.

CalendarificClient never reads the environment; whoever builds it passes the
key in. The CLI finds that key here, after python-dotenv has merged any .env
file into os.environ.
"""

import os
from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)

API_KEY_NAME = "CALENDARIFIC_API_KEY"

# Values shipped in sample .env files
_PLACEHOLDER_PREFIX = "your_"


def get_api_key(key_name: str = API_KEY_NAME) -> Optional[str]:
    """
    Read an API key from the environment.

    Args:
        key_name: Environment variable to read (default: CALENDARIFIC_API_KEY)

    Returns:
        The key, or None when unset, blank or left as a placeholder.
    """
    value = os.getenv(key_name, "").strip()
    if not value:
        return None

    if value.startswith(_PLACEHOLDER_PREFIX):
        logger.warning("%s is still a placeholder, ignoring it", key_name)
        return None

    return value
