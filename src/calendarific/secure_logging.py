"""
Secure logging utilities for credential masking.

The Calendarific API key travels in the query string, so every URL and every
transport error message is a potential leak. Run them through these helpers
before they reach a log line or an exception.

Usage:
    from calendarific.secure_logging import mask_api_key, redact_url

    logger.debug("GET %s", redact_url(prepared.url))
    logger.info("Using API key: %s", mask_api_key(api_key))
"""

import logging
import re
from typing import Optional

# Query parameters whose values are credentials
_REDACT_PATTERNS = [
    (re.compile(r"(api_key=)[^&\s]+", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"(apikey=)[^&\s]+", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"(access_token=)[^&\s]+", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"(token=)[^&\s]+", re.IGNORECASE), r"\1[REDACTED]"),
]


def mask_api_key(api_key: Optional[str], visible_chars: int = 4) -> str:
    """Mask API key showing only first N characters.

    Examples:
        >>> mask_api_key("abc123xyz789")
        'abc1********'
        >>> mask_api_key("short")
        '****'
        >>> mask_api_key(None)
        '****'
    """
    if not api_key or len(api_key) <= visible_chars:
        return "****"
    return api_key[:visible_chars] + "*" * 8


def redact_url(url: Optional[str]) -> str:
    """Redact API keys from URLs or any text that embeds one.

    Examples:
        >>> redact_url("https://calendarific.com/api/v2/holidays?api_key=secret123&country=KE")
        'https://calendarific.com/api/v2/holidays?api_key=[REDACTED]&country=KE'
    """
    if not url:
        return "****"

    result = url
    for pattern, replacement in _REDACT_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def log_api_call(
    logger: logging.Logger,
    endpoint: str,
    success: bool,
    status_code: Optional[int] = None,
    duration_ms: Optional[float] = None,
    error: Optional[BaseException] = None,
) -> None:
    """Log an API call at DEBUG without exposing credentials.

    Args:
        logger: Logger instance
        endpoint: URL called; redacted before logging
        success: Whether the call succeeded
        status_code: HTTP status, if a response was received
        duration_ms: Optional duration in milliseconds
        error: Optional exception (only its type is logged, not the message)
    """
    status = "SUCCESS" if success else "FAILED"
    msg = f"API Call: Calendarific -> {redact_url(endpoint)} [{status}]"

    if status_code is not None:
        msg += f" HTTP {status_code}"

    if duration_ms is not None:
        msg += f" ({duration_ms:.0f}ms)"

    if error:
        msg += f" Error: {type(error).__name__}"

    logger.debug(msg)
