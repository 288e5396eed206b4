"""
Logging setup for the calendarific-holidays command.

The library modules only call get_logger(); applications embedding the client
keep their own handlers. setup_logging() is what the CLI uses to print
readable lines on stderr.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional

# Attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {'message', 'asctime'}


class HumanFormatter(logging.Formatter):
    """
    One line per record, extras appended in parentheses:

    2025-01-15 10:30:00 INFO  [cli] Fetching holidays (country=KE)
    """

    LEVEL_COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        when = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        level = record.levelname.ljust(5)
        if self.use_colors:
            level = f"{self.LEVEL_COLORS.get(record.levelname, '')}{level}{self.RESET}"

        name = record.name
        if name.startswith('calendarific.'):
            name = name[len('calendarific.'):]

        extras = [
            f"{key}={value}" for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        ]
        suffix = f" ({', '.join(extras)})" if extras else ""

        line = f"{when} {level} [{name}] {record.getMessage()}{suffix}"
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: Optional[str] = None, logger_name: Optional[str] = None) -> None:
    """
    Send log records to stderr through HumanFormatter.

    Args:
        level: Log level name. Defaults to LOG_LEVEL env var or INFO.
        logger_name: Logger to configure. If None, configures the root logger.
    """
    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO')
    numeric = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(logger_name)
    logger.setLevel(numeric)
    # Calling twice must not duplicate output
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(HumanFormatter())
    logger.addHandler(handler)

    if logger_name:
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance, typically get_logger(__name__)."""
    return logging.getLogger(name)
