"""
CLI tool to fetch public holidays from Calendarific.

Usage:
    calendarific-holidays --country KE [--year 2025] [--json]

Options:
    --country, -c    ISO-3166 country code (required)
    --year, -y       Calendar year (default: current year)
    --json           Print holidays as JSON on stdout instead of log lines
    --base-url       Override the holidays endpoint (e.g., a mock server)

The API key is read from CALENDARIFIC_API_KEY (a .env file in the working
directory is honoured) or, inside Lambda, from Secrets Manager.
"""

import argparse
import json
import sys
from datetime import date
from typing import List, Optional

from dotenv import load_dotenv

from .client import CalendarificClient
from .config import API_KEY_NAME, get_api_key
from .exceptions import CalendarificError
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fetch public holidays from Calendarific"
    )
    parser.add_argument(
        "--country", "-c",
        required=True,
        help="Country code (e.g., KE, US)"
    )
    parser.add_argument(
        "--year", "-y",
        type=int,
        default=date.today().year,
        help="Calendar year (default: current year)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print holidays as JSON on stdout"
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Holidays endpoint override"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    setup_logging()

    args = build_parser().parse_args(argv)

    api_key = get_api_key(API_KEY_NAME)
    if not api_key:
        logger.error("%s not configured", API_KEY_NAME)
        return 1

    logger.info("Fetching holidays for country=%s year=%d", args.country, args.year)

    try:
        with CalendarificClient(api_key=api_key, base_url=args.base_url) as client:
            holidays = client.fetch_holidays(args.country, args.year)
    except CalendarificError as e:
        logger.error("Failed to fetch holidays: %s", e)
        return 1

    if args.as_json:
        json.dump([h.to_dict() for h in holidays], sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 0

    logger.info("Found %d holidays", len(holidays))
    for h in holidays:
        categories = f" [{', '.join(h.categories)}]" if h.categories else ""
        logger.info("  %s: %s%s", h.date.iso, h.name, categories)

    return 0


if __name__ == "__main__":
    sys.exit(main())
