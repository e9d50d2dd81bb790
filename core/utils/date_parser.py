"""Date parsing utilities for the sidebar calendar.

Centralizes all date handling so the feed decoder, the filters and the
formatter agree on time zones and formats.
"""

import logging
import re
from datetime import datetime
from typing import Any

import pendulum

from config.constants import TIMEZONE

logger = logging.getLogger(__name__)

DATE_PREFIX_REGEX = re.compile(r"^(\d{4}-\d{2}-\d{2})")
LONG_FRACTION_REGEX = re.compile(r"(\.\d{6})\d+")


def parse_feed_date(value: Any, timezone: str = TIMEZONE) -> Any:
    """Convert ISO-prefixed feed values into pendulum datetimes.

    Used as a value processor by the XML decoder, so it sees every leaf
    value of the feed. Only strings starting with YYYY-MM-DD are touched.

    The feed writes seven fractional second digits
    (e.g. "2017-03-09T14:00:00.0000000"), which are truncated to
    microseconds. Malformed trailing content falls back to the date
    prefix at midnight; an impossible date is returned unchanged.

    Args:
        value: Decoded XML leaf value.
        timezone: Timezone assigned to values without an offset.

    Returns:
        Timezone-aware pendulum datetime, or the value unchanged.
    """
    if not isinstance(value, str):
        return value

    match = DATE_PREFIX_REGEX.match(value)
    if not match:
        return value

    try:
        return pendulum.parse(LONG_FRACTION_REGEX.sub(r"\1", value), tz=timezone)
    except (ValueError, TypeError) as e:
        logger.debug(f"Falling back to date prefix for '{value}': {e}")

    try:
        return pendulum.parse(match.group(1), tz=timezone)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid feed date '{value}': {e}")
        return value


def is_valid_datetime(value: Any) -> bool:
    """Check that a decoded feed value is a usable datetime."""
    return isinstance(value, datetime)


def ensure_timezone(dt: datetime, timezone: str = TIMEZONE) -> datetime:
    """Attach the calendar timezone to a naive datetime.

    Aware datetimes keep their own offset. Feed dates are always aware,
    so window bounds and reference times go through this before any
    comparison.
    """
    return pendulum.instance(dt, tz=timezone)


def format_game_time(dt: datetime) -> str:
    """Format a game start as M/D h:mmA (e.g. "3/9 2:00PM").

    Args:
        dt: Datetime to format.

    Returns:
        Month/day and 12-hour time without leading zeros.
    """
    return pendulum.instance(dt).format("M/D h:mmA")


def format_reason_timestamp(dt: datetime | None = None) -> str:
    """Format a UTC ISO 8601 timestamp for wiki edit reasons.

    Args:
        dt: Datetime to format (default: now).

    Returns:
        Timestamp such as "2017-03-09T19:00:00Z".
    """
    if dt is None:
        dt = pendulum.now("UTC")
    return pendulum.instance(dt).in_timezone("UTC").format(
        "YYYY-MM-DD[T]HH:mm:ss[Z]"
    )
