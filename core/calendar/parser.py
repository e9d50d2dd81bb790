"""Turn feed items into Game records.

A feed item description is a loosely formatted block of lines, e.g.::

    [L] University of Louisville Men's Basketball vs  Duke
    L 81-77
    TV: ESPN/ACC Network
    Streaming Audio: http://gocards.com/showcase?Live=609
     http://gocards.com/calendar.aspx?id=13548

The first line is the game summary, an optional line holds the result and
the remaining ``key: value`` lines carry broadcast and ticket details. The
trailing bare URL is skipped. Lines that match nothing are ignored.
"""

import logging
import re
from dataclasses import asdict
from typing import Any

from config.constants import RECOGNIZED_SPORTS, SCHOOL_NAME
from core.calendar.models import Game, GameResult
from core.utils.date_parser import is_valid_datetime

logger = logging.getLogger(__name__)

GAME_BASICS_REGEX = re.compile(
    r"^(?:(?P<status>cancelled|\[[lntw]\])\s+)?"
    + re.escape(SCHOOL_NAME)
    + r"\s(?:(?P<gender>men's|women's)\s)?"
    + r"(?P<sport>"
    + "|".join(re.escape(sport) for sport in RECOGNIZED_SPORTS)
    + r")(?:\s+(?:(?P<venue>at|vs)\s+)?(?P<opponent>.*))?$",
    re.IGNORECASE,
)

GAME_RESULT_REGEX = re.compile(
    r"^(?P<result>[lntw])\s+(?:-\s+)?"
    r"(?:(?P<score>(?:t-)?\d{1,3}(?:st|nd|rd|th)?)"
    r"(?:-(?P<opponent_score>\d{1,3}))?)?",
    re.IGNORECASE,
)

SUPPLEMENTARY_REGEX = re.compile(r"^(?P<key>[^:]+?):\s*(?P<value>.*)$")

LINE_SEPARATOR_REGEX = re.compile(r"\\n|\r?\n")
BARE_URL_REGEX = re.compile(r"^https?://\S+$", re.IGNORECASE)

# Supplementary line keys (lower-cased) mapped to Game fields
SUPPLEMENTARY_FIELDS = {
    "radio": "radio",
    "streaming audio": "audio",
    "streaming video": "video",
    "tickets": "tickets",
    "tv": "tv",
}

GAME_DEFAULTS: dict[str, Any] = asdict(Game())


def parse_game_basics(line: str) -> dict[str, Any]:
    """Parse the summary line of a description.

    Returns:
        Dict with is_cancelled, is_home, gender, sport and opponent, or an
        empty dict when the line is not a summary line.
    """
    match = GAME_BASICS_REGEX.match(line)
    if not match:
        return {}

    status = match.group("status")
    venue = match.group("venue")
    return {
        "is_cancelled": status is not None and status.lower() == "cancelled",
        "is_home": venue is not None and venue.lower() == "vs",
        "gender": match.group("gender") or None,
        "opponent": (match.group("opponent") or "").strip() or None,
        "sport": match.group("sport") or None,
    }


def parse_game_result(line: str) -> dict[str, Any]:
    """Parse a result line such as "L 81-77" or "N - t-5th of 22 teams".

    Returns:
        Dict with result, score and opponent_score, or an empty dict when
        the line is not a result line.
    """
    match = GAME_RESULT_REGEX.match(line)
    if not match:
        return {}

    return {
        "opponent_score": match.group("opponent_score") or None,
        "result": GameResult(match.group("result").upper()),
        "score": match.group("score") or None,
    }


def parse_supplementary(line: str) -> dict[str, Any]:
    """Parse a "key: value" line with broadcast or ticket details.

    Returns:
        Single-entry dict for a recognised key, otherwise an empty dict.
    """
    match = SUPPLEMENTARY_REGEX.match(line)
    if not match:
        return {}

    field = SUPPLEMENTARY_FIELDS.get(match.group("key").strip().lower())
    if field is None:
        return {}
    return {field: match.group("value").strip() or None}


def split_description(description: str) -> list[str]:
    """Split a description on its escaped newlines into trimmed lines."""
    lines = (line.strip() for line in LINE_SEPARATOR_REGEX.split(description))
    return [line for line in lines if line]


def parse_item_description(description: Any) -> dict[str, Any]:
    """Pull game details out of a feed item description.

    Args:
        description: Raw description text from the feed.

    Returns:
        Only the fields that could be extracted; empty for non-strings.
    """
    if not isinstance(description, str):
        return {}

    lines = split_description(description)
    if not lines:
        return {}

    parsed = parse_game_basics(lines[0])
    if not parsed:
        logger.debug(f"Unrecognised summary line: '{lines[0]}'")

    details = lines[1:]
    if details and BARE_URL_REGEX.match(details[-1]):
        details = details[:-1]

    for line in details:
        fields = parse_supplementary(line) or parse_game_result(line)
        if fields:
            parsed.update(fields)
        else:
            logger.debug(f"Ignoring description line: '{line}'")

    return parsed


def _structural_fields(item: dict[str, Any]) -> dict[str, Any]:
    start = item.get("localstartdate")
    end = item.get("localenddate")
    return {
        "end": end if is_valid_datetime(end) else None,
        "game_id": item.get("gameid") or None,
        "location": item.get("location") or None,
        "promo_name": item.get("gamepromoname") or None,
        "start": start if is_valid_datetime(start) else None,
        "url": item.get("link") or None,
    }


def parse_item(item: dict[str, Any]) -> Game:
    """Build a Game from a decoded feed item.

    Fields are merged in three stages: defaults, then whatever the
    description yields, then the item's own structural fields, which
    always win.

    Args:
        item: Feed item as produced by the XML decoder.

    Returns:
        Immutable Game record.
    """
    fields = dict(GAME_DEFAULTS)
    fields.update(parse_item_description(item.get("description")))
    fields.update(_structural_fields(item))
    return Game(**fields)
