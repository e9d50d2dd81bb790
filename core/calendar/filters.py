"""Feed item filters applied before descriptions are parsed."""

import logging
import re
from datetime import datetime
from typing import Any

from core.utils.date_parser import ensure_timezone, is_valid_datetime

logger = logging.getLogger(__name__)


def filter_by_sports(
    items: list[dict[str, Any]], sports: list[str]
) -> list[dict[str, Any]]:
    """Keep items whose title mentions one of the given sports.

    Matching is case-insensitive and by substring, so "basketball" keeps
    both men's and women's games. An empty sport list keeps nothing.

    Args:
        items: Decoded feed items.
        sports: Sport names to look for in item titles.

    Returns:
        Matching items in their original order.
    """
    if not sports:
        return []

    regex = re.compile(
        "|".join(re.escape(sport) for sport in sports), re.IGNORECASE
    )
    filtered = [
        item
        for item in items
        if isinstance(item.get("title"), str) and regex.search(item["title"])
    ]
    logger.debug(f"Sport filter kept {len(filtered)}/{len(items)} items")
    return filtered


def filter_by_date_range(
    items: list[dict[str, Any]], start: datetime, end: datetime
) -> list[dict[str, Any]]:
    """Keep items starting within [start, end], both ends inclusive.

    Items without a valid local start date are dropped; the feed has
    plenty of them and they are not an error.

    Args:
        items: Decoded feed items.
        start: Window start; naive bounds are taken as Louisville time.
        end: Window end.

    Returns:
        Items in the window, in their original order. Empty if the window
        ends before it starts.
    """
    start, end = ensure_timezone(start), ensure_timezone(end)
    if end < start:
        logger.warning(f"Date range ends before it starts: {start} > {end}")
        return []

    filtered = []
    for item in items:
        item_start = item.get("localstartdate")
        if not is_valid_datetime(item_start):
            logger.debug(
                f"Dropping item without a valid start date: "
                f"{item.get('title')}"
            )
            continue
        if start <= item_start <= end:
            filtered.append(item)

    logger.debug(f"Date filter kept {len(filtered)}/{len(items)} items")
    return filtered
