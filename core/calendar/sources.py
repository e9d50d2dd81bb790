"""Game schedule feed source."""

import logging
from typing import Any

import requests

from config.constants import FEED_TIMEOUT, USER_AGENT
from core.exceptions import DecodeError, FetchError
from core.utils.date_parser import parse_feed_date
from core.utils.xml_decoder import decode_xml

logger = logging.getLogger(__name__)


def _get_headers() -> dict:
    """Build request headers for the feed.

    Returns:
        Dictionary with User-Agent header.
    """
    return {"User-Agent": USER_AGENT}


def parse_feed(text: str | bytes) -> list[dict[str, Any]]:
    """Decode an RSS document and return its items.

    Args:
        text: RSS XML body.

    Returns:
        List of item dictionaries, dates already converted to datetimes.

    Raises:
        DecodeError: If the document has no channel item collection.
    """
    document = decode_xml(text, value_processors=[parse_feed_date])

    channel = document.get("channel")
    if not isinstance(channel, dict) or "item" not in channel:
        raise DecodeError("Feed has no channel item collection")

    items = channel["item"]
    if isinstance(items, dict):
        items = [items]
    if not isinstance(items, list):
        raise DecodeError("Feed channel items are not elements")

    return [item for item in items if isinstance(item, dict)]


def request_games(url: str, timeout: float = FEED_TIMEOUT) -> list[dict]:
    """Fetch the game schedule feed and return its items.

    A single request is made; there is no retry.

    Args:
        url: Feed URL.
        timeout: Request timeout in seconds.

    Returns:
        List of feed item dictionaries.

    Raises:
        FetchError: If the request fails or returns a non-success status.
        DecodeError: If the body is not a feed with items.
    """
    logger.info(f"Fetching game schedule from {url}", extra={"feed_url": url})
    try:
        response = requests.get(url, headers=_get_headers(), timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(url, reason=e) from e

    if not response.ok:
        raise FetchError(url, status_code=response.status_code)

    logger.info(
        f"Feed fetched successfully. "
        f"Status: {response.status_code}, "
        f"Content-Length: {len(response.content)} bytes"
    )

    items = parse_feed(response.content)
    logger.info(f"Found {len(items)} items in feed")
    return items
