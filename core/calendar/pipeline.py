"""Build the sidebar calendar and splice it into a wiki template."""

import logging
import re
from datetime import datetime
from typing import Any, Callable

from config.constants import FEED_TIMEOUT, PLACEHOLDER_PATTERN
from core.calendar.filters import filter_by_date_range, filter_by_sports
from core.calendar.formatter import format_games_for_display
from core.calendar.parser import parse_item
from core.calendar.sources import request_games
from core.exceptions import ConfigError
from core.utils.date_parser import ensure_timezone

logger = logging.getLogger(__name__)


def splice_into_template(
    template: str, markdown: str, placeholder: str = PLACEHOLDER_PATTERN
) -> str:
    """Replace every placeholder in the template with the markdown.

    Args:
        template: Wiki template markdown.
        markdown: Rendered calendar.
        placeholder: Regex matched case-insensitively.

    Returns:
        Template with the calendar in place of each placeholder.
    """
    return re.sub(placeholder, lambda _: markdown, template, flags=re.IGNORECASE)


def validate_calendar_config(config: Any) -> None:
    """Check the calendar config before anything touches the network.

    Raises:
        ConfigError: If a value is missing or has the wrong type.
    """
    if not isinstance(config, dict):
        raise ConfigError('"config" is not a dict')

    if not isinstance(config.get("end"), datetime):
        raise ConfigError('"config.end" is not a datetime')

    if not isinstance(config.get("sports"), list):
        raise ConfigError('"config.sports" is not a list')

    if not isinstance(config.get("start"), datetime):
        raise ConfigError('"config.start" is not a datetime')

    if not isinstance(config.get("url"), str):
        raise ConfigError('"config.url" is not a string')

    if not isinstance(config.get("placeholder", PLACEHOLDER_PATTERN), str):
        raise ConfigError('"config.placeholder" is not a string')


def create(config: dict[str, Any]) -> Callable[[str], str]:
    """Create the calendar step of the sidebar update.

    Args:
        config: Mapping with url, start, end and sports, plus optional
            placeholder, abbreviate_sports and timeout. Naive start and end
            datetimes are taken as Louisville time.

    Returns:
        Function that takes the template markdown and returns it with
        the calendar table spliced in.

    Raises:
        ConfigError: If the config is invalid.
    """
    validate_calendar_config(config)

    url = config["url"]
    start = ensure_timezone(config["start"])
    end = ensure_timezone(config["end"])
    sports = config["sports"]
    placeholder = config.get("placeholder", PLACEHOLDER_PATTERN)
    abbreviate_sports = bool(config.get("abbreviate_sports", False))
    timeout = config.get("timeout", FEED_TIMEOUT)

    def calendar(template: str) -> str:
        items = request_games(url, timeout=timeout)
        items = filter_by_sports(items, sports)
        items = filter_by_date_range(items, start, end)
        games = [parse_item(item) for item in items]
        logger.info(
            f"{len(games)} games between {start.isoformat()} "
            f"and {end.isoformat()}"
        )
        markdown = format_games_for_display(
            games, abbreviate_sports=abbreviate_sports
        )
        return splice_into_template(template, markdown, placeholder)

    return calendar
