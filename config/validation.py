"""Configuration validation utilities."""

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

SUBREDDIT_REGEX = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_]{1,20}$")


def validate_feed_url(url: str) -> bool:
    """Validate the game schedule feed URL.

    Args:
        url: Feed URL to validate.

    Returns:
        True if the URL uses http or https and has a host, False otherwise.
    """
    return bool(re.match(r"^https?://[^\s/]+", url))


def validate_subreddit(name: str) -> bool:
    """Validate subreddit name format.

    Args:
        name: Subreddit name without the /r/ prefix.

    Returns:
        True if the name is 2-21 letters, digits or underscores.
    """
    return bool(SUBREDDIT_REGEX.match(name))


def validate_days(days: str) -> bool:
    """Validate a day offset is a non-negative integer.

    Args:
        days: Value to validate.

    Returns:
        True if days is a non-negative integer, False otherwise.
    """
    return days.isdigit()


def validate_credential(value: str) -> bool:
    """Validate a credential is set and is not placeholder text."""
    return (
        len(value) > 0
        and not value.startswith("your_")
        and not value.startswith("YOUR_")
    )


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate all configuration values.

    Args:
        config: Dictionary of configuration key-value pairs.

    Returns:
        List of validation error messages (empty if all valid).

    Example:
        >>> errors = validate_config({
        ...     "GAMESCHEDULE_URL": "https://gocards.com/calendar.ashx/calendar.rss",
        ...     "REDDIT_SUBREDDIT": "AllHail",
        ... })
    """
    errors = []

    url = config.get("GAMESCHEDULE_URL", "")
    if not validate_feed_url(url):
        errors.append("GAMESCHEDULE_URL must be an http(s) URL")

    subreddit = config.get("REDDIT_SUBREDDIT", "")
    if not validate_subreddit(subreddit):
        errors.append(
            "Invalid REDDIT_SUBREDDIT format "
            "(2-21 letters, digits or underscores)"
        )

    for key in (
        "REDDIT_CLIENT_ID",
        "REDDIT_CLIENT_SECRET",
        "REDDIT_USERNAME",
        "REDDIT_PASSWORD",
    ):
        if key in config and not validate_credential(config[key]):
            errors.append(f"{key} must be set and not be a placeholder")

    for key in ("CALENDAR_DAYS_BEFORE", "CALENDAR_DAYS_AFTER"):
        if key in config and not validate_days(config[key]):
            errors.append(f"{key} must be a non-negative integer")

    if errors:
        logger.error(f"Configuration validation failed: {errors}")
    else:
        logger.info("Configuration validation passed")

    return errors
