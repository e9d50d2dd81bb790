"""Sidebar updater - Main entry point.

Reads the sidebar template from the subreddit wiki, fills in the game
calendar and publishes the result as the sidebar config page.
"""

import argparse
import logging
import logging.handlers
import sys

import pendulum

from config import settings
from config.constants import (
    DEFAULT_DAYS_AFTER,
    DEFAULT_DAYS_BEFORE,
    DEFAULT_WIKI_PAGE,
    EDIT_REASON,
    TIMEZONE,
)
from config.paths import LOG_FILE
from config.validation import validate_config
from core import calendar as calendar_plugin
from core.exceptions import CalendarError, ConfigError
from core.logging_config import StructuredFormatter
from core.reddit import RedditClient
from core.utils.date_parser import format_reason_timestamp

logger = logging.getLogger(__name__)

REQUIRED_KEYS = (
    "GAMESCHEDULE_URL",
    "REDDIT_CLIENT_ID",
    "REDDIT_CLIENT_SECRET",
    "REDDIT_USERNAME",
    "REDDIT_PASSWORD",
    "REDDIT_SUBREDDIT",
    "REDDIT_TEMPLATE",
)


def configure_logging(verbose: bool = False) -> None:
    """Log to the console and to a rotating JSON log file."""
    level = logging.DEBUG if verbose else logging.INFO

    # Console handler - human-readable format
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    # File handler - JSON format for easier parsing
    file_handler = logging.handlers.RotatingFileHandler(
        str(LOG_FILE),
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(StructuredFormatter())

    logging.basicConfig(
        level=level,
        handlers=[console_handler, file_handler],
        force=True,
    )


def load_configuration() -> dict[str, str]:
    """Load configuration from the environment.

    Returns:
        Dictionary of configuration values.

    Raises:
        ConfigError: If a value is missing or invalid.
    """
    config = {key: settings.get_required(key) for key in REQUIRED_KEYS}
    config["CALENDAR_DAYS_BEFORE"] = settings.get(
        "CALENDAR_DAYS_BEFORE", str(DEFAULT_DAYS_BEFORE)
    ).strip()
    config["CALENDAR_DAYS_AFTER"] = settings.get(
        "CALENDAR_DAYS_AFTER", str(DEFAULT_DAYS_AFTER)
    ).strip()

    validation_errors = validate_config(config)
    if validation_errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(
            f"  - {err}" for err in validation_errors
        )
        raise ConfigError(error_msg)

    logger.info("Configuration loaded and validated successfully")
    return config


def build_calendar_config(config: dict[str, str], now=None) -> dict:
    """Build the calendar plugin config for the window around now."""
    if now is None:
        now = pendulum.now(TIMEZONE)

    return {
        "url": config["GAMESCHEDULE_URL"],
        "start": now.subtract(days=int(config["CALENDAR_DAYS_BEFORE"])),
        "end": now.add(days=int(config["CALENDAR_DAYS_AFTER"])),
        "sports": settings.get_sports(),
        "abbreviate_sports": settings.get_bool("CALENDAR_ABBREVIATE_SPORTS"),
    }


def run(dry_run: bool = False) -> str:
    """Run one sidebar update.

    Args:
        dry_run: Print the markdown instead of publishing it.

    Returns:
        The sidebar markdown.
    """
    config = load_configuration()
    calendar = calendar_plugin.create(build_calendar_config(config))

    reddit = RedditClient(
        client_id=config["REDDIT_CLIENT_ID"],
        client_secret=config["REDDIT_CLIENT_SECRET"],
        username=config["REDDIT_USERNAME"],
        password=config["REDDIT_PASSWORD"],
        subreddit=config["REDDIT_SUBREDDIT"],
    )

    template = reddit.get_wiki_page(config["REDDIT_TEMPLATE"])
    markdown = calendar(template)

    if dry_run:
        print(markdown)
        logger.info("Dry run - sidebar not published")
        return markdown

    reddit.edit_wiki_page(
        settings.get("REDDIT_PAGE", DEFAULT_WIKI_PAGE),
        markdown,
        reason=EDIT_REASON.format(timestamp=format_reason_timestamp()),
    )
    return markdown


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Update the subreddit sidebar with the game calendar"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the sidebar markdown instead of publishing it",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        run(dry_run=args.dry_run)
    except CalendarError as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1

    logger.info("Sidebar update complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
