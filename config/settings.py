"""Environment-based settings.

Values are read from the process environment, after loading the ``.env``
file in the project root when it exists.
"""

import logging
import os

from dotenv import load_dotenv

from config.constants import DEFAULT_SPORTS
from config.paths import ENV_FILE
from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

env_path = ENV_FILE

load_dotenv(env_path)


def exists() -> bool:
    """Check whether the .env file exists.

    Returns:
        True if the .env file is present in the project root.
    """
    return env_path.exists()


def get(key: str, default: str | None = None) -> str | None:
    """Get an environment variable.

    Args:
        key: Variable name.
        default: Value returned when the variable is not set.

    Returns:
        Variable value or default.
    """
    return os.getenv(key, default)


def get_required(key: str) -> str:
    """Get an environment variable that must be set.

    Args:
        key: Variable name.

    Returns:
        Variable value.

    Raises:
        ConfigError: If the variable is missing or empty.
    """
    value = os.getenv(key)
    if not value:
        raise ConfigError(f"Required environment variable {key} is not set")
    return value


def get_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_list(key: str) -> list[str] | None:
    """Get a comma-separated environment variable as a list.

    Returns:
        List of stripped, non-empty entries, or None if the variable is
        not set.
    """
    value = os.getenv(key)
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def get_sports() -> list[str]:
    """Get the sports shown on the calendar.

    Falls back to the default sports when CALENDAR_SPORTS is not set.
    An empty value yields an empty list, which renders an empty calendar.
    """
    sports = get_list("CALENDAR_SPORTS")
    if sports is None:
        return list(DEFAULT_SPORTS)
    logger.debug(f"Sports from environment: {sports}")
    return sports
