"""Centralized file path configuration.

All file paths used by the updater are defined here for easy maintenance
and testing.
"""

from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Environment file (stored in project root)
ENV_FILE = PROJECT_ROOT / ".env"

# Log files (stored in project root)
LOG_FILE = PROJECT_ROOT / "updater.log"
