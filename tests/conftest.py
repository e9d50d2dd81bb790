"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    monkeypatch.setenv(
        "GAMESCHEDULE_URL", "http://gocards.com/calendar.ashx/calendar.rss"
    )
    monkeypatch.setenv("REDDIT_CLIENT_ID", "client_id_123")
    monkeypatch.setenv("REDDIT_CLIENT_SECRET", "client_secret_456")
    monkeypatch.setenv("REDDIT_USERNAME", "AllHail_Bot")
    monkeypatch.setenv("REDDIT_PASSWORD", "hunter2")
    monkeypatch.setenv("REDDIT_SUBREDDIT", "AllHail")
    monkeypatch.setenv("REDDIT_TEMPLATE", "sidebar_template")


@pytest.fixture
def calendar_rss():
    """Raw RSS feed with five game items."""
    return (FIXTURES_DIR / "calendar.rss").read_bytes()
