"""Tests for core.calendar.pipeline module."""

from datetime import datetime

from unittest.mock import MagicMock, patch

import pendulum
import pytest

from core import calendar
from core.calendar.pipeline import splice_into_template
from core.exceptions import ConfigError, FetchError

TIMEZONE = "America/Kentucky/Louisville"
FEED_URL = "http://gocards.com/calendar.ashx/calendar.rss"


@pytest.fixture
def april_config():
    """Calendar config covering April 2017."""
    return {
        "url": FEED_URL,
        "start": pendulum.datetime(2017, 4, 1, tz=TIMEZONE),
        "end": pendulum.datetime(2017, 4, 30, 23, 59, 59, tz=TIMEZONE),
        "sports": ["rowing", "baseball", "softball"],
    }


def _response(content):
    response = MagicMock()
    response.content = content
    response.status_code = 200
    response.ok = True
    return response


def test_create_rejects_invalid_config():
    """Test config errors are raised before any request."""
    with patch("core.calendar.sources.requests.get") as mock_get:
        with pytest.raises(ConfigError, match='"config" is not a dict'):
            calendar.create(None)

        with pytest.raises(ConfigError, match='"config.end"'):
            calendar.create({})

        with pytest.raises(ConfigError, match='"config.sports"'):
            calendar.create({"end": pendulum.now()})

        with pytest.raises(ConfigError, match='"config.start"'):
            calendar.create({"end": pendulum.now(), "sports": []})

        with pytest.raises(ConfigError, match='"config.url"'):
            calendar.create(
                {"end": pendulum.now(), "sports": [], "start": pendulum.now()}
            )

    mock_get.assert_not_called()


def test_create_returns_function():
    """Test a valid config returns the calendar function."""
    result = calendar.create(
        {
            "end": pendulum.now(),
            "sports": [],
            "start": pendulum.now(),
            "url": "",
        }
    )

    assert callable(result)


def test_calendar_renders_feed_into_template(april_config, calendar_rss):
    """Test the full pipeline from feed to spliced template."""
    with patch(
        "core.calendar.sources.requests.get",
        return_value=_response(calendar_rss),
    ):
        result = calendar.create(april_config)("Games\n\n{{ Calendar }}\n\nEnd")

    assert result == (
        "Games\n\n"
        "Sport|Home Team|Score|Visiting Team|Score|Time|TV\n"
        "-|-|-|-|-|-|-\n"
        "Women's Rowing|Double Dual (Indiana, Iowa, Kansas)||Louisville|7|Final|\n"
        "Baseball|[Louisville](#calendar/winner)|3|PITTSBURGH|0|Final|\n"
        "Softball|Louisville||NORTHERN IOWA||Final|"
        "\n\nEnd"
    )


def test_calendar_accepts_naive_window(april_config, calendar_rss):
    """Test naive start and end are taken as Louisville time."""
    with patch(
        "core.calendar.sources.requests.get",
        return_value=_response(calendar_rss),
    ):
        expected = calendar.create(april_config)("{{calendar}}")
        april_config["start"] = datetime(2017, 4, 1)
        april_config["end"] = datetime(2017, 4, 30, 23, 59, 59)
        result = calendar.create(april_config)("{{calendar}}")

    assert result == expected
    assert result.count("\n") == 4


def test_calendar_with_no_sports_renders_empty(april_config, calendar_rss):
    """Test an empty sport list renders the empty calendar token."""
    april_config["sports"] = []
    with patch(
        "core.calendar.sources.requests.get",
        return_value=_response(calendar_rss),
    ):
        result = calendar.create(april_config)("{{calendar}}")

    assert result == "[](#calendar/empty)"


def test_calendar_propagates_fetch_errors(april_config):
    """Test fetch failures abort the run."""
    with patch(
        "core.calendar.pipeline.request_games",
        side_effect=FetchError(FEED_URL, status_code=500),
    ):
        with pytest.raises(FetchError):
            calendar.create(april_config)("{{calendar}}")


def test_splice_into_template_replaces_every_placeholder():
    """Test all placeholders are replaced, ignoring case and spacing."""
    template = "{{calendar}} | {{ CALENDAR }} | {{  Calendar}}"

    assert splice_into_template(template, "X") == "X | X | X"


def test_splice_into_template_inserts_markdown_literally():
    """Test backslashes and group references are not interpreted."""
    markdown = r"a\1b\\c"

    assert splice_into_template("{{calendar}}", markdown) == markdown


def test_splice_into_template_custom_placeholder():
    """Test a custom placeholder pattern."""
    assert splice_into_template("<<games>>", "X", placeholder=r"<<games>>") == "X"


def test_splice_into_template_without_placeholder():
    """Test a template without placeholder is returned unchanged."""
    assert splice_into_template("No calendar", "X") == "No calendar"
