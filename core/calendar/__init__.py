"""Calendar module - Turns the game schedule feed into sidebar markdown.

- Fetching and decoding the RSS feed
- Filtering items by sport and date window
- Parsing item descriptions into Game records
- Rendering the markdown table and splicing it into the wiki template
"""

from core.calendar.filters import filter_by_date_range, filter_by_sports
from core.calendar.formatter import (
    format_games_for_display,
    format_tv_for_display,
)
from core.calendar.models import Game, GameResult
from core.calendar.parser import (
    GAME_BASICS_REGEX,
    GAME_RESULT_REGEX,
    parse_item,
    parse_item_description,
)
from core.calendar.pipeline import create, splice_into_template
from core.calendar.sources import request_games

__all__ = [
    "create",
    "splice_into_template",
    "request_games",
    "filter_by_sports",
    "filter_by_date_range",
    "parse_item_description",
    "parse_item",
    "format_games_for_display",
    "format_tv_for_display",
    "Game",
    "GameResult",
    "GAME_BASICS_REGEX",
    "GAME_RESULT_REGEX",
]
