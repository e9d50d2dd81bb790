"""Markdown formatters for the sidebar calendar."""

import logging
import re
from datetime import datetime

import pendulum

from config.constants import (
    EMPTY_CALENDAR,
    FINAL_LABEL,
    GENDER_ABBREVIATIONS,
    HOME_TEAM,
    SPORT_ABBREVIATIONS,
    TABLE_ALIGNMENT,
    TABLE_HEADER,
    TIMEZONE,
    TV_NETWORKS,
    WINNER_ANCHOR,
)
from core.calendar.models import Game, GameResult
from core.utils.date_parser import ensure_timezone, format_game_time

logger = logging.getLogger(__name__)

TV_NETWORKS_REGEX = re.compile(
    "|".join(re.escape(network) for network, _ in TV_NETWORKS)
)
TV_ICONS = dict(TV_NETWORKS)


def format_tv_for_display(tv: str | None) -> str:
    """Replace network names with subreddit icon links.

    "ESPN/ACC Network" becomes "[](#i/espn) [](#i/acc-network)". Each
    network is replaced at its first occurrence only, and the text
    inserted for one network is never matched again.

    Args:
        tv: Raw TV coverage string from the feed.

    Returns:
        Lower-cased coverage string with icon links, or "" if absent.
    """
    if not tv:
        return ""

    seen = set()

    def replace(match: re.Match) -> str:
        network = match.group(0)
        if network in seen:
            return network
        seen.add(network)
        return TV_ICONS[network]

    return TV_NETWORKS_REGEX.sub(replace, tv.lower().replace("/", " "))


def format_sport_for_display(
    sport: str | None, gender: str | None = None, abbreviate: bool = False
) -> str:
    """Format the sport column, e.g. "Men's Basketball" or "MBB".

    Args:
        sport: Sport name.
        gender: Optional gender qualifier.
        abbreviate: Use compact sport codes instead of full names.

    Returns:
        Display name for the sport, "" if no sport.
    """
    if not isinstance(sport, str):
        return ""

    if not abbreviate:
        return f"{gender} {sport}" if gender else sport

    display = SPORT_ABBREVIATIONS.get(sport.lower(), sport)
    if isinstance(gender, str):
        display = GENDER_ABBREVIATIONS.get(gender.lower(), "") + display
    return display


def _is_finished(game: Game, now: datetime) -> bool:
    return game.end is not None and game.end < now


def _format_game_row(game: Game, now: datetime, abbreviate: bool) -> str:
    home = HOME_TEAM
    if game.result == GameResult.WIN:
        home = f"[{HOME_TEAM}]({WINNER_ANCHOR})"

    opponent = game.opponent
    if game.result == GameResult.LOSS:
        opponent = f"[{game.opponent}]({WINNER_ANCHOR})"

    if _is_finished(game, now):
        time, tv = FINAL_LABEL, ""
    else:
        time = format_game_time(game.start) if game.start else ""
        tv = format_tv_for_display(game.tv)

    cells = [
        format_sport_for_display(game.sport, game.gender, abbreviate),
        home if game.is_home else opponent,
        game.score if game.is_home else game.opponent_score,
        opponent if game.is_home else home,
        game.opponent_score if game.is_home else game.score,
        time,
        tv,
    ]
    return "|".join(cell or "" for cell in cells)


def format_games_for_display(
    games: list[Game],
    now: datetime | None = None,
    abbreviate_sports: bool = False,
) -> str:
    """Render games as the sidebar markdown table.

    Games without a sport or opponent are skipped. Games that already
    ended show "Final" and no TV coverage.

    Args:
        games: Games in display order.
        now: Reference time for finished games (default: now).
        abbreviate_sports: Show compact sport codes.

    Returns:
        Markdown table, or the empty calendar token for no games.
    """
    if not games:
        return EMPTY_CALENDAR

    now = pendulum.now(TIMEZONE) if now is None else ensure_timezone(now)

    lines = [TABLE_HEADER, TABLE_ALIGNMENT]
    for game in games:
        if not game.is_displayable:
            logger.debug(f"Skipping incomplete game {game.game_id}")
            continue
        lines.append(_format_game_row(game, now, abbreviate_sports))

    logger.info(f"Formatted {len(lines) - 2} games for display")
    return "\n".join(lines)
