"""Game record built from one feed item."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class GameResult(str, Enum):
    """Single-letter outcome code written on a result line."""

    WIN = "W"
    LOSS = "L"
    TIE = "T"
    NO_DECISION = "N"


@dataclass(frozen=True)
class Game:
    """One game parsed from the schedule feed.

    Unset optional fields are None, never an empty string. Scores are
    strings because cross country and golf results are placements
    ("1st", "t-5th") rather than points.
    """

    sport: str | None = None
    gender: str | None = None
    opponent: str | None = None
    is_home: bool = False
    is_cancelled: bool = False
    start: datetime | None = None
    end: datetime | None = None
    location: str | None = None
    result: GameResult | None = None
    score: str | None = None
    opponent_score: str | None = None
    tv: str | None = None
    radio: str | None = None
    audio: str | None = None
    video: str | None = None
    tickets: str | None = None
    url: str | None = None
    game_id: str | None = None
    promo_name: str | None = None

    @property
    def is_displayable(self) -> bool:
        """Whether the game has the sport and opponent the table needs."""
        return bool(self.sport and self.opponent)
