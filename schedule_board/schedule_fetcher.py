import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

import requests

from .settings import DisplayConfig

logger = logging.getLogger(__name__)

COMPLETED_STATES = {"OFF", "FINAL"}
UPCOMING_STATES = {"FUT", "PRE"}


def parse_timestamp(value: str) -> datetime:
    """Parse an API timestamp. Date-only and naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _localized(raw: Dict, key: str) -> Optional[str]:
    # Names come as {"default": "Bruins", "fr": "..."}
    value = raw.get(key)
    if isinstance(value, dict):
        return value.get("default")
    return value


@dataclass
class TeamInfo:
    abbrev: str
    common_name: Optional[str] = None
    name: Optional[str] = None
    place_name: Optional[str] = None
    logo: str = ""
    score: Optional[int] = None

    @property
    def display_name(self) -> str:
        return self.common_name or self.name or self.abbrev

    @classmethod
    def from_api(cls, raw: Dict) -> "TeamInfo":
        score = raw.get("score")
        return cls(
            abbrev=raw["abbrev"],
            common_name=_localized(raw, "commonName"),
            name=_localized(raw, "name"),
            place_name=_localized(raw, "placeName"),
            logo=raw.get("logo") or "",
            score=int(score) if score is not None else None,
        )


@dataclass
class Game:
    game_id: Optional[int]
    game_date: datetime
    game_state: str
    home_team: TeamInfo
    away_team: TeamInfo
    start_time_utc: Optional[datetime] = None
    date_only: bool = False

    @property
    def start_time(self) -> datetime:
        return self.start_time_utc or self.game_date

    @property
    def is_completed(self) -> bool:
        return self.game_state in COMPLETED_STATES

    @property
    def is_upcoming(self) -> bool:
        return self.game_state in UPCOMING_STATES

    @classmethod
    def from_api(cls, raw: Dict) -> "Game":
        start = raw.get("startTimeUTC")
        return cls(
            game_id=raw.get("id"),
            game_date=parse_timestamp(raw["gameDate"]),
            game_state=raw["gameState"],
            home_team=TeamInfo.from_api(raw["homeTeam"]),
            away_team=TeamInfo.from_api(raw["awayTeam"]),
            start_time_utc=parse_timestamp(start) if start else None,
            date_only="T" not in raw["gameDate"],
        )

    def as_dict(self) -> Dict:
        return {
            "game_id": self.game_id,
            "game_date": self.game_date.isoformat(),
            "start_time": self.start_time.isoformat(),
            "game_state": self.game_state,
            "home_team": self.home_team.abbrev,
            "away_team": self.away_team.abbrev,
            "home_score": self.home_team.score,
            "away_score": self.away_team.score,
        }


@dataclass
class ScheduleSnapshot:
    last_game: Optional[Game]
    upcoming_games: List[Game]
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def as_dict(self) -> Dict:
        return {
            "last_game": self.last_game.as_dict() if self.last_game else None,
            "upcoming_games": [game.as_dict() for game in self.upcoming_games],
            "generated_at": self.generated_at.isoformat(),
        }


def build_snapshot(games: List[Game], limit: int = 6) -> ScheduleSnapshot:
    """Pick the most recent completed game and the next `limit` upcoming games."""
    completed = [game for game in games if game.is_completed]
    last_game = None
    if completed:
        last_game = max(completed, key=lambda game: (game.game_date, game.start_time))

    upcoming = [game for game in games if game.is_upcoming][:limit]
    return ScheduleSnapshot(last_game=last_game, upcoming_games=upcoming)


class ScheduleFetcher:
    """Pulls the tracked team's season schedule from the NHL web API."""

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig.from_settings()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    def fetch_schedule(self) -> Optional[ScheduleSnapshot]:
        """Return the current snapshot, or None when the API can't be read."""
        try:
            data = self._get_schedule_payload()
            games = [Game.from_api(raw) for raw in data["games"]]
        except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.exception("Error fetching schedule: %s", exc)
            return None

        snapshot = build_snapshot(games, limit=self.config.upcoming_limit)
        logger.info(
            "Fetched %d games (last game: %s, upcoming: %d)",
            len(games),
            snapshot.last_game.game_id if snapshot.last_game else None,
            len(snapshot.upcoming_games),
        )
        return snapshot

    # ------------------------------------------------------------------ #
    # NHL API helpers
    # ------------------------------------------------------------------ #
    def _get_schedule_payload(self) -> Dict:
        response = requests.get(self.config.api_url, timeout=self.config.request_timeout)
        response.raise_for_status()
        return response.json()
