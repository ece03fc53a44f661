"""
Game card rendering.

Turns a single Game into the HTML fragment used on the schedule page. The
last completed game shows the score line, every other game shows opponent,
start time and venue. Locale and timezone come from the DisplayConfig that is
passed in, never from the process environment.
"""

import logging
from datetime import datetime
from typing import Optional, Tuple

from jinja2 import Environment

from .schedule_fetcher import Game
from .settings import DisplayConfig

logger = logging.getLogger(__name__)

AWAY_VENUE_FALLBACK = "Away Game"

jinja_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

GAME_CARD_TEMPLATE = jinja_env.from_string(
    """
                <div class="game-card{% if is_last_game %} last-game{% endif %}">
                    <div class="game-date">
                        <div class="month">{{ month }}</div>
                        <div class="day">{{ day }}</div>
                    </div>
                    <div class="game-info">
                    {% if score %}
                        <div class="score{% if score.css_class %} {{ score.css_class }}{% endif %}" data-result="{{ score.result }}">
                            <img src="{{ score.team_logo }}" alt="{{ team_abbrev }} Logo"> {{ team_abbrev }} {{ score.team_score }} {{ vs_at }} {{ opponent.abbrev }} {{ score.opponent_score }} <img src="{{ score.opponent_logo }}" alt="Opponent Logo">
                        </div>
                    {% else %}
                        <div class="opponent">{{ vs_at }} {{ opponent.display_name }}</div>
                        {% if start_time %}
                        <div class="game-time">{{ start_time }} {{ timezone_label }}</div>
                        {% endif %}
                        <div class="venue">{{ venue }}</div>
                    {% endif %}
                    </div>
                </div>
"""
)


def format_time(moment: datetime) -> str:
    """en-US hour and minute, e.g. ``7:00 PM``."""
    return moment.strftime("%I:%M %p").lstrip("0")


def format_timestamp(moment: datetime) -> str:
    """en-US date and time, e.g. ``10/17/2026, 7:05:03 PM``."""
    return f"{moment.month}/{moment.day}/{moment.year}, " + moment.strftime("%I:%M:%S %p").lstrip("0")


def is_home_game(game: Game, config: DisplayConfig) -> bool:
    return game.home_team.abbrev == config.team_abbrev


def result_for(game: Game, config: DisplayConfig) -> Tuple[str, Optional[str]]:
    """Return the (label, css class) for a completed game.

    Ties get the ``T`` label but no class; only wins and losses are styled.
    """
    home = is_home_game(game, config)
    team_score = game.home_team.score if home else game.away_team.score
    opponent_score = game.away_team.score if home else game.home_team.score

    if team_score > opponent_score:
        return "W", "win"
    if team_score < opponent_score:
        return "L", "loss"
    return "T", None


def format_game(game: Game, is_last_game: bool = False, config: Optional[DisplayConfig] = None) -> str:
    config = config or DisplayConfig.from_settings()
    home = is_home_game(game, config)
    team = game.home_team if home else game.away_team
    opponent = game.away_team if home else game.home_team
    # A bare calendar date is already the local game day; no start time is known
    calendar_only = game.start_time_utc is None and game.date_only
    local_start = game.game_date if calendar_only else game.start_time.astimezone(config.tzinfo)

    score = None
    start_time = None
    venue = None
    if is_last_game and game.home_team.score is not None and game.away_team.score is not None:
        result, css_class = result_for(game, config)
        score = {
            "team_score": team.score,
            "opponent_score": opponent.score,
            "team_logo": team.logo,
            "opponent_logo": opponent.logo,
            "result": result,
            "css_class": css_class,
        }
    else:
        if not is_last_game and not calendar_only:
            start_time = format_time(local_start)
        if home:
            venue = config.home_venue
        else:
            venue = opponent.place_name or AWAY_VENUE_FALLBACK
        if not (opponent.common_name or opponent.name):
            logger.debug("No name for opponent %s in game %s", opponent.abbrev, game.game_id)

    return GAME_CARD_TEMPLATE.render(
        is_last_game=is_last_game,
        month=local_start.strftime("%b"),
        day=local_start.day,
        team_abbrev=config.team_abbrev,
        vs_at="vs" if home else "@",
        opponent=opponent,
        score=score,
        start_time=start_time,
        timezone_label=config.timezone_label,
        venue=venue,
    )
