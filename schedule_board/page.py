import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from markupsafe import Markup

from .renderer import format_game, format_timestamp, jinja_env
from .schedule_fetcher import ScheduleFetcher, ScheduleSnapshot
from .settings import DisplayConfig

logger = logging.getLogger(__name__)


PAGE_TEMPLATE = jinja_env.from_string(
    """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ team_name }} Schedule</title>
    <style>
        body {
            margin: 0;
            padding: 0;
            font-family: Arial, sans-serif;
        }
        #schedule-container {
            width: 800px;
            height: 480px;
            background: linear-gradient(135deg, #0033A0 0%, #CE1126 100%);
            position: relative;
            overflow: hidden;
        }
        .header {
            background: rgba(0, 0, 0, 0.8);
            padding: 15px 20px;
            text-align: center;
        }
        .logo {
            color: white;
            font-size: 28px;
            font-weight: bold;
            text-transform: uppercase;
            letter-spacing: 3px;
            text-shadow: 2px 2px 4px rgba(0, 0, 0, 0.5);
        }
        .subtitle {
            color: #ffffff;
            font-size: 12px;
            margin-top: 5px;
            font-weight: 300;
        }
        .content-wrapper {
            padding: 15px 20px;
            height: 370px;
            overflow-y: auto;
        }
        .last-game {
            background: #FFF !important;
            border-left: 4px solid #FFD700 !important;
            margin-bottom: 12px;
        }
        .section-title {
            color: white;
            font-size: 14px;
            font-weight: bold;
            margin: 15px 0 10px 0;
            text-shadow: 1px 1px 2px rgba(0, 0, 0, 0.5);
        }
        .games-grid {
            display: grid;
            grid-template-columns: repeat(2, 1fr);
            gap: 10px;
        }
        .game-card {
            background: #fff;
            border-radius: 8px;
            padding: 10px;
            display: flex;
            justify-content: space-between;
            align-items: center;
            transition: transform 0.2s;
            border-left: 4px solid #CE1126;
        }
        .game-card:hover {
            transform: translateX(5px);
        }
        .game-date {
            display: flex;
            flex-direction: column;
            align-items: center;
            min-width: 55px;
        }
        .month {
            font-size: 12px;
            color: #0033A0;
            font-weight: bold;
            text-transform: uppercase;
        }
        .day {
            font-size: 22px;
            font-weight: bold;
            color: #CE1126;
            line-height: 1;
        }
        .game-info {
            flex: 1;
            margin-left: 12px;
        }
        .opponent {
            font-size: 14px;
            font-weight: bold;
            color: #0033A0;
            margin-bottom: 2px;
        }
        .game-time {
            font-size: 10px;
            color: #666;
        }
        .venue {
            font-size: 9px;
            color: #999;
            margin-top: 2px;
        }
        .score {
            display: flex;
            flex-direction: row;
            align-items: center;
            font-size: 22px;
            font-weight: bold;
            margin-top: 4px;
        }
        .score img {
            vertical-align: middle;
            height: 30px;
        }
        .score.win {
            color: #00AA00;
        }
        .score.loss {
            color: #CC0000;
        }
        .update-time {
            position: absolute;
            bottom: 8px;
            right: 12px;
            font-size: 9px;
            color: rgba(255, 255, 255, 0.6);
        }
    </style>
</head>
<body>
    <div id="schedule-container">
        <div class="header">
            <div class="logo">{{ team_name }}</div>
            <div class="subtitle">Schedule &bull; {{ season }} Season</div>
        </div>
        <div class="content-wrapper">
            {% if last_game_html %}
            <div class="section-title">Last Game</div>
            {{ last_game_html }}
            {% endif %}
            <div class="section-title">Upcoming Games</div>
            <div class="games-grid">
                {{ upcoming_games_html }}
            </div>
        </div>
        <div class="update-time">Updated: {{ updated }} {{ timezone_label }}</div>
    </div>
</body>
</html>
"""
)


def season_label(now: datetime) -> str:
    """Season label like ``2025-26``. The new season starts in July."""
    start_year = now.year if now.month >= 7 else now.year - 1
    return f"{start_year}-{(start_year + 1) % 100:02d}"


def render_page(
    snapshot: ScheduleSnapshot,
    config: Optional[DisplayConfig] = None,
    now: Optional[datetime] = None,
) -> str:
    """Build the full HTML document for a snapshot."""
    config = config or DisplayConfig.from_settings()
    local_now = (now or datetime.now(timezone.utc)).astimezone(config.tzinfo)

    last_game_html = ""
    if snapshot.last_game:
        last_game_html = format_game(snapshot.last_game, True, config)
    upcoming_games_html = "".join(format_game(game, False, config) for game in snapshot.upcoming_games)

    # Card fragments are already escaped by their own template
    return PAGE_TEMPLATE.render(
        team_name=config.team_name,
        season=config.season or season_label(local_now),
        last_game_html=Markup(last_game_html),
        upcoming_games_html=Markup(upcoming_games_html),
        updated=format_timestamp(local_now),
        timezone_label=config.timezone_label,
    )


def generate_html(
    fetcher: Optional[ScheduleFetcher] = None,
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[DisplayConfig] = None,
    now: Optional[datetime] = None,
) -> Optional[ScheduleSnapshot]:
    """Fetch the schedule and overwrite the output page.

    Leaves any existing page untouched when the fetch fails. Returns the
    snapshot that was rendered, or None.
    """
    config = config or DisplayConfig.from_settings()
    fetcher = fetcher or ScheduleFetcher(config)

    snapshot = fetcher.fetch_schedule()
    if not snapshot:
        logger.error("Failed to fetch schedule data")
        return None

    html = render_page(snapshot, config, now)
    path = Path(output_path or config.output_path)
    path.write_text(html, encoding="utf-8")

    logger.info("Schedule updated successfully!")
    return snapshot
