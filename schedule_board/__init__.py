"""
Core package for the team schedule board.

Fetches a team's season schedule from the NHL web API and renders the
static schedule page, so a scheduled job can keep the page up to date.
"""

from .page import generate_html, render_page
from .renderer import format_game
from .schedule_fetcher import Game, ScheduleFetcher, ScheduleSnapshot, TeamInfo, build_snapshot
from .settings import DisplayConfig

__all__ = [
    "DisplayConfig",
    "Game",
    "ScheduleFetcher",
    "ScheduleSnapshot",
    "TeamInfo",
    "build_snapshot",
    "format_game",
    "generate_html",
    "render_page",
]
