from __future__ import annotations

import pytest

from schedule_board.settings import DisplayConfig


@pytest.fixture
def config() -> DisplayConfig:
    return DisplayConfig(
        team_abbrev="NYR",
        team_name="New York Rangers",
        home_venue="Madison Square Garden",
        api_url="https://api-web.nhle.com/v1/club-schedule-season/NYR/now",
        timezone="America/New_York",
        timezone_label="ET",
        season="2025-26",
        upcoming_limit=6,
        output_path="index.html",
    )
