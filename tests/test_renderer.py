from __future__ import annotations

from datetime import datetime, timezone

from schedule_board.renderer import format_game, format_time, format_timestamp, result_for
from schedule_board.schedule_fetcher import Game

from .factories import make_game, make_team


def _completed(nyr_score: int, opp_score: int, *, nyr_home: bool = True) -> Game:
    nyr = make_team("NYR", common_name="Rangers", score=nyr_score)
    opp = make_team("BOS", common_name="Bruins", place_name="Boston", score=opp_score)
    home, away = (nyr, opp) if nyr_home else (opp, nyr)
    return Game.from_api(make_game(1, "2025-10-09", "OFF", home=home, away=away, start="2025-10-09T23:00:00Z"))


def _upcoming(*, nyr_home: bool, opponent: dict | None = None, start: str = "2025-10-09T23:00:00Z") -> Game:
    nyr = make_team("NYR", common_name="Rangers", place_name="New York")
    opp = opponent or make_team("MTL", common_name="Canadiens", place_name="Montréal")
    home, away = (nyr, opp) if nyr_home else (opp, nyr)
    return Game.from_api(make_game(2, start[:10], "FUT", home=home, away=away, start=start))


def test_win_is_tagged(config):
    html = format_game(_completed(4, 2), True, config)

    assert 'class="score win"' in html
    assert 'data-result="W"' in html
    assert "NYR 4 vs BOS 2" in html
    assert 'class="game-card last-game"' in html


def test_loss_is_tagged_for_away_game(config):
    html = format_game(_completed(1, 3, nyr_home=False), True, config)

    assert 'class="score loss"' in html
    assert 'data-result="L"' in html
    assert "NYR 1 @ BOS 3" in html


def test_tie_has_label_but_no_style(config):
    game = _completed(2, 2)
    html = format_game(game, True, config)

    assert result_for(game, config) == ("T", None)
    assert 'class="score"' in html
    assert 'data-result="T"' in html
    assert "score win" not in html
    assert "score loss" not in html


def test_last_game_shows_both_logos(config):
    html = format_game(_completed(5, 0, nyr_home=False), True, config)

    assert '<img src="https://assets.nhle.com/logos/nhl/svg/NYR_light.svg" alt="NYR Logo">' in html
    assert '<img src="https://assets.nhle.com/logos/nhl/svg/BOS_light.svg" alt="Opponent Logo">' in html


def test_last_game_without_score_omits_time(config):
    game = _upcoming(nyr_home=True)
    html = format_game(game, True, config)

    assert 'class="game-time"' not in html
    assert 'class="score' not in html
    assert '<div class="opponent">vs Canadiens</div>' in html


def test_home_upcoming_game_uses_vs_and_home_venue(config):
    html = format_game(_upcoming(nyr_home=True), False, config)

    assert '<div class="opponent">vs Canadiens</div>' in html
    assert '<div class="venue">Madison Square Garden</div>' in html
    assert '<div class="game-time">7:00 PM ET</div>' in html
    assert 'class="game-card"' in html


def test_away_upcoming_game_uses_at_and_place_name(config):
    html = format_game(_upcoming(nyr_home=False), False, config)

    assert '<div class="opponent">@ Canadiens</div>' in html
    assert '<div class="venue">Montréal</div>' in html


def test_away_game_without_place_name_falls_back(config):
    opponent = make_team("SEA", name="Seattle Kraken")
    html = format_game(_upcoming(nyr_home=False, opponent=opponent), False, config)

    assert '<div class="opponent">@ Seattle Kraken</div>' in html
    assert '<div class="venue">Away Game</div>' in html


def test_opponent_without_names_uses_abbrev(config):
    html = format_game(_upcoming(nyr_home=True, opponent=make_team("UTA")), False, config)

    assert '<div class="opponent">vs UTA</div>' in html


def test_date_and_time_use_display_timezone(config):
    # 02:30 UTC on the 10th is 10:30 PM Eastern on the 9th
    html = format_game(_upcoming(nyr_home=True, start="2025-10-10T02:30:00Z"), False, config)

    assert '<div class="month">Oct</div>' in html
    assert '<div class="day">9</div>' in html
    assert '<div class="game-time">10:30 PM ET</div>' in html


def test_names_are_escaped(config):
    opponent = make_team("XYZ", common_name="<Sharks & Co>")
    html = format_game(_upcoming(nyr_home=True, opponent=opponent), False, config)

    assert "vs &lt;Sharks &amp; Co&gt;" in html


def test_rendering_is_deterministic(config):
    game = _completed(3, 1)

    assert format_game(game, True, config) == format_game(game, True, config)


def test_format_helpers():
    assert format_time(datetime(2025, 10, 9, 0, 5)) == "12:05 AM"
    assert format_time(datetime(2025, 10, 9, 12, 30)) == "12:30 PM"
    assert format_timestamp(datetime(2025, 3, 7, 19, 5, 3, tzinfo=timezone.utc)) == "3/7/2025, 7:05:03 PM"


def test_date_only_game_keeps_calendar_day(config):
    game = Game.from_api(make_game(2, "2025-10-09", "FUT"))

    html = format_game(game, False, config)

    assert '<div class="month">Oct</div>' in html
    assert '<div class="day">9</div>' in html
    assert 'class="game-time"' not in html


def test_null_logo_does_not_render_none(config):
    opponent = make_team("BOS", common_name="Bruins", score=2)
    opponent["logo"] = None
    nyr = make_team("NYR", common_name="Rangers", score=3)
    game = Game.from_api(make_game(1, "2025-10-09", "OFF", home=nyr, away=opponent, start="2025-10-09T23:00:00Z"))

    html = format_game(game, True, config)

    assert 'src="None"' not in html
    assert '<img src="" alt="Opponent Logo">' in html
