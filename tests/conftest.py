"""Pytest configuration and shared row fixtures."""

import pytest

from mlb_picks.config import settings


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Drop the cached AppConfig so each test sees its own environment."""
    for var in (
        "ENV",
        "LOG_LEVEL",
        "API_BASE",
        "REFRESH_INTERVAL_SECONDS",
        "SCORE_CURVE_EXPONENT",
        "SCORE_EDGE_SCALE",
        "SCORE_EDGE_CAP",
        "DEFAULT_MARKET",
        "DEFAULT_LIMIT",
        "TOP_PICK_THRESHOLD",
        "VALUE_BADGE_THRESHOLD",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(settings, "_config", None)
    yield
    monkeypatch.setattr(settings, "_config", None)


@pytest.fixture
def current_row() -> dict:
    """A row in the current backend schema."""
    return {
        "date": "2026-06-01",
        "playerId": 592450,
        "playerName": "Aaron Judge",
        "team": "NYY",
        "lineupSpot": 2,
        "hr_prob_pa_model": 0.071,
        "hit_prob_pa_model": 0.262,
        "hr_anytime_prob": 0.31,
        "hits_1plus_prob": 0.68,
        "hits_2plus_prob": 0.27,
        "fair_hr_american": 223,
        "fair_h1_american": -213,
        "fair_h2_american": 270,
        "hr_market_odds": 200,
        "h1_market_odds": -250,
        "h2_market_odds": None,
        "hr_market_prob": 0.3333,
        "h1_market_prob": 0.7143,
        "h2_market_prob": None,
        "hr_edge": -0.0233,
        "h1_edge": -0.0343,
        "h2_edge": None,
        "hr_score": 5.3,
        "h1_score": 7.0,
        "h2_score": 4.6,
        "recent_pa": 112,
    }


@pytest.fixture
def legacy_row() -> dict:
    """A row using legacy, market-agnostic field names."""
    return {
        "game_date": "2026-06-01",
        "player_id": 665742,
        "player_name": "Juan Soto",
        "team_abbr": "NYM",
        "batting_order": "3",
        "hr_prob": 0.22,
        "h1_prob": 0.64,
        "h2_prob": 0.24,
        "hr_odds": "+260",
        "h1_odds": -190,
        "pa_30d": 118,
    }


@pytest.fixture
def slate() -> list[dict]:
    """A small slate in mixed schemas."""
    return [
        {"playerName": "Alpha Batter", "team": "LAD", "lineupSpot": 1,
         "hr_anytime_prob": 0.18, "hits_1plus_prob": 0.70, "hits_2plus_prob": 0.30,
         "hr_market_odds": 400, "h1_market_odds": -300, "recent_pa": 120},
        {"playerName": "Bravo Hitter", "team": "SD", "lineupSpot": None,
         "hr_anytime_prob": 0.08, "hits_1plus_prob": 0.52, "hits_2plus_prob": 0.15,
         "recent_pa": 40},
        {"playerName": "Charlie Slugger", "team": "LAD", "lineupSpot": 4,
         "hr_anytime_prob": 0.29, "hits_1plus_prob": 0.61, "hits_2plus_prob": 0.22,
         "hr_market_odds": 250, "h1_market_odds": -160, "recent_pa": 115},
        {"player_name": "Delta Legacy", "team": "SF", "lineup_spot": 7,
         "hr_prob": 0.11, "h1_prob": 0.58, "h2_prob": 0.18, "h1_odds": 50},
    ]
