"""Unit tests for configuration loading and validation."""

import pytest
from pydantic import ValidationError

from mlb_picks.config import get_config
from mlb_picks.config.settings import AppConfig
from mlb_picks.markets import Market
from mlb_picks.scoring.score import DEFAULT_WEIGHTS


def test_defaults():
    """Test configuration defaults with an empty environment."""
    config = AppConfig()

    assert config.env == "dev"
    assert config.log_level == "INFO"
    assert config.refresh_interval_seconds == 300
    assert config.score_curve_exponent == 0.6
    assert config.score_edge_scale == 6.0
    assert config.score_edge_cap == 0.25
    assert config.default_market is Market.H1
    assert config.default_limit == -1
    assert config.top_pick_threshold == 7.0
    assert config.value_badge_threshold == 0.01


def test_all_fields_from_env(monkeypatch):
    """Test every field can be set from the environment."""
    env = {
        "ENV": "prod",
        "LOG_LEVEL": "DEBUG",
        "API_BASE": "https://api.example.com",
        "REFRESH_INTERVAL_SECONDS": "600",
        "SCORE_CURVE_EXPONENT": "0.5",
        "SCORE_EDGE_SCALE": "4",
        "SCORE_EDGE_CAP": "0.2",
        "DEFAULT_MARKET": "HR",
        "DEFAULT_LIMIT": "50",
        "TOP_PICK_THRESHOLD": "8.5",
        "VALUE_BADGE_THRESHOLD": "0.02",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)

    config = AppConfig()

    assert config.env == "prod"
    assert config.log_level == "DEBUG"
    assert config.api_base == "https://api.example.com"
    assert config.refresh_interval_seconds == 600
    assert config.default_market is Market.HR
    assert config.default_limit == 50
    assert config.top_pick_threshold == 8.5
    assert config.value_badge_threshold == 0.02

    weights = config.score_weights()
    assert weights.curve_exponent == 0.5
    assert weights.edge_scale == 4.0
    assert weights.edge_cap == 0.2


def test_default_weights_match_score_constants():
    """Test configured weights equal the module defaults when unset."""
    assert AppConfig().score_weights() == DEFAULT_WEIGHTS


def test_invalid_env_value(monkeypatch):
    """Test that invalid ENV value raises validation error."""
    monkeypatch.setenv("ENV", "production")

    with pytest.raises(ValidationError) as exc_info:
        AppConfig()

    errors = exc_info.value.errors()
    assert any(
        error["loc"] == ("env",) and "literal_error" in error["type"]
        for error in errors
    )


@pytest.mark.parametrize("limit", ["0", "-5"])
def test_invalid_default_limit(monkeypatch, limit):
    """Test zero or below -1 limits are rejected."""
    monkeypatch.setenv("DEFAULT_LIMIT", limit)

    with pytest.raises(ValidationError) as exc_info:
        AppConfig()

    errors = exc_info.value.errors()
    assert any(error["loc"] == ("default_limit",) for error in errors)


def test_threshold_out_of_range(monkeypatch):
    """Test top-pick threshold must lie in the score range."""
    monkeypatch.setenv("TOP_PICK_THRESHOLD", "11")

    with pytest.raises(ValidationError):
        AppConfig()


def test_invalid_market(monkeypatch):
    """Test unknown default market is rejected."""
    monkeypatch.setenv("DEFAULT_MARKET", "RBI")

    with pytest.raises(ValidationError):
        AppConfig()


def test_get_config_singleton():
    """Test get_config returns the same instance."""
    assert get_config() is get_config()
