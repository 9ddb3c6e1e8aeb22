"""Environment-driven application settings."""

from mlb_picks.config.settings import AppConfig, get_config

__all__ = ["AppConfig", "get_config"]
