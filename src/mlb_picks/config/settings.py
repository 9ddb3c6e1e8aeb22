"""Application configuration schema and validation."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mlb_picks.markets import Market
from mlb_picks.scoring.score import (
    SCORE_CURVE_EXPONENT,
    SCORE_EDGE_CAP,
    SCORE_EDGE_SCALE,
    ScoreWeights,
)


class AppConfig(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    env: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        description="Application environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    api_base: str = Field(
        default="",
        description="Base URL of the markets endpoint (used by the transport layer)",
    )
    refresh_interval_seconds: int = Field(
        default=300,
        ge=30,
        le=3600,
        description="How often the transport layer refreshes rows",
    )
    score_curve_exponent: float = Field(
        default=SCORE_CURVE_EXPONENT,
        gt=0.0,
        le=1.0,
        description="Exponent applied to model probability in the score curve",
    )
    score_edge_scale: float = Field(
        default=SCORE_EDGE_SCALE,
        ge=0.0,
        le=20.0,
        description="Score points per unit of capped edge",
    )
    score_edge_cap: float = Field(
        default=SCORE_EDGE_CAP,
        ge=0.0,
        le=1.0,
        description="Absolute cap applied to edge before scoring",
    )
    default_market: Market = Field(
        default=Market.H1,
        description="Market selected when none is given",
    )
    default_limit: int = Field(
        default=-1,
        ge=-1,
        description="Rows shown after ranking (-1 = all)",
    )
    top_pick_threshold: float = Field(
        default=7.0,
        ge=1.0,
        le=10.0,
        description="Minimum score in any market for the top-picks filter",
    )
    value_badge_threshold: float = Field(
        default=0.01,
        ge=0.0,
        le=0.25,
        description="Edge magnitude at which a value badge is shown",
    )

    @field_validator("default_limit")
    @classmethod
    def validate_default_limit(cls, v: int) -> int:
        """Reject a zero limit; -1 is the 'all' sentinel."""
        if v == 0:
            raise ValueError("default_limit must be positive or -1 for all rows")
        return v

    def score_weights(self) -> ScoreWeights:
        """Build scoring weights from the configured constants."""
        return ScoreWeights(
            curve_exponent=self.score_curve_exponent,
            edge_scale=self.score_edge_scale,
            edge_cap=self.score_edge_cap,
        )


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create the singleton AppConfig instance."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config
