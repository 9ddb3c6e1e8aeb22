"""Abstract row source and canonical row schemas."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date

from mlb_picks.markets import Market


# Canonical row schemas
@dataclass(frozen=True)
class MarketFields:
    """Per-market values carried by an input row.

    Every field may be absent; None never means zero.
    """

    model_prob: float | None = None  # 0.0-1.0
    market_odds: int | None = None  # American, |odds| >= 100 when valid
    fair_odds: int | None = None  # American equivalent of model_prob
    edge: float | None = None  # Pre-supplied by the backend
    score: float | None = None  # Pre-supplied by the backend
    market_prob: float | None = None  # Pre-supplied by the backend


@dataclass(frozen=True)
class PlayerMarketRow:
    """Canonical player row for one game date."""

    player_id: int | None = None
    player_name: str = ""
    team: str = ""
    lineup_spot: int | None = None  # 1-9; None = not starting
    game_date: date | None = None
    recent_pa: int | None = None  # Plate appearances in trailing window
    hr_prob_pa: float | None = None  # Per-PA home run rate
    hit_prob_pa: float | None = None  # Per-PA hit rate
    markets: dict[Market, MarketFields] = field(default_factory=dict)
    schema_version: str | None = None  # 'v2' | 'v1' | None if no probabilities

    def fields_for(self, market: Market) -> MarketFields:
        """Get the market fields, empty if the row carries none."""
        return self.markets.get(market, MarketFields())

    @property
    def is_starter(self) -> bool:
        """True if the player has a positive lineup slot."""
        return self.lineup_spot is not None and self.lineup_spot > 0


# Abstract base classes
class RowSource(ABC):
    """Abstract provider of raw player rows for a game date.

    Concrete transports (HTTP, cache, auth) live outside this package; the
    engine only consumes the returned mappings.
    """

    @abstractmethod
    def fetch_rows(self, game_date: date | None = None) -> list[dict]:
        """
        Fetch raw rows for a game date.

        Args:
            game_date: Slate date; None returns every available row

        Returns:
            List of raw row mappings (possibly empty)
        """
        pass
