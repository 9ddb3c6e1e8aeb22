"""Derived per-market metrics for resolved rows."""

from dataclasses import asdict, dataclass, field
from typing import Any

from mlb_picks.ingestion.base import MarketFields, PlayerMarketRow
from mlb_picks.markets import Market
from mlb_picks.odds.convert import implied_probability, probability_to_american
from mlb_picks.odds.edge import edge
from mlb_picks.scoring.score import DEFAULT_WEIGHTS, ScoreWeights, score


@dataclass(frozen=True)
class DerivedMetrics:
    """Computed values for one row and one market."""

    implied_prob: float | None  # None without valid market odds
    edge: float | None  # Raw, unclamped; None unless both operands exist
    score: float  # Always present, 1.0-10.0
    fair_odds: int | None  # Supplied fair odds, else derived from model_prob


@dataclass(frozen=True)
class EvaluatedRow:
    """A resolved row annotated with metrics for every market."""

    row: PlayerMarketRow
    metrics: dict[Market, DerivedMetrics] = field(default_factory=dict)

    def metrics_for(self, market: Market) -> DerivedMetrics:
        return self.metrics[market]

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view keyed by market code."""
        row = self.row
        return {
            "player_id": row.player_id,
            "player_name": row.player_name,
            "team": row.team,
            "lineup_spot": row.lineup_spot,
            "game_date": row.game_date.isoformat() if row.game_date else None,
            "recent_pa": row.recent_pa,
            "hr_prob_pa": row.hr_prob_pa,
            "hit_prob_pa": row.hit_prob_pa,
            "schema_version": row.schema_version,
            "markets": {
                market.value: {
                    "model_prob": row.fields_for(market).model_prob,
                    "market_odds": row.fields_for(market).market_odds,
                    **asdict(metrics),
                }
                for market, metrics in self.metrics.items()
            },
        }


def derive_metrics(
    fields: MarketFields,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> DerivedMetrics:
    """Compute implied probability, edge, score and fair odds for one market."""
    implied = implied_probability(fields.market_odds)
    fair_odds = fields.fair_odds
    if fair_odds is None:
        fair_odds = probability_to_american(fields.model_prob)

    return DerivedMetrics(
        implied_prob=implied,
        edge=edge(fields.model_prob, implied),
        score=score(fields.model_prob, fields.market_odds, weights),
        fair_odds=fair_odds,
    )


def evaluate_row(
    row: PlayerMarketRow,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> EvaluatedRow:
    """Annotate a row with derived metrics for all three markets."""
    return EvaluatedRow(
        row=row,
        metrics={market: derive_metrics(row.fields_for(market), weights) for market in Market},
    )


def evaluate_rows(
    rows: list[PlayerMarketRow],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> list[EvaluatedRow]:
    """Evaluate a batch of rows."""
    return [evaluate_row(row, weights) for row in rows]
