"""Pick scoring and derived per-market metrics."""

from mlb_picks.scoring.metrics import (
    DerivedMetrics,
    EvaluatedRow,
    derive_metrics,
    evaluate_row,
    evaluate_rows,
)
from mlb_picks.scoring.score import DEFAULT_WEIGHTS, ScoreWeights, score

__all__ = [
    "score",
    "ScoreWeights",
    "DEFAULT_WEIGHTS",
    "DerivedMetrics",
    "EvaluatedRow",
    "derive_metrics",
    "evaluate_row",
    "evaluate_rows",
]
