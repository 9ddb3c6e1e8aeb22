"""Bounded 1.0-10.0 pick score blending model probability and market edge.

    raw   = 1 + 8 * p ** 0.6 + 6 * clamp(p - implied, -0.25, 0.25)
    score = clamp(raw, 1.0, 10.0)

The edge term is dropped when the market odds do not convert. The constants
are empirical and kept as named, overridable values.
"""

from dataclasses import dataclass

from mlb_picks.odds.convert import implied_probability
from mlb_picks.odds.edge import EDGE_CAP, capped_edge

SCORE_MIN = 1.0
SCORE_MAX = 10.0
SCORE_CURVE_EXPONENT = 0.6
SCORE_BASE_SCALE = 8.0
SCORE_EDGE_SCALE = 6.0
SCORE_EDGE_CAP = EDGE_CAP


@dataclass(frozen=True)
class ScoreWeights:
    """Scoring constants; defaults reproduce the production score."""

    curve_exponent: float = SCORE_CURVE_EXPONENT
    base_scale: float = SCORE_BASE_SCALE
    edge_scale: float = SCORE_EDGE_SCALE
    edge_cap: float = SCORE_EDGE_CAP
    floor: float = SCORE_MIN
    ceiling: float = SCORE_MAX


DEFAULT_WEIGHTS = ScoreWeights()


def score(
    model_prob: float | None,
    market_odds: int | None,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> float:
    """Score one market for one player.

    Args:
        model_prob: Model probability (0.0-1.0) or None
        market_odds: Market American odds or None
        weights: Scoring constants

    Returns:
        Score in [weights.floor, weights.ceiling]; exactly the floor when
        model_prob is None or outside [0, 1]
    """
    if model_prob is None or not 0.0 <= model_prob <= 1.0:
        return weights.floor

    base = model_prob**weights.curve_exponent

    adjustment = 0.0
    implied = implied_probability(market_odds)
    if implied is not None:
        adjustment = capped_edge(model_prob - implied, weights.edge_cap) * weights.edge_scale

    raw = weights.floor + base * weights.base_scale + adjustment
    return max(weights.floor, min(weights.ceiling, raw))
