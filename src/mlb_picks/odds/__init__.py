"""Odds conversion and edge calculation."""

from mlb_picks.odds.convert import (
    american_to_decimal,
    implied_probability,
    is_valid_american,
    probability_to_american,
)
from mlb_picks.odds.edge import EDGE_CAP, capped_edge, edge

__all__ = [
    "american_to_decimal",
    "implied_probability",
    "is_valid_american",
    "probability_to_american",
    "EDGE_CAP",
    "capped_edge",
    "edge",
]
