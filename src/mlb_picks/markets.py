"""Fixed market variants and the row fields each one reads.

Three markets are supported: home run anytime, one or more hits and two or
more hits. Each variant statically names its canonical fields so that scoring
and ranking never build field names on the fly.
"""

from dataclasses import dataclass
from enum import Enum


class Market(str, Enum):
    """Player prop market."""

    HR = "HR"
    H1 = "H1"
    H2 = "H2"


@dataclass(frozen=True)
class MarketDefinition:
    """Canonical field names for one market."""

    market: Market
    label: str
    prefix: str  # 'hr' | 'h1' | 'h2'
    model_prob_field: str
    market_odds_field: str
    fair_odds_field: str
    edge_field: str
    score_field: str
    market_prob_field: str


MARKET_DEFINITIONS: dict[Market, MarketDefinition] = {
    Market.HR: MarketDefinition(
        market=Market.HR,
        label="HR Anytime",
        prefix="hr",
        model_prob_field="hr_anytime_prob",
        market_odds_field="hr_market_odds",
        fair_odds_field="fair_hr_american",
        edge_field="hr_edge",
        score_field="hr_score",
        market_prob_field="hr_market_prob",
    ),
    Market.H1: MarketDefinition(
        market=Market.H1,
        label="1+ Hit",
        prefix="h1",
        model_prob_field="hits_1plus_prob",
        market_odds_field="h1_market_odds",
        fair_odds_field="fair_h1_american",
        edge_field="h1_edge",
        score_field="h1_score",
        market_prob_field="h1_market_prob",
    ),
    Market.H2: MarketDefinition(
        market=Market.H2,
        label="2+ Hits",
        prefix="h2",
        model_prob_field="hits_2plus_prob",
        market_odds_field="h2_market_odds",
        fair_odds_field="fair_h2_american",
        edge_field="h2_edge",
        score_field="h2_score",
        market_prob_field="h2_market_prob",
    ),
}


def get_definition(market: Market | str) -> MarketDefinition:
    """Look up the definition for a market.

    Raises:
        ValueError: If market is not one of 'HR', 'H1', 'H2'
    """
    return MARKET_DEFINITIONS[Market(market)]
