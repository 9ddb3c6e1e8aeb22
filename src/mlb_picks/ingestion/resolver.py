"""Versioned field resolution from raw backend rows to PlayerMarketRow.

The backend has shipped several field names for the same concept. Each
canonical field has an ordered fallback chain: the current schema (v2) name
first, then legacy (v1) names. A key that is missing, null or unparsable falls
through to the next name. Resolution never raises; unresolvable fields become
None.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from mlb_picks.ingestion.base import MarketFields, PlayerMarketRow
from mlb_picks.markets import MARKET_DEFINITIONS, Market

logger = logging.getLogger(__name__)

SCHEMA_CURRENT = "v2"
SCHEMA_LEGACY = "v1"

# Versioned probability chains: (schema version, field name)
MODEL_PROB_CHAINS: dict[Market, list[tuple[str, str]]] = {
    Market.HR: [
        (SCHEMA_CURRENT, "hr_anytime_prob"),
        (SCHEMA_LEGACY, "hr_game_prob"),
        (SCHEMA_LEGACY, "hr_prob"),
    ],
    Market.H1: [
        (SCHEMA_CURRENT, "hits_1plus_prob"),
        (SCHEMA_LEGACY, "hit_1plus_prob"),
        (SCHEMA_LEGACY, "h1_prob"),
    ],
    Market.H2: [
        (SCHEMA_CURRENT, "hits_2plus_prob"),
        (SCHEMA_LEGACY, "hit_2plus_prob"),
        (SCHEMA_LEGACY, "h2_prob"),
    ],
}

SCHEMA_VERSIONS = (SCHEMA_CURRENT, SCHEMA_LEGACY)

PLAYER_ID_CHAIN = ["playerId", "player_id", "id"]
PLAYER_NAME_CHAIN = ["playerName", "player_name", "name"]
TEAM_CHAIN = ["team", "team_abbr"]
LINEUP_CHAIN = ["lineupSpot", "lineup_spot", "batting_order"]
RECENT_PA_CHAIN = ["recent_pa", "recent_pa_30d", "pa_30d"]
DATE_CHAIN = ["date", "game_date"]
HR_PROB_PA_CHAIN = ["hr_prob_pa_model", "hr_prob_pa"]
HIT_PROB_PA_CHAIN = ["hit_prob_pa_model", "hit_prob_pa"]


def market_odds_chain(market: Market) -> list[str]:
    """Field names for market American odds, current first."""
    p = MARKET_DEFINITIONS[market].prefix
    return [MARKET_DEFINITIONS[market].market_odds_field, f"{p}_odds", f"{p}_american"]


def fair_odds_chain(market: Market) -> list[str]:
    """Field names for fair American odds, current first."""
    p = MARKET_DEFINITIONS[market].prefix
    return [
        MARKET_DEFINITIONS[market].fair_odds_field,
        f"{p}_fair_american",
        f"{p}_fair_odds",
    ]


# Coercion helpers: each returns None for anything it cannot represent


def _to_float(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def to_probability(value: Any) -> float | None:
    """Coerce a probability; None unless a real number in [0, 1]."""
    result = _to_float(value)
    if result is None or not 0.0 <= result <= 1.0:
        return None
    return result


def to_integer(value: Any) -> int | None:
    """Coerce an integral value; '+150', 150 and 150.0 all give 150."""
    result = _to_float(value)
    if result is None or not result.is_integer():
        return None
    return int(result)


def to_american_odds(value: Any) -> int | None:
    """Coerce American odds; zero is never a quotation."""
    result = to_integer(value)
    if result == 0:
        return None
    return result


def to_lineup_spot(value: Any) -> int | None:
    """Coerce a batting-order slot; non-positive means not starting."""
    result = to_integer(value)
    if result is None or result <= 0:
        return None
    return result


def to_count(value: Any) -> int | None:
    """Coerce a non-negative count such as plate appearances."""
    result = to_integer(value)
    if result is None or result < 0:
        return None
    return result


def to_text(value: Any) -> str | None:
    """Coerce a non-empty stripped string."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def to_date(value: Any) -> date | None:
    """Coerce a YYYY-MM-DD date (a datetime prefix is accepted)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def first_resolved(raw: Mapping, chain: Iterable[str], coerce) -> Any:
    """Walk a fallback chain and return the first value that coerces."""
    for name in chain:
        if name not in raw:
            continue
        value = coerce(raw[name])
        if value is not None:
            return value
        if raw[name] is not None:
            logger.debug(f"Unparsable value for {name}: {raw[name]!r}")
    return None


def _resolve_model_prob(raw: Mapping, market: Market) -> tuple[float | None, str | None]:
    for version, name in MODEL_PROB_CHAINS[market]:
        if name not in raw:
            continue
        value = to_probability(raw[name])
        if value is not None:
            return value, version
        if raw[name] is not None:
            logger.debug(f"Unparsable probability for {name}: {raw[name]!r}")
    return None, None


def _resolve_market(raw: Mapping, market: Market) -> tuple[MarketFields, str | None]:
    definition = MARKET_DEFINITIONS[market]
    model_prob, version = _resolve_model_prob(raw, market)
    fields = MarketFields(
        model_prob=model_prob,
        market_odds=first_resolved(raw, market_odds_chain(market), to_american_odds),
        fair_odds=first_resolved(raw, fair_odds_chain(market), to_american_odds),
        edge=first_resolved(raw, [definition.edge_field], _to_float),
        score=first_resolved(raw, [definition.score_field], _to_float),
        market_prob=first_resolved(raw, [definition.market_prob_field], to_probability),
    )
    return fields, version


def resolve_row(raw: Any) -> PlayerMarketRow:
    """Resolve one raw row into a canonical PlayerMarketRow.

    Args:
        raw: Row mapping as returned by the backend (any schema version)

    Returns:
        PlayerMarketRow; fields that cannot be resolved are None. A non-mapping
        input yields an empty row.
    """
    if not isinstance(raw, Mapping):
        logger.warning(f"Skipping fields of non-mapping row: {type(raw).__name__}")
        return PlayerMarketRow()

    markets: dict[Market, MarketFields] = {}
    versions: set[str] = set()
    for market in Market:
        fields, version = _resolve_market(raw, market)
        markets[market] = fields
        if version is not None:
            versions.add(version)

    # A row mixing schemas is reported as legacy
    schema_version = None
    if versions:
        schema_version = SCHEMA_LEGACY if SCHEMA_LEGACY in versions else SCHEMA_CURRENT

    return PlayerMarketRow(
        player_id=first_resolved(raw, PLAYER_ID_CHAIN, to_integer),
        player_name=first_resolved(raw, PLAYER_NAME_CHAIN, to_text) or "",
        team=first_resolved(raw, TEAM_CHAIN, to_text) or "",
        lineup_spot=first_resolved(raw, LINEUP_CHAIN, to_lineup_spot),
        game_date=first_resolved(raw, DATE_CHAIN, to_date),
        recent_pa=first_resolved(raw, RECENT_PA_CHAIN, to_count),
        hr_prob_pa=first_resolved(raw, HR_PROB_PA_CHAIN, to_probability),
        hit_prob_pa=first_resolved(raw, HIT_PROB_PA_CHAIN, to_probability),
        markets=markets,
        schema_version=schema_version,
    )


def resolve_rows(raws: Iterable[Any]) -> list[PlayerMarketRow]:
    """Resolve a batch of raw rows; one bad row never fails the batch."""
    rows = [resolve_row(raw) for raw in raws]
    legacy = sum(1 for row in rows if row.schema_version == SCHEMA_LEGACY)
    if legacy:
        logger.info(f"Resolved {len(rows)} rows ({legacy} using legacy field names)")
    return rows
