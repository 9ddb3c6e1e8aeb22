"""Filter, sort and truncate pipeline producing the displayed ranking.

Stages run in a fixed order: search, starters, top picks, sort, truncate.
Filters keep input order, the sort is a stable permutation and truncation
keeps the first rows. Every stage returns a new list.
"""

import logging
from collections.abc import Iterable
from typing import Any

from mlb_picks.ingestion.resolver import resolve_rows
from mlb_picks.markets import Market
from mlb_picks.ranking.params import RankingParams, SortDirection, SortKey
from mlb_picks.scoring.metrics import EvaluatedRow, evaluate_rows
from mlb_picks.scoring.score import DEFAULT_WEIGHTS, ScoreWeights

logger = logging.getLogger(__name__)


def filter_search(rows: list[EvaluatedRow], query: str) -> list[EvaluatedRow]:
    """Keep rows whose player name or team contains the query (case-insensitive)."""
    if not query.strip():
        return list(rows)
    needle = query.lower()
    return [
        r
        for r in rows
        if needle in r.row.player_name.lower() or needle in r.row.team.lower()
    ]


def filter_starters(rows: list[EvaluatedRow]) -> list[EvaluatedRow]:
    """Keep rows with a positive lineup slot."""
    return [r for r in rows if r.row.is_starter]


def filter_top_picks(rows: list[EvaluatedRow], threshold: float) -> list[EvaluatedRow]:
    """Keep rows scoring at least threshold in any market."""
    return [
        r for r in rows if any(metrics.score >= threshold for metrics in r.metrics.values())
    ]


def sort_value(row: EvaluatedRow, market: Market, key: SortKey) -> float | None:
    """Numeric value a row is sorted by, or None if absent."""
    metrics = row.metrics_for(market)
    if key is SortKey.SCORE:
        return metrics.score
    if key is SortKey.MODEL:
        return row.row.fields_for(market).model_prob
    if key is SortKey.EDGE:
        return metrics.edge
    if key is SortKey.MARKET:
        return metrics.implied_prob
    if key is SortKey.FAIR:
        return metrics.fair_odds
    if key is SortKey.PA:
        return row.row.recent_pa
    raise ValueError(f"Unknown sort key: {key!r}")


def sort_rows(
    rows: list[EvaluatedRow],
    market: Market,
    key: SortKey,
    direction: SortDirection = SortDirection.DESC,
) -> list[EvaluatedRow]:
    """Stable sort by key for the market.

    Rows without a value always follow rows with one, in either direction;
    ties keep their input order.
    """
    present = []
    absent = []
    for r in rows:
        value = sort_value(r, market, key)
        if value is None:
            absent.append(r)
        else:
            present.append((value, r))

    # sorted() is stable for reverse=True as well
    present = sorted(
        present,
        key=lambda pair: pair[0],
        reverse=direction is SortDirection.DESC,
    )
    return [r for _, r in present] + absent


def truncate(rows: list[EvaluatedRow], limit: int | None) -> list[EvaluatedRow]:
    """Keep the first limit rows; None keeps everything."""
    if limit is None:
        return list(rows)
    return rows[:limit]


def rank(rows: Iterable[EvaluatedRow], params: RankingParams) -> list[EvaluatedRow]:
    """Run the full ranking pipeline.

    Args:
        rows: Evaluated rows in input order
        params: Validated ranking parameters

    Returns:
        New list of rows in display order
    """
    data = list(rows)
    total = len(data)

    data = filter_search(data, params.query)
    if params.starters_only:
        data = filter_starters(data)
    if params.top_picks_only:
        data = filter_top_picks(data, params.top_pick_threshold)
    filtered = len(data)

    data = sort_rows(data, params.market, params.sort_key, params.direction)
    data = truncate(data, params.limit)

    logger.debug(
        f"Ranked {total} rows: {filtered} after filters, {len(data)} shown "
        f"(market={params.market.value}, sort={params.sort_key.value} {params.direction.value})"
    )
    return data


def rank_raw(
    raws: Iterable[Any],
    params: RankingParams,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> list[EvaluatedRow]:
    """Resolve, evaluate and rank raw backend rows in one call."""
    return rank(evaluate_rows(resolve_rows(raws), weights), params)
