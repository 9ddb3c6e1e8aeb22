"""Ranking pipeline: search, starters and top-pick filters, sort, truncate."""

from mlb_picks.ranking.engine import (
    filter_search,
    filter_starters,
    filter_top_picks,
    rank,
    rank_raw,
    sort_rows,
    sort_value,
    truncate,
)
from mlb_picks.ranking.params import (
    ConfigurationError,
    RankingParams,
    SortDirection,
    SortKey,
    parse_flag,
    parse_limit,
)

__all__ = [
    "rank",
    "rank_raw",
    "filter_search",
    "filter_starters",
    "filter_top_picks",
    "sort_rows",
    "sort_value",
    "truncate",
    "ConfigurationError",
    "RankingParams",
    "SortDirection",
    "SortKey",
    "parse_flag",
    "parse_limit",
]
