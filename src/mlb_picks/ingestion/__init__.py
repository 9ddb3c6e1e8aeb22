"""Row sources and schema-tolerant field resolution."""

from mlb_picks.ingestion.base import MarketFields, PlayerMarketRow, RowSource
from mlb_picks.ingestion.files import JsonFileRowSource
from mlb_picks.ingestion.resolver import SCHEMA_VERSIONS, resolve_row, resolve_rows

__all__ = [
    # ABCs
    "RowSource",
    # Row schemas
    "MarketFields",
    "PlayerMarketRow",
    # Resolution
    "SCHEMA_VERSIONS",
    "resolve_row",
    "resolve_rows",
    # Concrete implementations
    "JsonFileRowSource",
]
