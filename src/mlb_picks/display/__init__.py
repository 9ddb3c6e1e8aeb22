"""Presentation helpers for ranked picks."""

from mlb_picks.display.formatter import (
    format_american,
    format_edge,
    format_pct,
    format_table,
    value_badge,
)

__all__ = ["format_american", "format_edge", "format_pct", "format_table", "value_badge"]
