"""Text formatting for ranked picks.

Pure functions layered on top of the ranking output. No state and no I/O.
"""

from mlb_picks.markets import MARKET_DEFINITIONS, Market
from mlb_picks.scoring.metrics import EvaluatedRow

MISSING = "—"

TABLE_COLUMNS = [
    ("Player", "<"),
    ("Team", "<"),
    ("Lineup", "^"),
    ("Model %", ">"),
    ("Market Odds", ">"),
    ("Fair Odds", ">"),
    ("Edge", ">"),
    ("Score", ">"),
]


def format_pct(value: float | None) -> str:
    """Format a probability as a one-decimal percentage."""
    if value is None:
        return MISSING
    return f"{value * 100:.1f}%"


def format_american(odds: int | None) -> str:
    """Format American odds with an explicit plus sign for underdogs."""
    if odds is None:
        return MISSING
    return f"+{odds}" if odds > 0 else str(odds)


def format_edge(edge: float | None) -> str:
    """Format a signed edge in percentage points."""
    if edge is None:
        return MISSING
    return f"{edge * 100:+.1f}%"


def value_badge(edge: float | None, threshold: float = 0.01) -> str | None:
    """Badge text for edges at or beyond the threshold.

    Returns:
        "Value +x.x%" for positive edges, "-x.x%" for negative edges, or None
    """
    if edge is None:
        return None
    if edge >= threshold:
        return f"Value +{edge * 100:.1f}%"
    if edge <= -threshold:
        return f"-{abs(edge) * 100:.1f}%"
    return None


def format_row(row: EvaluatedRow, market: Market, badge_threshold: float = 0.01) -> list[str]:
    """Format one ranked row as table cells for a market."""
    fields = row.row.fields_for(market)
    metrics = row.metrics_for(market)

    edge_cell = format_edge(metrics.edge)
    badge = value_badge(metrics.edge, badge_threshold)
    if badge:
        edge_cell = f"{edge_cell} [{badge}]"

    return [
        row.row.player_name or MISSING,
        row.row.team or MISSING,
        str(row.row.lineup_spot) if row.row.lineup_spot is not None else MISSING,
        format_pct(fields.model_prob),
        format_american(fields.market_odds),
        format_american(metrics.fair_odds),
        edge_cell,
        f"{metrics.score:.1f}",
    ]


def format_table(
    rows: list[EvaluatedRow],
    market: Market,
    badge_threshold: float = 0.01,
) -> str:
    """Render ranked rows as an aligned plain-text table."""
    definition = MARKET_DEFINITIONS[market]
    header = [name for name, _ in TABLE_COLUMNS]
    body = [format_row(r, market, badge_threshold) for r in rows]

    widths = [len(name) for name in header]
    for cells in body:
        widths = [max(w, len(cell)) for w, cell in zip(widths, cells)]

    def _line(cells: list[str]) -> str:
        return "  ".join(
            f"{cell:{align}{width}}"
            for cell, (_, align), width in zip(cells, TABLE_COLUMNS, widths)
        ).rstrip()

    lines = [f"{definition.label} — {len(rows)} players", _line(header)]
    lines.append("  ".join("-" * w for w in widths))
    lines.extend(_line(cells) for cells in body)
    return "\n".join(lines)
