"""Tests for text formatting of ranked picks (pure functions)."""

import pytest

from mlb_picks.display import (
    format_american,
    format_edge,
    format_pct,
    format_table,
    value_badge,
)
from mlb_picks.ingestion import resolve_rows
from mlb_picks.markets import Market
from mlb_picks.ranking import RankingParams, rank
from mlb_picks.scoring import evaluate_rows


class TestFormatter:
    """Test cell formatting."""

    def test_pct(self):
        """Test probabilities render with one decimal."""
        assert format_pct(0.31) == "31.0%"
        assert format_pct(0.0) == "0.0%"
        assert format_pct(None) == "—"

    @pytest.mark.parametrize("odds,expected", [(150, "+150"), (-110, "-110"), (None, "—")])
    def test_american(self, odds, expected):
        """Test underdogs get an explicit plus sign."""
        assert format_american(odds) == expected

    def test_edge(self):
        """Test signed edge in percentage points."""
        assert format_edge(0.052) == "+5.2%"
        assert format_edge(-0.1) == "-10.0%"
        assert format_edge(None) == "—"

    def test_value_badge(self):
        """Test badges appear at or beyond one point of edge."""
        assert value_badge(0.05) == "Value +5.0%"
        assert value_badge(-0.03) == "-3.0%"
        assert value_badge(0.005) is None
        assert value_badge(None) is None
        assert value_badge(0.015, threshold=0.02) is None


class TestFormatTable:
    """Test the rendered table."""

    def test_table(self, slate):
        """Test header, market label and one line per row."""
        ranked = rank(evaluate_rows(resolve_rows(slate)), RankingParams(market=Market.HR))
        text = format_table(ranked, Market.HR)
        lines = text.splitlines()

        assert lines[0] == "HR Anytime — 4 players"
        for column in ("Player", "Team", "Lineup", "Model %", "Market Odds", "Fair Odds", "Edge", "Score"):
            assert column in lines[1]
        assert len(lines) == 3 + 4
        assert "Charlie Slugger" in lines[3]
        assert "+250" in lines[3]

    def test_missing_values_render_dash(self, slate):
        """Test absent odds and lineup render as a dash."""
        ranked = rank(evaluate_rows(resolve_rows(slate)), RankingParams(query="bravo"))
        line = format_table(ranked, Market.H1).splitlines()[3]
        assert "Bravo Hitter" in line
        assert "—" in line

    def test_empty(self):
        """Test an empty ranking still renders a header."""
        text = format_table([], Market.H2)
        assert text.splitlines()[0] == "2+ Hits — 0 players"
