"""Command-line entry point: rank a JSON export of player rows."""

import argparse
import json
import logging
import sys
from datetime import date

from pydantic import ValidationError

from mlb_picks.config import get_config
from mlb_picks.display.formatter import format_table
from mlb_picks.ingestion.files import JsonFileRowSource
from mlb_picks.markets import Market
from mlb_picks.ranking.engine import rank_raw
from mlb_picks.ranking.params import ConfigurationError, RankingParams, SortKey

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="MLB Picks — rank HR / 1+ hit / 2+ hit markets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Example:\n"
            "  python -m mlb_picks.main markets.json --market HR --sort edge --limit 25"
        ),
    )
    parser.add_argument("rows", metavar="ROWS.json", help="JSON array of player rows.")
    parser.add_argument(
        "--date",
        metavar="YYYY-MM-DD",
        help="Only rank rows for this game date (undated rows are kept).",
    )
    parser.add_argument(
        "--market",
        choices=[m.value for m in Market],
        help="Active market (default from DEFAULT_MARKET).",
    )
    parser.add_argument(
        "--sort",
        choices=[k.value for k in SortKey],
        default=SortKey.SCORE.value,
        help="Sort column for the active market.",
    )
    parser.add_argument("--asc", action="store_true", help="Sort ascending.")
    parser.add_argument("--query", default="", help="Filter by player or team.")
    parser.add_argument("--starters", action="store_true", help="Only lineup starters.")
    parser.add_argument(
        "--top-picks",
        action="store_true",
        help="Only players scoring at least --threshold in any market.",
    )
    parser.add_argument("--threshold", help="Top-pick score threshold (1-10).")
    parser.add_argument("--limit", help="Rows to show: a positive integer or 'all'.")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of a table.")
    return parser


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, rank rows and print them.

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = get_config()

    game_date = None
    if args.date:
        try:
            game_date = date.fromisoformat(args.date)
        except ValueError as exc:
            parser.error(f"Invalid date format: {exc}")

    try:
        params = RankingParams.from_mapping(
            {
                "query": args.query,
                "starters_only": args.starters,
                "top_picks_only": args.top_picks,
                "top_pick_threshold": (
                    args.threshold if args.threshold is not None else config.top_pick_threshold
                ),
                "market": args.market or config.default_market,
                "sort_key": args.sort,
                "direction": "asc" if args.asc else "desc",
                "limit": args.limit if args.limit is not None else config.default_limit,
            }
        )
    except ConfigurationError as e:
        parser.error(str(e))

    try:
        raws = JsonFileRowSource(args.rows).fetch_rows(game_date)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load rows: {e}")
        return 1

    ranked = rank_raw(raws, params, config.score_weights())

    if args.json:
        print(json.dumps([r.to_dict() for r in ranked], indent=2))
    else:
        print(format_table(ranked, params.market, config.value_badge_threshold))
    return 0


def main() -> None:
    """Main entry point with logging configuration."""
    try:
        config = get_config()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
