"""JSON file row source for offline ranking."""

import json
import logging
from datetime import date
from pathlib import Path

from mlb_picks.ingestion.base import RowSource
from mlb_picks.ingestion.resolver import DATE_CHAIN, first_resolved, to_date

logger = logging.getLogger(__name__)


class JsonFileRowSource(RowSource):
    """
    Row source backed by a JSON export of the markets endpoint.

    Accepts either a top-level array of rows or an object with a "rows" array.
    Rows whose date differs from the requested one are dropped; undated rows
    are kept.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> list[dict]:
        """
        Read every row in the file.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not JSON or has no row array
        """
        with self.path.open(encoding="utf-8") as f:
            payload = json.load(f)

        if isinstance(payload, dict):
            payload = payload.get("rows")
        if not isinstance(payload, list):
            raise ValueError(f"{self.path}: expected a JSON array of rows")

        return payload

    def fetch_rows(self, game_date: date | None = None) -> list[dict]:
        rows = self.load()
        if game_date is None:
            return rows

        kept = []
        for raw in rows:
            row_date = (
                first_resolved(raw, DATE_CHAIN, to_date) if isinstance(raw, dict) else None
            )
            if row_date is None or row_date == game_date:
                kept.append(raw)

        logger.info(
            f"Loaded {len(kept)}/{len(rows)} rows for {game_date.isoformat()} from {self.path}"
        )
        return kept
