"""Ranking parameters selected by the user and their validation."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from mlb_picks.markets import Market

# 'Show: All' value sent by the dashboard
UNBOUNDED = -1

TRUE_STRINGS = ("true", "1", "yes", "on")
FALSE_STRINGS = ("false", "0", "no", "off", "")


class ConfigurationError(ValueError):
    """Raised when ranking parameters are invalid."""


class SortKey(str, Enum):
    """Column a ranking is sorted by, for the active market."""

    SCORE = "score"
    MODEL = "model"  # Model probability
    EDGE = "edge"
    MARKET = "market"  # Market-implied probability
    FAIR = "fair"  # Fair American odds
    PA = "pa"  # Recent plate appearances


class SortDirection(str, Enum):
    """Sort direction."""

    DESC = "desc"
    ASC = "asc"


def _coerce_enum(enum_cls, value: Any, name: str):
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(f"Invalid {name} {value!r}; expected one of: {allowed}") from e


@dataclass(frozen=True)
class RankingParams:
    """Filter, sort and page settings for one ranking pass.

    limit=None means unbounded. Construction validates every field and raises
    ConfigurationError on bad input.
    """

    query: str = ""
    starters_only: bool = False
    top_picks_only: bool = False
    top_pick_threshold: float = 7.0
    market: Market = Market.H1
    sort_key: SortKey = SortKey.SCORE
    direction: SortDirection = SortDirection.DESC
    limit: int | None = None

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "market", _coerce_enum(Market, self.market, "market"))
        object.__setattr__(self, "sort_key", _coerce_enum(SortKey, self.sort_key, "sort key"))
        object.__setattr__(
            self, "direction", _coerce_enum(SortDirection, self.direction, "sort direction")
        )

        for flag in ("starters_only", "top_picks_only"):
            if not isinstance(getattr(self, flag), bool):
                raise ConfigurationError(f"{flag} must be a boolean, got {getattr(self, flag)!r}")

        if not isinstance(self.query, str):
            raise ConfigurationError(f"Search query must be a string, got {self.query!r}")

        threshold = self.top_pick_threshold
        if (
            isinstance(threshold, bool)
            or not isinstance(threshold, (int, float))
            or math.isnan(threshold)
        ):
            raise ConfigurationError(f"Top-pick threshold must be a number, got {threshold!r}")

        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                raise ConfigurationError(f"Limit must be an integer, got {self.limit!r}")
            if self.limit <= 0:
                raise ConfigurationError(
                    f"Limit must be a positive integer or unbounded, got {self.limit}"
                )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "RankingParams":
        """Build params from loose UI or CLI values.

        Accepts -1 or 'all' as the unbounded limit, numeric strings for limit
        and threshold, and enum values as strings. Unknown keys are ignored.
        """
        kwargs: dict[str, Any] = {}
        for name in ("query", "market", "sort_key", "direction"):
            if values.get(name) is not None:
                kwargs[name] = values[name]

        for name in ("starters_only", "top_picks_only"):
            if values.get(name) is not None:
                kwargs[name] = parse_flag(values[name], name)

        threshold = values.get("top_pick_threshold")
        if threshold is not None:
            if isinstance(threshold, str):
                try:
                    threshold = float(threshold)
                except ValueError as e:
                    raise ConfigurationError(
                        f"Top-pick threshold must be a number, got {threshold!r}"
                    ) from e
            kwargs["top_pick_threshold"] = threshold

        kwargs["limit"] = parse_limit(values.get("limit"))

        return cls(**kwargs)


def parse_flag(value: Any, name: str) -> bool:
    """Parse a checkbox value; accepts bools and 'true'/'false' style strings.

    Raises:
        ConfigurationError: If the value is not a recognizable boolean
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def parse_limit(value: Any) -> int | None:
    """Parse a result limit; None, -1 and 'all' mean unbounded.

    Raises:
        ConfigurationError: If the value is not a positive integer or an
            unbounded alias
    """
    if isinstance(value, str):
        value = value.strip()
        if value.lower() == "all":
            return None
        try:
            value = int(value)
        except ValueError as e:
            raise ConfigurationError(f"Invalid limit {value!r}") from e
    if value is None or value == UNBOUNDED:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"Limit must be a positive integer or 'all', got {value!r}")
    return value
