"""American odds conversions.

Implied probability is the raw one-sided value; no vig removal is applied.
American odds in the open interval (-100, 100) are not representable and
convert to None rather than raising, so callers can treat them as missing
market data.
"""

# |odds| below this is not a valid American quotation
MIN_AMERICAN_MAGNITUDE = 100


def is_valid_american(odds: int | None) -> bool:
    """Return True if odds is a representable American quotation."""
    return odds is not None and abs(odds) >= MIN_AMERICAN_MAGNITUDE


def implied_probability(odds: int | None) -> float | None:
    """Convert American odds to implied probability.

    Args:
        odds: American odds (e.g., +150, -110) or None

    Returns:
        Probability in (0, 1), or None if odds is absent or in (-100, 100)

    Example:
        >>> implied_probability(100)
        0.5
        >>> implied_probability(-150)
        0.6
        >>> implied_probability(50) is None
        True
    """
    if not is_valid_american(odds):
        return None

    if odds >= MIN_AMERICAN_MAGNITUDE:
        return 100 / (odds + 100)

    # Negative: risk |odds| to win 100
    return -odds / (-odds + 100)


def american_to_decimal(odds: int) -> float:
    """Convert American odds to European decimal format.

    Raises:
        ValueError: If |odds| < 100
    """
    if not is_valid_american(odds):
        raise ValueError(f"Invalid American odds {odds!r}: magnitude must be >= 100")

    if odds > 0:
        return (odds / 100) + 1
    return (100 / abs(odds)) + 1


def probability_to_american(prob: float | None) -> int | None:
    """Convert a probability to fair American odds.

    Favorites (prob >= 0.5) get negative odds, underdogs positive odds.
    Returns None for an absent probability or one outside (0, 1), which has no
    finite American equivalent.
    """
    if prob is None or not 0.0 < prob < 1.0:
        return None

    if prob >= 0.5:
        return -round(100 * prob / (1 - prob))
    return round(100 * (1 - prob) / prob)
