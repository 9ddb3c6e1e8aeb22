"""Edge calculation: model probability versus market-implied probability."""

# Scoring clamps edge to +/- this value; display values stay raw
EDGE_CAP = 0.25


def edge(model_prob: float | None, implied_prob: float | None) -> float | None:
    """Compute the signed edge of the model over the market.

    Args:
        model_prob: Model probability (0.0-1.0) or None
        implied_prob: Market-implied probability (0.0-1.0) or None

    Returns:
        model_prob - implied_prob, or None if either operand is absent

    Example:
        >>> round(edge(0.30, 0.40), 4)
        -0.1
    """
    if model_prob is None or implied_prob is None:
        return None
    return model_prob - implied_prob


def capped_edge(value: float, cap: float = EDGE_CAP) -> float:
    """Clamp an edge to [-cap, +cap] for scoring."""
    return max(-cap, min(cap, value))
