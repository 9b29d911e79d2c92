"""
Core formulas of the Elo rating system.
"""

import math
import numbers


DEFAULT_K_FACTOR = 32
RATING_SCALE = 400.0


def transform_rating(rating: float) -> float:
    """
    Transform a raw rating into its logistic strength.

    A gap of 400 rating points corresponds to a 10:1 strength ratio.

    Args:
        rating: Raw Elo rating

    Returns:
        Strength value ``10 ** (rating / 400)``
    """
    return math.pow(10, rating / RATING_SCALE)


def expected_score(r_home: float, r_opponent: float) -> float:
    """
    Calculate the expected score of the home side.

    Args:
        r_home: Transformed rating of the home side
        r_opponent: Transformed rating of the opponent

    Returns:
        Expected score for the home side (between 0 and 1)
    """
    return r_home / (r_home + r_opponent)


def update_rating(rating: float, expected: float, actual: float, k_factor: float = DEFAULT_K_FACTOR) -> float:
    """
    Update an Elo rating based on the expected and actual outcomes.

    Args:
        rating: Current Elo rating
        expected: Expected outcome (between 0 and 1)
        actual: Actual outcome (0 for loss, 0.5 for draw, 1 for win)
        k_factor: K-factor for Elo calculation (determines how much ratings change)

    Returns:
        Updated Elo rating
    """
    return rating + k_factor * (actual - expected)


def mirror_result(home_result: float) -> float:
    """Result of the same match seen from the opponent's side."""
    return abs(1 - home_result)


def validate_result(result: float) -> float:
    if not isinstance(result, numbers.Real):
        raise TypeError(f"match result must be a number, got {type(result).__name__}")
    if math.isnan(result) or result < 0.0 or result > 1.0:
        raise ValueError("match result must be between 0 and 1")
    return result


def validate_k_factor(k_factor: float) -> float:
    if isinstance(k_factor, bool) or not isinstance(k_factor, numbers.Real):
        raise TypeError(f"k_factor must be a number, got {type(k_factor).__name__}")
    if not math.isfinite(k_factor):
        raise ValueError("k_factor must be a finite number")
    return k_factor
