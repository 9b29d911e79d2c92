"""
Module-level rating API backed by a process-wide default engine.

Changing the K-factor here affects every later call made through these
functions, but not engines created separately with ``RatingEngine(...)``.
"""

from typing import List, Optional, Sequence, Union

from .core.elo_rating import DEFAULT_K_FACTOR
from .core.engine import RatingEngine
from .core.results import WIN, MatchUpdate, RatingChange, TeamUpdate


_default_engine = RatingEngine(k_factor=DEFAULT_K_FACTOR)


def get_default_engine() -> RatingEngine:
    """Return the engine used by the module-level functions."""
    return _default_engine


def get_factor() -> float:
    """Return the default K-factor."""
    return _default_engine.get_factor()


def set_factor(k_factor: float) -> None:
    """Set the default K-factor for all subsequent module-level updates."""
    _default_engine.set_factor(k_factor)


def update_one_vs_one(
    home_rating: float,
    opponent_rating: float,
    home_result: float = WIN,
    return_both: bool = True,
) -> Union[MatchUpdate, RatingChange]:
    return _default_engine.update_one_vs_one(home_rating, opponent_rating, home_result, return_both)


def update_many_vs_many(
    home_ratings: Sequence[float],
    opponent_ratings: Sequence[float],
    home_result: float = WIN,
) -> TeamUpdate:
    return _default_engine.update_many_vs_many(home_ratings, opponent_ratings, home_result)


def update_free_for_all(
    ranked_ratings: Sequence[float],
    ranks: Optional[Sequence[float]] = None,
) -> List[RatingChange]:
    return _default_engine.update_free_for_all(ranked_ratings, ranks)
