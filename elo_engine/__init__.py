"""
Elo Engine - Elo rating updates for duels, team matches and free-for-alls.
"""

from .core import (
    DEFAULT_K_FACTOR,
    DRAW,
    LOSS,
    WIN,
    MatchUpdate,
    RatingChange,
    RatingEngine,
    TeamUpdate,
    expected_score,
    transform_rating,
    update_rating,
)
from .elo import (
    get_default_engine,
    get_factor,
    set_factor,
    update_free_for_all,
    update_many_vs_many,
    update_one_vs_one,
)

__all__ = [
    "RatingEngine",
    "RatingChange",
    "MatchUpdate",
    "TeamUpdate",
    "WIN",
    "DRAW",
    "LOSS",
    "DEFAULT_K_FACTOR",
    "expected_score",
    "transform_rating",
    "update_rating",
    "get_default_engine",
    "get_factor",
    "set_factor",
    "update_one_vs_one",
    "update_many_vs_many",
    "update_free_for_all",
]
