"""
Core Elo rating functionality.
"""

from .elo_rating import (
    DEFAULT_K_FACTOR,
    RATING_SCALE,
    expected_score,
    mirror_result,
    transform_rating,
    update_rating,
)
from .engine import RatingEngine
from .results import DRAW, LOSS, WIN, MatchUpdate, RatingChange, TeamUpdate
