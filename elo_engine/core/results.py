"""
Result records returned by the rating engine.
"""

from dataclasses import dataclass
from typing import Dict, List, NamedTuple


WIN = 1.0
DRAW = 0.5
LOSS = 0.0


@dataclass(frozen=True)
class RatingChange:
    """
    Outcome of a rating update for a single competitor.

    ``change`` is always derived from the two ratings so that
    ``change == new_rating - old_rating`` holds exactly.
    """

    old_rating: float
    new_rating: float

    @property
    def change(self) -> float:
        return self.new_rating - self.old_rating

    def as_dict(self) -> Dict[str, float]:
        """
        Convert the record to a plain dictionary.

        Returns:
            Dictionary with ``old_rating``, ``new_rating`` and ``change`` keys
        """
        return {
            "old_rating": self.old_rating,
            "new_rating": self.new_rating,
            "change": self.change,
        }


class MatchUpdate(NamedTuple):
    """Both sides of a one-vs-one update."""

    home: RatingChange
    opponent: RatingChange


class TeamUpdate(NamedTuple):
    """Per-player updates for both teams, in input order."""

    home: List[RatingChange]
    opponent: List[RatingChange]
