"""
Rating engine for one-vs-one, team and free-for-all matches.
"""

import logging
import threading
from typing import List, Optional, Sequence, Union

import numpy as np

from .elo_rating import (
    DEFAULT_K_FACTOR,
    expected_score,
    mirror_result,
    transform_rating,
    update_rating,
    validate_k_factor,
    validate_result,
)
from .results import DRAW, LOSS, WIN, MatchUpdate, RatingChange, TeamUpdate


logger = logging.getLogger(__name__)


class RatingEngine:
    """
    Computes Elo rating updates using a K-factor owned by the engine.

    Every public update reads the K-factor once and uses that value for the
    whole call, so a concurrent ``set_factor`` never changes K in the middle
    of a team or free-for-all update.
    """

    def __init__(self, k_factor: float = DEFAULT_K_FACTOR):
        """
        Initialize a rating engine.

        Args:
            k_factor: K-factor for Elo calculation (determines how much ratings change)
        """
        self._k_factor = validate_k_factor(k_factor)
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"RatingEngine(k_factor={self._k_factor!r})"

    def get_factor(self) -> float:
        """Return the current K-factor."""
        with self._lock:
            return self._k_factor

    def set_factor(self, k_factor: float) -> None:
        """
        Set the K-factor used by subsequent updates.

        Zero and negative values are accepted.

        Args:
            k_factor: New K-factor

        Raises:
            TypeError: If k_factor is not a real number
            ValueError: If k_factor is NaN or infinite
        """
        validate_k_factor(k_factor)
        with self._lock:
            logger.info(f"K-factor changed from {self._k_factor} to {k_factor}")
            self._k_factor = k_factor

    k_factor = property(get_factor, set_factor)

    def update_one_vs_one(
        self,
        home_rating: float,
        opponent_rating: float,
        home_result: float = WIN,
        return_both: bool = True,
    ) -> Union[MatchUpdate, RatingChange]:
        """
        Calculate the new ratings after a match between two competitors.

        Args:
            home_rating: Rating of the home competitor
            opponent_rating: Rating of the opponent
            home_result: Result for the home competitor (1.0 win, 0.5 draw, 0.0 loss)
            return_both: Return both sides if True, only the home side otherwise

        Returns:
            MatchUpdate with ``home`` and ``opponent`` records, or the home
            RatingChange alone when ``return_both`` is False
        """
        validate_result(home_result)
        return self._one_vs_one(self.get_factor(), home_rating, opponent_rating, home_result, return_both)

    def update_many_vs_many(
        self,
        home_ratings: Sequence[float],
        opponent_ratings: Sequence[float],
        home_result: float = WIN,
    ) -> TeamUpdate:
        """
        Calculate the new ratings of every player after a team match.

        Each player is rated as if they played one-vs-one against the mean
        rating of the opposing team, using the team result.

        Args:
            home_ratings: Ratings of the home players
            opponent_ratings: Ratings of the opponent players
            home_result: Result for the home team (1.0 win, 0.5 draw, 0.0 loss)

        Returns:
            TeamUpdate whose lists follow the input order
        """
        if len(home_ratings) == 0:
            raise ValueError("home_ratings cannot be empty")
        if len(opponent_ratings) == 0:
            raise ValueError("opponent_ratings cannot be empty")
        validate_result(home_result)

        k_factor = self.get_factor()
        home_mean = float(np.mean(home_ratings))
        opponent_mean = float(np.mean(opponent_ratings))
        opponent_result = mirror_result(home_result)

        logger.debug(
            f"Team match: {len(home_ratings)} (mean {home_mean:.2f}) vs "
            f"{len(opponent_ratings)} (mean {opponent_mean:.2f}), result {home_result}"
        )

        home_data = [
            self._one_vs_one(k_factor, rating, opponent_mean, home_result, False)
            for rating in home_ratings
        ]
        opponent_data = [
            self._one_vs_one(k_factor, rating, home_mean, opponent_result, False)
            for rating in opponent_ratings
        ]

        return TeamUpdate(home=home_data, opponent=opponent_data)

    def update_free_for_all(
        self,
        ranked_ratings: Sequence[float],
        ranks: Optional[Sequence[float]] = None,
    ) -> List[RatingChange]:
        """
        Calculate the new ratings of all competitors in a free-for-all match.

        Every competitor is compared with every other one: finishing ahead
        counts as a win, behind as a loss and level as a draw. The changes of
        all pairwise comparisons are summed.

        Args:
            ranked_ratings: Ratings sorted by final position, winner first
            ranks: Optional finishing positions parallel to ``ranked_ratings``
                (lower is better). Equal positions are scored as draws. Defaults
                to the list positions, i.e. no ties.

        Returns:
            One RatingChange per competitor, in input order
        """
        if len(ranked_ratings) == 0:
            raise ValueError("ranked_ratings cannot be empty")
        if ranks is None:
            ranks = range(len(ranked_ratings))
        elif len(ranks) != len(ranked_ratings):
            raise ValueError("ranks must have the same length as ranked_ratings")

        k_factor = self.get_factor()
        new_ratings = []

        for home_index, home_rating in enumerate(ranked_ratings):
            rating_change = 0.0

            for opponent_index, opponent_rating in enumerate(ranked_ratings):
                if home_index == opponent_index:
                    continue

                home_rank, opponent_rank = ranks[home_index], ranks[opponent_index]
                if home_rank < opponent_rank:
                    home_result = WIN
                elif home_rank > opponent_rank:
                    home_result = LOSS
                else:
                    home_result = DRAW

                home_data = self._one_vs_one(k_factor, home_rating, opponent_rating, home_result, False)
                rating_change += home_data.change

            new_ratings.append(RatingChange(old_rating=home_rating, new_rating=home_rating + rating_change))

        logger.debug(f"Free-for-all with {len(ranked_ratings)} competitors updated")
        return new_ratings

    def _one_vs_one(
        self,
        k_factor: float,
        home_rating: float,
        opponent_rating: float,
        home_result: float,
        return_both: bool,
    ) -> Union[MatchUpdate, RatingChange]:
        home_r = transform_rating(home_rating)
        opponent_r = transform_rating(opponent_rating)

        home_e = expected_score(home_r, opponent_r)
        opponent_e = expected_score(opponent_r, home_r)

        home = RatingChange(
            old_rating=home_rating,
            new_rating=update_rating(home_rating, home_e, home_result, k_factor),
        )
        if not return_both:
            return home

        opponent = RatingChange(
            old_rating=opponent_rating,
            new_rating=update_rating(opponent_rating, opponent_e, mirror_result(home_result), k_factor),
        )
        logger.debug(
            f"{home_rating} vs {opponent_rating} ({home_result}): "
            f"{home.change:+.2f} / {opponent.change:+.2f}"
        )
        return MatchUpdate(home=home, opponent=opponent)
