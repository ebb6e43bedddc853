"""Performance classification for a card's rating history at one position."""

from typing import Dict, Optional, Sequence

from src.team_generator.config import (
    CONSISTENT_MAX_STD_DEV,
    CONSISTENT_MIN_MATCHES,
    HOT_STREAK_MARGIN,
    HOT_STREAK_WINDOW,
    PROMISING_MAX_MATCHES,
    VERSATILE_MIN_AVERAGE,
    VERSATILE_MIN_POSITIONS,
)
from src.team_generator.models import (
    PlayerCard,
    PlayerPerformance,
    PlayerStats,
    Position,
    Rating,
)
from src.team_generator.stats import calculate_average, calculate_stats


class PerformanceClassifier:
    """Derive performance tags from rating histories.

    Four independent tags are computed:

    * **Hot streak**: the most recent ratings beat the all-time average.
    * **Consistent**: enough matches with a tight spread.
    * **Promising**: a small, non-empty sample.
    * **Versatile**: the card performs well at several positions.

    The classifier is stateless: tags are recomputed from the supplied
    history on every call and never cached.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def classify(
        self,
        ratings: Sequence[Rating],
        position_averages: Dict[Position, float],
    ) -> PlayerPerformance:
        """Build the performance record for one (card, position) pair.

        Args:
            ratings: Chronological rating history at the position.
            position_averages: Average rating at every rated position of
                the same card (positions without ratings omitted).

        Returns:
            :class:`PlayerPerformance` with stats and tags.
        """
        stats = calculate_stats(ratings)
        return PlayerPerformance(
            stats=stats,
            is_hot_streak=self.is_hot_streak(ratings, stats),
            is_consistent=self.is_consistent(stats),
            is_promising=self.is_promising(stats),
            is_versatile=self.is_versatile(position_averages),
            most_common_role=self.most_common_role(ratings),
        )

    def classify_card(self, card: PlayerCard) -> Dict[Position, PlayerPerformance]:
        """Classify every rated position of *card*.

        Returns:
            Dict mapping each rated position to its performance record,
            in :class:`Position` enumeration order.
        """
        position_averages = self.position_averages(card)
        return {
            position: self.classify(card.ratings_at(position), position_averages)
            for position in card.rated_positions()
        }

    # ------------------------------------------------------------------
    # Tag predicates
    # ------------------------------------------------------------------

    @staticmethod
    def is_hot_streak(ratings: Sequence[Rating], stats: PlayerStats) -> bool:
        if stats.matches < HOT_STREAK_WINDOW:
            return False
        recent_average = calculate_average(ratings[-HOT_STREAK_WINDOW:])
        return recent_average > stats.average + HOT_STREAK_MARGIN

    @staticmethod
    def is_consistent(stats: PlayerStats) -> bool:
        return (
            stats.matches >= CONSISTENT_MIN_MATCHES
            and stats.std_dev < CONSISTENT_MAX_STD_DEV
        )

    @staticmethod
    def is_promising(stats: PlayerStats) -> bool:
        # No minimum quality: any small non-empty sample qualifies.
        return 0 < stats.matches < PROMISING_MAX_MATCHES

    @staticmethod
    def is_versatile(position_averages: Dict[Position, float]) -> bool:
        high_positions = [
            pos for pos, avg in position_averages.items()
            if avg >= VERSATILE_MIN_AVERAGE
        ]
        return len(high_positions) >= VERSATILE_MIN_POSITIONS

    @staticmethod
    def most_common_role(ratings: Sequence[Rating]) -> Optional[str]:
        """Role logged most often; ties go to the role seen first."""
        counts: Dict[str, int] = {}
        for rating in ratings:
            if rating.role:
                counts[rating.role] = counts.get(rating.role, 0) + 1
        if not counts:
            return None
        # max() keeps the first maximal key, and dicts preserve first-seen order
        return max(counts, key=counts.__getitem__)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def position_averages(card: PlayerCard) -> Dict[Position, float]:
        """Average rating at each rated position of *card*."""
        return {
            position: calculate_average(card.ratings_at(position))
            for position in card.rated_positions()
        }
