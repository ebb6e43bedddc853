"""Candidate pool construction - one record per (player, card, rated position)."""

import logging
from typing import Iterable, List, Optional

from src.team_generator.models import Candidate, Player, Position
from src.team_generator.performance import PerformanceClassifier

logger = logging.getLogger(__name__)


class CandidatePoolBuilder:
    """Flattens a roster into assignable candidates.

    The pool is rebuilt from scratch on every call; nothing is cached
    between invocations.
    """

    def __init__(self, classifier: Optional[PerformanceClassifier] = None):
        self.classifier = classifier or PerformanceClassifier()

    def build(self, players: Iterable[Player]) -> List[Candidate]:
        """Build the candidate pool.

        Enumeration order is roster order, then card order, then
        :class:`Position` order. Later stages rely on this order to break
        rating ties.

        Args:
            players: Roster snapshot. Not mutated.

        Returns:
            List of :class:`Candidate`, one per position with at least one
            rating on each card.
        """
        candidates: List[Candidate] = []
        for player in players:
            for card in player.cards:
                for position, performance in self.classifier.classify_card(card).items():
                    candidates.append(
                        Candidate(
                            player=player,
                            card=card,
                            position=position,
                            average=performance.stats.average,
                            performance=performance,
                        )
                    )

        logger.debug("Built candidate pool: %d candidates", len(candidates))
        return candidates

    @staticmethod
    def for_position(candidates: Iterable[Candidate], position: Position) -> List[Candidate]:
        """Candidates rated at *position*, best average first.

        The sort is stable, so equal averages keep enumeration order.
        """
        return sorted(
            (c for c in candidates if c.position == position),
            key=lambda c: c.average,
            reverse=True,
        )
