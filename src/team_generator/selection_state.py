"""Selection state threaded through both assignment passes."""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from src.team_generator.models import Candidate


@dataclass(frozen=True)
class SelectionState:
    """Which players and cards are already taken in one generation run.

    Immutable: :meth:`select` returns a new state, so each pass receives
    the state produced by the previous one as an explicit input.
    """

    used_player_ids: FrozenSet[str] = field(default_factory=frozenset)
    used_card_ids: FrozenSet[str] = field(default_factory=frozenset)
    discarded_card_ids: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def start(cls, discarded_card_ids: Iterable[str] = ()) -> "SelectionState":
        """Fresh state for one invocation; the caller's collection is copied.

        A single card id may be passed as a plain string.
        """
        if isinstance(discarded_card_ids, str):
            discarded_card_ids = (discarded_card_ids,)
        return cls(discarded_card_ids=frozenset(discarded_card_ids))

    def is_eligible(self, candidate: Candidate) -> bool:
        """Whether *candidate* can still be assigned."""
        return (
            candidate.player.id not in self.used_player_ids
            and candidate.card.id not in self.used_card_ids
            and candidate.card.id not in self.discarded_card_ids
        )

    def select(self, candidate: Candidate) -> "SelectionState":
        """Mark the candidate's player and card as used."""
        return SelectionState(
            used_player_ids=self.used_player_ids | {candidate.player.id},
            used_card_ids=self.used_card_ids | {candidate.card.id},
            discarded_card_ids=self.discarded_card_ids,
        )
