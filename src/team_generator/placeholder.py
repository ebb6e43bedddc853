"""Turn assignment picks into uniform slot records, filling gaps with Vacant."""

from typing import List, Optional, Sequence

from src.team_generator.models import (
    AssignedPlayer,
    Candidate,
    FormationSlot,
    IdealTeamSlot,
    SlotAssignment,
    Vacant,
)


class PlaceholderFiller:
    """Builds the final per-slot records.

    Unresolved roles become :class:`Vacant` carrying the slot's position,
    so every output slot has the same shape regardless of roster size.
    """

    @staticmethod
    def resolve(candidate: Optional[Candidate], slot: FormationSlot) -> SlotAssignment:
        if candidate is None:
            return Vacant(position=slot.position)
        return AssignedPlayer.from_candidate(candidate, slot.position)

    def fill(
        self,
        slots: Sequence[FormationSlot],
        starters: Sequence[Optional[Candidate]],
        substitutes: Sequence[Optional[Candidate]],
    ) -> List[IdealTeamSlot]:
        """Combine index-aligned starter and substitute picks per slot."""
        return [
            IdealTeamSlot(
                slot=slot,
                starter=self.resolve(starter, slot),
                substitute=self.resolve(substitute, slot),
            )
            for slot, starter, substitute in zip(slots, starters, substitutes)
        ]
