"""Ideal team generation - orchestrates pool building, assignment and filling."""

import logging
from typing import Iterable, List, Optional, Sequence

from src.team_generator.assignment import AssignmentEngine
from src.team_generator.candidate_pool import CandidatePoolBuilder
from src.team_generator.models import Formation, IdealTeamSlot, Player
from src.team_generator.placeholder import PlaceholderFiller
from src.team_generator.selection_state import SelectionState

logger = logging.getLogger(__name__)


class IdealTeamGenerator:
    """Main entry point for building an ideal team.

    Coordinates CandidatePoolBuilder (flattening + stats), AssignmentEngine
    (starters then substitutes) and PlaceholderFiller (vacant roles). Holds
    no state between calls; every invocation starts from an empty
    :class:`SelectionState`.

    The formation is assumed valid (see
    :class:`~src.team_generator.formation_validator.FormationValidator`).
    """

    def __init__(
        self,
        pool_builder: Optional[CandidatePoolBuilder] = None,
        engine: Optional[AssignmentEngine] = None,
        filler: Optional[PlaceholderFiller] = None,
    ):
        self.pool_builder = pool_builder or CandidatePoolBuilder()
        self.engine = engine or AssignmentEngine()
        self.filler = filler or PlaceholderFiller()

    def generate(
        self,
        players: Sequence[Player],
        formation: Formation,
        discarded_card_ids: Iterable[str] = (),
    ) -> List[IdealTeamSlot]:
        """Select a starter and a substitute for every formation slot.

        Args:
            players: Roster snapshot. Not mutated.
            formation: Formation with its slots in display order.
            discarded_card_ids: Cards excluded for this call only. Copied,
                never mutated.

        Returns:
            One :class:`IdealTeamSlot` per formation slot, index-aligned.
        """
        candidates = self.pool_builder.build(players)
        state = SelectionState.start(discarded_card_ids)

        starters = self.engine.assign_starters(formation.slots, candidates, state)
        substitutes = self.engine.assign_substitutes(
            formation.slots, candidates, starters.state
        )

        team = self.filler.fill(formation.slots, starters.picks, substitutes.picks)

        logger.info(
            "Generated ideal team for %s: %d candidates, %d discarded, "
            "%d/%d starters, %d/%d substitutes",
            formation.name,
            len(candidates),
            len(state.discarded_card_ids),
            sum(1 for s in team if not s.starter.is_vacant),
            len(team),
            sum(1 for s in team if not s.substitute.is_vacant),
            len(team),
        )
        return team


def generate_ideal_team(
    players: Sequence[Player],
    formation: Formation,
    discarded_card_ids: Iterable[str] = (),
) -> List[IdealTeamSlot]:
    """Convenience wrapper around :meth:`IdealTeamGenerator.generate`."""
    return IdealTeamGenerator().generate(players, formation, discarded_card_ids)
