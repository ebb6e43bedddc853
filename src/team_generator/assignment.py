"""Starter and substitute assignment across formation slots.

Each slot role is resolved by walking an ordered list of selection
strategies. A strategy is a labelled, rating-sorted list of candidates; the
first eligible candidate of the first strategy that has one wins.

Starters:
    1. preferred styles (only when the slot declares some)
    2. whole position pool

Substitutes, for the style pool (if declared) and then the whole pool:
    1. hot-streak candidates
    2. promising candidates
    3. everyone else

Tiers are never blended: a hot-streak candidate with a low average beats
an untagged candidate with a much higher one.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from src.team_generator.candidate_pool import CandidatePoolBuilder
from src.team_generator.models import Candidate, FormationSlot
from src.team_generator.selection_state import SelectionState

logger = logging.getLogger(__name__)

Strategy = Tuple[str, List[Candidate]]

SUBSTITUTE_TIERS: Tuple[Tuple[str, Callable[[Candidate], bool]], ...] = (
    ("hot_streak", lambda c: c.performance.is_hot_streak),
    ("promising", lambda c: c.performance.is_promising),
    (
        "other",
        lambda c: not c.performance.is_hot_streak and not c.performance.is_promising,
    ),
)


@dataclass
class SlotSelection:
    """Outcome of one assignment pass over the formation."""

    picks: List[Optional[Candidate]]
    state: SelectionState


class AssignmentEngine:
    """Resolves starters, then substitutes, under a shared no-reuse state."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def assign_starters(
        self,
        slots: Sequence[FormationSlot],
        candidates: Sequence[Candidate],
        state: SelectionState,
    ) -> SlotSelection:
        """Pick a starter for every slot in formation order.

        Each pick is marked used before the next slot is considered.
        Slots without an eligible candidate get ``None``.
        """
        return self._run_pass(slots, candidates, state, self.starter_strategies, "starter")

    def assign_substitutes(
        self,
        slots: Sequence[FormationSlot],
        candidates: Sequence[Candidate],
        state: SelectionState,
    ) -> SlotSelection:
        """Pick a substitute for every slot, given the state after starters."""
        return self._run_pass(
            slots, candidates, state, self.substitute_strategies, "substitute"
        )

    # ------------------------------------------------------------------
    # Strategy chains
    # ------------------------------------------------------------------

    @staticmethod
    def starter_strategies(
        slot: FormationSlot, position_pool: List[Candidate]
    ) -> Iterator[Strategy]:
        if slot.has_style_preference:
            yield "style", _style_filtered(position_pool, slot)
        yield "position", position_pool

    @staticmethod
    def substitute_strategies(
        slot: FormationSlot, position_pool: List[Candidate]
    ) -> Iterator[Strategy]:
        pools = []
        if slot.has_style_preference:
            pools.append(("style", lambda: _style_filtered(position_pool, slot)))
        pools.append(("position", lambda: position_pool))

        for pool_label, pool in pools:
            for tier_label, in_tier in SUBSTITUTE_TIERS:
                yield f"{pool_label}/{tier_label}", [c for c in pool() if in_tier(c)]

    @staticmethod
    def select_first_eligible(
        strategies: Iterator[Strategy], state: SelectionState
    ) -> Tuple[Optional[Candidate], Optional[str]]:
        """First eligible candidate of the first strategy that has one.

        Strategies are consumed lazily, so later ones are never built once
        an earlier one succeeds.

        Returns:
            ``(candidate, strategy_label)``, or ``(None, None)``.
        """
        for label, candidates in strategies:
            for candidate in candidates:
                if state.is_eligible(candidate):
                    return candidate, label
        return None, None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _run_pass(
        self,
        slots: Sequence[FormationSlot],
        candidates: Sequence[Candidate],
        state: SelectionState,
        strategies_for: Callable[[FormationSlot, List[Candidate]], Iterator[Strategy]],
        role: str,
    ) -> SlotSelection:
        picks: List[Optional[Candidate]] = []
        for index, slot in enumerate(slots):
            position_pool = CandidatePoolBuilder.for_position(candidates, slot.position)
            candidate, label = self.select_first_eligible(
                strategies_for(slot, position_pool), state
            )

            if candidate is None:
                logger.debug(
                    "Slot %d (%s): no eligible %s", index, slot.position.value, role
                )
            else:
                state = state.select(candidate)
                logger.debug(
                    "Slot %d (%s): %s %s [%s] avg %.2f via %s",
                    index,
                    slot.position.value,
                    role,
                    candidate.player.name,
                    candidate.card.name,
                    candidate.average,
                    label,
                )
            picks.append(candidate)

        return SlotSelection(picks=picks, state=state)


def _style_filtered(candidates: List[Candidate], slot: FormationSlot) -> List[Candidate]:
    return [c for c in candidates if c.card.style in slot.styles]
