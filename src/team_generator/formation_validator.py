"""Formation validation, applied by callers before generating a team."""

import logging
from typing import List, Tuple

from src.team_generator.config import FORMATION_SIZE
from src.team_generator.models import Formation, Position

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when a formation cannot be used for team generation."""

    pass


class FormationValidator:
    """Validates formation structure.

    The generator assumes a valid formation and does not re-check it.
    """

    def __init__(self, formation_size: int = FORMATION_SIZE):
        self.formation_size = formation_size

    def validate(self, formation: Formation) -> Tuple[bool, List[str]]:
        """
        Check slot count, slot positions and style preferences.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if len(formation.slots) != self.formation_size:
            errors.append(
                f"Formation {formation.name!r} has {len(formation.slots)} slots, "
                f"expected {self.formation_size}"
            )

        for index, slot in enumerate(formation.slots):
            if not isinstance(slot.position, Position):
                errors.append(f"Slot {index} has invalid position {slot.position!r}")
            if isinstance(slot.styles, str):
                errors.append(f"Slot {index} styles must be a sequence, got {slot.styles!r}")
                continue
            for style in slot.styles:
                if not isinstance(style, str) or not style.strip():
                    errors.append(f"Slot {index} has invalid style {style!r}")

        return (len(errors) == 0, errors)

    def ensure_valid(self, formation: Formation) -> None:
        """Raise :class:`ValidationError` listing every problem found."""
        is_valid, errors = self.validate(formation)
        if not is_valid:
            logger.warning("Invalid formation %s: %s", formation.id, "; ".join(errors))
            raise ValidationError("; ".join(errors))
