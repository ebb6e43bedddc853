"""Tabular lineup view of a generated team."""

from typing import Sequence

import pandas as pd

from src.team_generator.models import IdealTeamSlot, SlotAssignment

LINEUP_COLUMNS = [
    "Slot", "Role", "Position", "Group", "Player", "Card", "Style",
    "Average", "Matches", "Tags",
]

_TAG_LABELS = (
    ("is_hot_streak", "hot"),
    ("is_consistent", "consistent"),
    ("is_promising", "promising"),
    ("is_versatile", "versatile"),
)


def _tags(assignment: SlotAssignment) -> str:
    performance = assignment.performance
    return ",".join(label for attr, label in _TAG_LABELS if getattr(performance, attr))


def _row(index: int, role: str, assignment: SlotAssignment) -> dict:
    vacant = assignment.is_vacant
    return {
        "Slot": index + 1,
        "Role": role,
        "Position": assignment.position.value,
        "Group": assignment.position.group,
        "Player": "Vacant" if vacant else assignment.player.name,
        "Card": None if vacant else assignment.card.name,
        "Style": None if vacant else assignment.card.style,
        "Average": round(assignment.average, 2),
        "Matches": assignment.performance.stats.matches,
        "Tags": _tags(assignment),
    }


def lineup_frame(team: Sequence[IdealTeamSlot]) -> pd.DataFrame:
    """One row per role: all starters in slot order, then all substitutes."""
    rows = [_row(i, "Starter", entry.starter) for i, entry in enumerate(team)]
    rows += [_row(i, "Substitute", entry.substitute) for i, entry in enumerate(team)]
    return pd.DataFrame(rows, columns=LINEUP_COLUMNS)
