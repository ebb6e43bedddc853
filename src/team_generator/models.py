"""Data models for the ideal team generator.

Roster inputs (Player, PlayerCard, Rating), formation inputs (Formation,
FormationSlot) and the generator's outputs (IdealTeamSlot holding an
AssignedPlayer or a Vacant role).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union


class Position(str, Enum):
    """Field positions a card can be rated at."""

    GK = "GK"
    RB = "RB"
    LB = "LB"
    CB = "CB"
    CDM = "CDM"
    RM = "RM"
    LM = "LM"
    CM = "CM"
    CAM = "CAM"
    RW = "RW"
    LW = "LW"
    ST = "ST"

    @property
    def group(self) -> str:
        """Line of the pitch this position belongs to."""
        return POSITION_GROUPS[self]


POSITION_GROUPS: Dict[Position, str] = {
    Position.GK: "Goalkeeper",
    Position.RB: "Defender",
    Position.LB: "Defender",
    Position.CB: "Defender",
    Position.CDM: "Midfielder",
    Position.RM: "Midfielder",
    Position.LM: "Midfielder",
    Position.CM: "Midfielder",
    Position.CAM: "Midfielder",
    Position.RW: "Forward",
    Position.LW: "Forward",
    Position.ST: "Forward",
}

# Tactical roles a rating may be logged under, per position
POSITION_ROLES: Dict[Position, Tuple[str, ...]] = {
    Position.GK: ("Goalkeeper", "Sweeper Keeper"),
    Position.RB: ("Full-Back", "Wing-Back", "Inverted Wing-Back"),
    Position.LB: ("Full-Back", "Wing-Back", "Inverted Wing-Back"),
    Position.CB: ("Center-Back", "Stopper", "Sweeper"),
    Position.CDM: ("Anchor Man", "Deep-Lying Playmaker", "Ball-Winning Midfielder"),
    Position.RM: ("Wide Midfielder", "Winger"),
    Position.LM: ("Wide Midfielder", "Winger"),
    Position.CM: ("Box-to-Box", "Central Midfielder", "Roaming Playmaker"),
    Position.CAM: ("Attacking Midfielder", "Advanced Playmaker", "Trequartista"),
    Position.RW: ("Winger", "Inside Forward", "Raumdeuter"),
    Position.LW: ("Winger", "Inside Forward", "Raumdeuter"),
    Position.ST: ("Poacher", "Target Man", "Complete Forward", "Pressing Forward", "False 9"),
}


@dataclass(frozen=True)
class Rating:
    """A single match rating. Immutable once recorded."""

    value: float
    role: Optional[str] = None


@dataclass
class PlayerCard:
    """A separately-rated version of a player (e.g. a special edition)."""

    id: str
    name: str
    style: str
    league: Optional[str] = None
    # Insertion order of each tuple is chronological
    ratings_by_position: Dict[Position, Tuple[Rating, ...]] = field(default_factory=dict)

    def ratings_at(self, position: Position) -> Tuple[Rating, ...]:
        """Rating history at *position*; empty when the card was never rated there."""
        return self.ratings_by_position.get(position, ())

    def rated_positions(self) -> Iterator[Position]:
        """Positions holding at least one rating, in enumeration order."""
        for position in Position:
            if self.ratings_at(position):
                yield position


@dataclass
class Player:
    """A roster entry owning one or more cards."""

    id: str
    name: str
    cards: List[PlayerCard] = field(default_factory=list)


@dataclass(frozen=True)
class FormationSlot:
    """One of the fixed roles in a formation.

    ``x``/``y`` are display coordinates; the generator passes them through.
    """

    position: Position
    styles: Tuple[str, ...] = ()
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def has_style_preference(self) -> bool:
        return len(self.styles) > 0


@dataclass
class Formation:
    """A tactical formation: an ordered sequence of slots."""

    id: str
    name: str
    slots: List[FormationSlot] = field(default_factory=list)


@dataclass(frozen=True)
class PlayerStats:
    """Summary statistics of a rating history."""

    average: float
    matches: int
    std_dev: float


@dataclass(frozen=True)
class PlayerPerformance:
    """Stats plus classification tags for one (card, position) pair."""

    stats: PlayerStats
    is_hot_streak: bool = False
    is_consistent: bool = False
    is_promising: bool = False
    is_versatile: bool = False
    most_common_role: Optional[str] = None

    @classmethod
    def empty(cls) -> "PlayerPerformance":
        """All-zero stats with every tag off."""
        return cls(stats=PlayerStats(average=0.0, matches=0, std_dev=0.0))


@dataclass(frozen=True)
class Candidate:
    """Ephemeral (player, card, position) combination considered for a slot."""

    player: Player
    card: PlayerCard
    position: Position
    average: float
    performance: PlayerPerformance


@dataclass(frozen=True)
class AssignedPlayer:
    """A slot role filled by a candidate."""

    player: Player
    card: PlayerCard
    position: Position
    average: float
    performance: PlayerPerformance
    is_vacant: bool = field(default=False, init=False)

    @classmethod
    def from_candidate(cls, candidate: Candidate, position: Position) -> "AssignedPlayer":
        return cls(
            player=candidate.player,
            card=candidate.card,
            position=position,
            average=candidate.average,
            performance=candidate.performance,
        )


@dataclass(frozen=True)
class Vacant:
    """A slot role no eligible candidate could fill."""

    position: Position
    average: float = field(default=0.0, init=False)
    performance: PlayerPerformance = field(default_factory=PlayerPerformance.empty, init=False)
    is_vacant: bool = field(default=True, init=False)


SlotAssignment = Union[AssignedPlayer, Vacant]


@dataclass(frozen=True)
class IdealTeamSlot:
    """Starter and substitute for one formation slot."""

    slot: FormationSlot
    starter: SlotAssignment
    substitute: SlotAssignment
