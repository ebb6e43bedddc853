"""Roster and formation factories shared across the test suite."""

from typing import Dict, List, Optional, Sequence

from src.team_generator.models import (
    Formation,
    FormationSlot,
    Player,
    PlayerCard,
    Position,
    Rating,
)

# 4-3-3 with a holding midfielder
DEFAULT_SLOT_POSITIONS = [
    Position.GK,
    Position.RB, Position.CB, Position.CB, Position.LB,
    Position.CDM, Position.CM, Position.CM,
    Position.RW, Position.ST, Position.LW,
]


def make_card(
    card_id: str,
    ratings: Dict[Position, Sequence[float]],
    style: str = "Basic",
    name: Optional[str] = None,
    roles: Optional[Dict[Position, Sequence[Optional[str]]]] = None,
) -> PlayerCard:
    """Card rated at each position with the given values (oldest first)."""
    roles = roles or {}
    ratings_by_position = {}
    for pos, values in ratings.items():
        pos_roles = list(roles.get(pos, [None] * len(values)))
        ratings_by_position[pos] = tuple(
            Rating(value=float(v), role=r) for v, r in zip(values, pos_roles)
        )
    return PlayerCard(
        id=card_id,
        name=name or f"Card {card_id}",
        style=style,
        ratings_by_position=ratings_by_position,
    )


def make_player(player_id: str, cards: List[PlayerCard], name: Optional[str] = None) -> Player:
    return Player(id=player_id, name=name or f"Player {player_id}", cards=cards)


def make_formation(
    positions: Optional[Sequence[Position]] = None,
    styles: Optional[Dict[int, Sequence[str]]] = None,
    formation_id: str = "f433",
    name: str = "4-3-3",
) -> Formation:
    """Formation over *positions* (default 4-3-3); *styles* maps slot index to preferences."""
    positions = list(positions or DEFAULT_SLOT_POSITIONS)
    styles = styles or {}
    slots = [
        FormationSlot(position=pos, styles=tuple(styles.get(i, ())), x=10.0 * i, y=50.0)
        for i, pos in enumerate(positions)
    ]
    return Formation(id=formation_id, name=name, slots=slots)


def make_roster(size: int = 30) -> List[Player]:
    """Deterministic roster where most players own several cards and positions.

    Player ``p<i>`` owns one or two cards, each rated at two or three
    positions, so uniqueness constraints are exercised heavily.
    """
    positions = list(Position)
    players = []
    for i in range(size):
        cards = []
        for c in range(1 + i % 2):
            rated = {}
            for k in range(2 + (i + c) % 2):
                pos = positions[(i + c * 5 + k * 3) % len(positions)]
                base = 5.0 + ((i * 7 + c * 3 + k) % 45) / 10.0
                rated[pos] = [base, min(10.0, base + 0.5), max(1.0, base - 0.3)][: 1 + (i + k) % 3]
            cards.append(
                make_card(f"p{i}-c{c}", rated, style=("Poacher", "Playmaker", "Anchor")[(i + c) % 3])
            )
        players.append(make_player(f"p{i}", cards))
    return players
