"""Snapshot I/O - read roster/formation JSON snapshots and save generated teams."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from src.team_generator.config import MAX_RATING, MIN_RATING, TEAMS_DIR
from src.team_generator.models import (
    Formation,
    FormationSlot,
    IdealTeamSlot,
    Player,
    PlayerCard,
    PlayerPerformance,
    Position,
    Rating,
    SlotAssignment,
)

logger = logging.getLogger(__name__)


class SnapshotIO:
    """Converts between JSON snapshots and the generator's data models.

    Roster and formation snapshots are read-only inputs supplied by the
    persistence layer; generated teams are written to ``storage_dir``.
    """

    def __init__(self, storage_dir: Optional[Path] = None):
        self.storage_dir = storage_dir or TEAMS_DIR

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_players(self, filepath: Path) -> List[Player]:
        """Load a roster snapshot.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the content is malformed.
        """
        data = self._read_json(filepath)
        players = self.players_from_dict(data)
        logger.info(
            "Loaded %d players (%d cards) from %s",
            len(players),
            sum(len(p.cards) for p in players),
            filepath,
        )
        return players

    def load_formation(self, filepath: Path, formation_id: Optional[str] = None) -> Formation:
        """Load one formation from a snapshot.

        The file may hold a single formation object or
        ``{"formations": [...]}``; in the latter case *formation_id*
        selects one (default: the first).

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the content is malformed or the id is unknown.
        """
        data = self._read_json(filepath)
        if not isinstance(data, dict):
            raise ValueError(f"Malformed formation snapshot {filepath}: expected an object")

        if "formations" in data:
            entries = data["formations"]
            if not entries:
                raise ValueError(f"No formations found in {filepath}")
            if formation_id is None:
                entry = entries[0]
            else:
                matches = [f for f in entries if f.get("id") == formation_id]
                if not matches:
                    raise ValueError(
                        f"Formation {formation_id!r} not found in {filepath}"
                    )
                entry = matches[0]
        else:
            entry = data

        formation = self.formation_from_dict(entry)
        logger.info("Loaded formation %s (%s) from %s", formation.id, formation.name, filepath)
        return formation

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------

    def save_team(
        self,
        team: Sequence[IdealTeamSlot],
        formation: Formation,
        discarded_card_ids: Iterable[str] = (),
    ) -> Path:
        """Save a generated team to JSON and point ``latest_team.json`` at it.

        Returns:
            Path to the saved file.
        """
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.storage_dir / f"ideal_team_{formation.id}.json"

        output = {
            "metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "formation_id": formation.id,
                "formation_name": formation.name,
            },
            "team": self.team_to_dict(team, discarded_card_ids),
        }

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2)

        self._update_latest_link(filepath)
        logger.info("Saved ideal team for %s to %s", formation.name, filepath)
        return filepath

    def save_players(self, players: Sequence[Player], filepath: Path) -> Path:
        """Write a roster snapshot."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.players_to_dict(players), f, indent=2, ensure_ascii=False)
        logger.info("Saved %d players to %s", len(players), filepath)
        return filepath

    # ------------------------------------------------------------------
    # Conversion: dict -> model
    # ------------------------------------------------------------------

    def players_from_dict(self, data: Dict) -> List[Player]:
        """Reconstruct players from ``{"players": [...]}``."""
        try:
            return [
                Player(
                    id=str(pd["id"]),
                    name=pd["name"],
                    cards=[self._card_from_dict(cd) for cd in pd.get("cards", [])],
                )
                for pd in data["players"]
            ]
        except KeyError as e:
            raise ValueError(f"Malformed roster snapshot: missing key {e}") from e
        except (TypeError, AttributeError) as e:
            raise ValueError(f"Malformed roster snapshot: {e}") from e

    def formation_from_dict(self, data: Dict) -> Formation:
        """Reconstruct a formation from its dict form."""
        try:
            slots = [
                FormationSlot(
                    position=_parse_position(sd["position"]),
                    styles=_parse_styles(sd.get("styles")),
                    x=sd.get("x"),
                    y=sd.get("y"),
                )
                for sd in data["slots"]
            ]
            return Formation(id=str(data["id"]), name=data["name"], slots=slots)
        except KeyError as e:
            raise ValueError(f"Malformed formation snapshot: missing key {e}") from e
        except (TypeError, AttributeError) as e:
            raise ValueError(f"Malformed formation snapshot: {e}") from e

    def _card_from_dict(self, data: Dict) -> PlayerCard:
        ratings_by_position = {}
        for pos_key, ratings in (data.get("ratings_by_position") or {}).items():
            ratings_by_position[_parse_position(pos_key)] = tuple(
                _parse_rating(r) for r in ratings
            )
        return PlayerCard(
            id=str(data["id"]),
            name=data["name"],
            style=data["style"],
            league=data.get("league"),
            ratings_by_position=ratings_by_position,
        )

    # ------------------------------------------------------------------
    # Conversion: model -> dict
    # ------------------------------------------------------------------

    def players_to_dict(self, players: Sequence[Player]) -> Dict:
        """Convert players to a JSON-serializable dict."""
        return {
            "players": [
                {
                    "id": player.id,
                    "name": player.name,
                    "cards": [
                        {
                            "id": card.id,
                            "name": card.name,
                            "style": card.style,
                            "league": card.league,
                            "ratings_by_position": {
                                pos.value: [
                                    {"value": r.value, "role": r.role}
                                    for r in card.ratings_at(pos)
                                ]
                                for pos in card.rated_positions()
                            },
                        }
                        for card in player.cards
                    ],
                }
                for player in players
            ]
        }

    def team_to_dict(
        self,
        team: Sequence[IdealTeamSlot],
        discarded_card_ids: Iterable[str] = (),
    ) -> Dict:
        """Convert a generated team to a JSON-serializable dict.

        Output depends only on the inputs, so equal teams serialize
        identically.
        """
        return {
            "discarded_card_ids": sorted(set(discarded_card_ids)),
            "slots": [
                {
                    "position": entry.slot.position.value,
                    "styles": list(entry.slot.styles),
                    "x": entry.slot.x,
                    "y": entry.slot.y,
                    "starter": self._assignment_to_dict(entry.starter),
                    "substitute": self._assignment_to_dict(entry.substitute),
                }
                for entry in team
            ],
        }

    @staticmethod
    def _assignment_to_dict(assignment: SlotAssignment) -> Dict:
        result = {
            "vacant": assignment.is_vacant,
            "position": assignment.position.value,
            "average": assignment.average,
            "performance": _performance_to_dict(assignment.performance),
        }
        if not assignment.is_vacant:
            result.update(
                {
                    "player_id": assignment.player.id,
                    "player_name": assignment.player.name,
                    "card_id": assignment.card.id,
                    "card_name": assignment.card.name,
                    "style": assignment.card.style,
                }
            )
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _read_json(filepath: Path) -> Dict:
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Snapshot file not found: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Corrupt snapshot file {filepath}: {e}") from e

    def _update_latest_link(self, filepath: Path):
        """Update symlink to the most recently generated team."""
        latest_link = self.storage_dir / "latest_team.json"

        if latest_link.exists() or latest_link.is_symlink():
            latest_link.unlink()

        latest_link.symlink_to(filepath.name)


def _parse_position(value: str) -> Position:
    try:
        return Position(value)
    except ValueError as e:
        raise ValueError(f"Unknown position {value!r}") from e


def _parse_styles(value) -> Tuple[str, ...]:
    """Slot style preferences must be a list of names (or absent)."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValueError(f"Slot styles must be a list, got {value!r}")
    return tuple(value)


def _parse_rating(value) -> Rating:
    """Ratings are ``{"value": n, "role": r}`` or, in older snapshots, bare numbers."""
    if isinstance(value, dict):
        rating = Rating(value=float(value["value"]), role=value.get("role"))
    else:
        rating = Rating(value=float(value))
    if not MIN_RATING <= rating.value <= MAX_RATING:
        raise ValueError(
            f"Rating {rating.value} outside [{MIN_RATING}, {MAX_RATING}]"
        )
    return rating


def _performance_to_dict(performance: PlayerPerformance) -> Dict:
    return {
        "average": performance.stats.average,
        "matches": performance.stats.matches,
        "std_dev": performance.stats.std_dev,
        "is_hot_streak": performance.is_hot_streak,
        "is_consistent": performance.is_consistent,
        "is_promising": performance.is_promising,
        "is_versatile": performance.is_versatile,
        "most_common_role": performance.most_common_role,
    }
