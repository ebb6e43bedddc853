"""Generate the ideal team for a formation from JSON snapshots.

Usage:
    python -m src.team_generator.run_generate players.json formations.json [formation_id] [--discard CARD_ID ...]

Examples:
    python -m src.team_generator.run_generate data/snapshots/players.json data/snapshots/formations.json
    python -m src.team_generator.run_generate players.json formations.json f433 --discard card-7 card-9
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from src.logging_config import setup_logging
from src.team_generator.formation_validator import FormationValidator
from src.team_generator.generator import IdealTeamGenerator
from src.team_generator.models import IdealTeamSlot
from src.team_generator.report import lineup_frame
from src.team_generator.snapshot_io import SnapshotIO

logger = logging.getLogger(__name__)


def parse_args(argv: List[str]) -> Tuple[Path, Path, Optional[str], List[str]]:
    """Split ``argv`` into (players_path, formations_path, formation_id, discarded)."""
    if "--discard" in argv:
        split = argv.index("--discard")
        positional, discarded = argv[:split], argv[split + 1:]
    else:
        positional, discarded = argv, []

    if len(positional) < 2:
        raise ValueError(
            "Usage: run_generate players.json formations.json "
            "[formation_id] [--discard CARD_ID ...]"
        )

    formation_id = positional[2] if len(positional) > 2 else None
    return Path(positional[0]), Path(positional[1]), formation_id, discarded


def run_generate(
    players_path: Path,
    formations_path: Path,
    formation_id: Optional[str] = None,
    discarded_card_ids: Iterable[str] = (),
    output_dir: Optional[Path] = None,
) -> Tuple[List[IdealTeamSlot], Path]:
    """Load snapshots, validate the formation, generate and save the team.

    Returns:
        ``(team, saved_path)``.

    Raises:
        FileNotFoundError: If a snapshot file doesn't exist.
        ValueError: If a snapshot is malformed.
        ValidationError: If the formation is invalid.
    """
    io = SnapshotIO(output_dir)
    discarded = list(discarded_card_ids)

    players = io.load_players(players_path)
    formation = io.load_formation(formations_path, formation_id)
    FormationValidator().ensure_valid(formation)

    team = IdealTeamGenerator().generate(players, formation, discarded)
    saved = io.save_team(team, formation, discarded)
    return team, saved


if __name__ == "__main__":
    setup_logging()

    try:
        players_path, formations_path, formation_id, discarded = parse_args(sys.argv[1:])
        team, output = run_generate(players_path, formations_path, formation_id, discarded)
        print(lineup_frame(team).to_string(index=False))
        print(f"Saved: {output}")
    except Exception:
        logger.exception("Team generation failed")
        sys.exit(1)
