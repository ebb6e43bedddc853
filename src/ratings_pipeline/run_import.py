"""Import a rating-log CSV into a roster snapshot.

Usage:
    python -m src.ratings_pipeline.run_import ratings.csv [output.json]

Examples:
    python -m src.ratings_pipeline.run_import data/raw/ratings.csv
    python -m src.ratings_pipeline.run_import ratings.csv /tmp/players.json
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from src.logging_config import setup_logging
from src.ratings_pipeline.cleaning import RatingsCleaner
from src.ratings_pipeline.config import PLAYERS_SNAPSHOT, SNAPSHOTS_DIR
from src.ratings_pipeline.ingestion import RatingsLogIngester
from src.ratings_pipeline.transformation import RosterTransformer
from src.team_generator.snapshot_io import SnapshotIO

logger = logging.getLogger(__name__)


def run_import(csv_path: Path, output_path: Optional[Path] = None) -> Path:
    """Run ingestion, cleaning and transformation, then write the snapshot.

    Args:
        csv_path: Rating log to import.
        output_path: Snapshot destination.
            Defaults to ``data/snapshots/players.json``.

    Returns:
        Path to the written roster snapshot.

    Raises:
        FileNotFoundError: If the CSV doesn't exist.
        IngestionError: If the CSV can't be parsed.
    """
    if output_path is None:
        output_path = SNAPSHOTS_DIR / PLAYERS_SNAPSHOT

    logger.info("Starting import of %s", csv_path)

    logger.info("Step 1/3: Ingesting rating log...")
    raw = RatingsLogIngester().read_log(csv_path)

    logger.info("Step 2/3: Cleaning rows...")
    cleaned = RatingsCleaner().clean(raw)

    logger.info("Step 3/3: Building roster...")
    players = RosterTransformer().to_players(cleaned)

    output = SnapshotIO().save_players(players, Path(output_path))

    pos_counts: Dict[str, int] = {}
    for pos in cleaned["Position"]:
        pos_counts[pos] = pos_counts.get(pos, 0) + 1

    logger.info("Import complete! Output: %s", output)
    logger.info("  Total players: %d", len(players))
    logger.info(
        "  Ratings by position: %s",
        ", ".join(f"{k}={v}" for k, v in sorted(pos_counts.items())),
    )
    return output


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print("Usage: python -m src.ratings_pipeline.run_import ratings.csv [output.json]")
        sys.exit(2)

    csv_path = Path(sys.argv[1])
    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        output = run_import(csv_path, output_path)
        print(f"Import complete: {output}")
    except Exception:
        logger.exception("Import failed")
        sys.exit(1)
