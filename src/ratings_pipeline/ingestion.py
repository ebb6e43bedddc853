"""CSV ingestion for match-rating logs.

Each row is one logged rating: player, card, position, card style, the
rating itself and optionally the league and tactical role. Handles the
quirks of hand-maintained exports:
- Surrounding quotes and stray whitespace
- Decimal commas in ratings (e.g., "7,5")
- Blank rows
"""

import logging
from pathlib import Path

import pandas as pd

from src.ratings_pipeline.config import OPTIONAL_COLUMNS, REQUIRED_COLUMNS

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when CSV ingestion fails."""


def _parse_rating(value):
    """Parse a rating that may use a decimal comma (e.g., '7,5' -> 7.5)."""
    if pd.isna(value):
        return float("nan")
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip().strip('"').replace(",", ".")
    if s == "":
        return float("nan")
    try:
        return float(s)
    except ValueError:
        return float("nan")


def _clean_text(value):
    """Strip quotes/whitespace; blank or missing values become None."""
    if not isinstance(value, str):
        return None
    s = value.strip().strip('"').strip()
    return s or None


class RatingsLogIngester:
    """Reads a rating-log CSV into a DataFrame.

    The returned DataFrame has:
    - All required and optional columns (optional ones filled with None)
    - String columns stripped of quotes and whitespace
    - ``Rating`` parsed as float (NaN where unparseable)
    - Rows without a player name removed
    """

    def read_log(self, filepath: Path) -> pd.DataFrame:
        """Read and normalize one rating log.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            IngestionError: If the file can't be parsed or lacks
                required columns.
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Expected file not found: {filepath}")

        logger.info("Reading rating log: %s", filepath.name)
        try:
            df = pd.read_csv(filepath, dtype=str, quotechar='"', skip_blank_lines=True)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to read {filepath}: {e}") from e

        df.columns = [str(c).strip() for c in df.columns]
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise IngestionError(f"{filepath.name} is missing required columns: {missing}")

        for col in OPTIONAL_COLUMNS:
            if col not in df.columns:
                df[col] = None

        df = df[REQUIRED_COLUMNS + OPTIONAL_COLUMNS].copy()

        # Clean string columns; blanks and NaN become None
        for col in REQUIRED_COLUMNS + OPTIONAL_COLUMNS:
            if col == "Rating":
                continue
            df[col] = df[col].astype(object).map(_clean_text)

        # Drop rows where Player is missing or blank
        df = df[df["Player"].notna()].reset_index(drop=True)

        df["Rating"] = df["Rating"].apply(_parse_rating).astype(float)

        logger.info("Loaded %d rating rows", len(df))
        return df
