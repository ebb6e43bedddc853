"""Data cleaning for rating logs.

Handles standardization before rows are grouped into players and cards:
- Canonical position codes (Spanish aliases -> enumeration values)
- Out-of-range or missing ratings dropped
- Roles not valid for the position blanked
- Player and card names normalized for matching
"""

import logging
import re
import unicodedata
from typing import Optional

import pandas as pd

from src.ratings_pipeline.config import POSITION_ALIASES
from src.team_generator.config import MAX_RATING, MIN_RATING
from src.team_generator.models import POSITION_ROLES, Position

logger = logging.getLogger(__name__)

_VALID_POSITIONS = {p.value for p in Position}

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9]+")


class RatingsCleaner:
    """Cleans and standardizes rating-log rows."""

    # ------------------------------------------------------------------
    # Text helpers
    # ------------------------------------------------------------------
    @staticmethod
    def normalize_text(text: str) -> str:
        """Accent-insensitive, case-insensitive form of a name.

        Examples:
            "Vinícius Jr"  -> "vinicius jr"
            "  MBAPPÉ "    -> "mbappe"
        """
        if text is None or pd.isna(text):
            return ""
        decomposed = unicodedata.normalize("NFD", str(text))
        stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
        return _WHITESPACE.sub(" ", stripped).strip().lower()

    @classmethod
    def slugify(cls, text: str) -> str:
        """Identifier-safe form of a name ("Vinícius Jr" -> "vinicius-jr")."""
        return _NON_SLUG.sub("-", cls.normalize_text(text)).strip("-")

    # ------------------------------------------------------------------
    # Position / role helpers
    # ------------------------------------------------------------------
    @staticmethod
    def canonical_position(pos_str: str) -> Optional[str]:
        """Map a position code to its canonical value.

        Examples:
            "st"  -> "ST"
            "DFC" -> "CB"
            "XX"  -> None
        """
        if pos_str is None or pd.isna(pos_str):
            return None
        code = str(pos_str).strip().upper()
        code = POSITION_ALIASES.get(code, code)
        return code if code in _VALID_POSITIONS else None

    @staticmethod
    def valid_role(role: Optional[str], position: Optional[str]) -> Optional[str]:
        """Return *role* if it is a known role for *position*, else None."""
        if role is None or position is None or pd.isna(role):
            return None
        allowed = POSITION_ROLES[Position(position)]
        for known in allowed:
            if known.lower() == str(role).strip().lower():
                return known
        return None

    # ------------------------------------------------------------------
    # Full cleaning pass
    # ------------------------------------------------------------------
    def clean(self, df: pd.DataFrame) -> pd.DataFrame:
        """Clean an ingested rating log.

        Returns a copy with canonical ``Position``, validated ``Role`` and
        added ``Player_Norm`` / ``Card_Norm`` columns. Rows with unknown
        positions, missing card or style, or ratings outside
        ``[MIN_RATING, MAX_RATING]`` are dropped. Row order is preserved.
        """
        out = df.copy()

        out["Position"] = out["Position"].apply(self.canonical_position)
        bad_pos = out["Position"].isna()
        if bad_pos.any():
            logger.warning(
                "Dropping %d rows with unrecognized position: %s",
                bad_pos.sum(),
                sorted(set(str(v) for v in df.loc[bad_pos, "Position"])),
            )
            out = out[~bad_pos]

        bad_rating = out["Rating"].isna() | (out["Rating"] < MIN_RATING) | (out["Rating"] > MAX_RATING)
        if bad_rating.any():
            logger.warning(
                "Dropping %d rows with missing or out-of-range rating", bad_rating.sum()
            )
            out = out[~bad_rating]

        incomplete = out["Card"].isna() | out["Style"].isna()
        if incomplete.any():
            logger.warning("Dropping %d rows without card name or style", incomplete.sum())
            out = out[~incomplete]

        cleaned_roles = [
            self.valid_role(role, pos) for role, pos in zip(out["Role"], out["Position"])
        ]
        unknown_roles = sum(
            1 for raw, kept in zip(out["Role"], cleaned_roles)
            if pd.notna(raw) and kept is None
        )
        if unknown_roles:
            logger.warning("Cleared %d roles not valid for their position", unknown_roles)
        out["Role"] = pd.Series(cleaned_roles, index=out.index, dtype=object)

        out["Player_Norm"] = out["Player"].apply(self.normalize_text)
        out["Card_Norm"] = out["Card"].apply(self.normalize_text)

        out = out.reset_index(drop=True)
        logger.info("Cleaned rating log: %d of %d rows kept", len(out), len(df))
        return out
