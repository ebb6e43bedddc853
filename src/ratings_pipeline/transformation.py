"""Roster transformation for cleaned rating logs.

Groups rating rows into the generator's roster model:
- One Player per normalized player name (first spelling seen is kept)
- One PlayerCard per normalized card name within that player
- Ratings per position in log order (log order = chronological)
- Deterministic ids derived from names
"""

import logging
from typing import Dict, List, Optional

import pandas as pd

from src.ratings_pipeline.cleaning import RatingsCleaner
from src.team_generator.models import Player, PlayerCard, Position, Rating

logger = logging.getLogger(__name__)

# Keys expected in the cleaned DataFrame passed to to_players()
_REQUIRED_COLUMNS = {
    "Player", "Card", "Position", "Style", "Rating", "League", "Role",
    "Player_Norm", "Card_Norm",
}


class RosterTransformer:
    """Turns a cleaned rating log into a list of players."""

    def to_players(self, df: pd.DataFrame) -> List[Player]:
        """Build players, in order of first appearance in the log.

        Args:
            df: Output of :meth:`RatingsCleaner.clean`.

        Returns:
            List of :class:`Player` with their cards and ratings.
        """
        missing = _REQUIRED_COLUMNS - set(df.columns)
        if missing:
            raise ValueError(f"Cleaned data is missing columns: {sorted(missing)}")

        players: List[Player] = []
        used_ids: Dict[str, int] = {}

        for _, player_rows in df.groupby("Player_Norm", sort=False):
            player_id = self._unique_id(
                RatingsCleaner.slugify(player_rows["Player"].iloc[0]) or "player",
                used_ids,
            )
            card_ids: Dict[str, int] = {}
            cards = [
                self._make_card(player_id, card_rows, card_ids)
                for _, card_rows in player_rows.groupby("Card_Norm", sort=False)
            ]
            players.append(
                Player(id=player_id, name=player_rows["Player"].iloc[0], cards=cards)
            )

        logger.info(
            "Transformed %d ratings into %d players (%d cards)",
            len(df),
            len(players),
            sum(len(p.cards) for p in players),
        )
        return players

    def _make_card(
        self, player_id: str, rows: pd.DataFrame, card_ids: Dict[str, int]
    ) -> PlayerCard:
        """Build one card from all of its rating rows."""
        card_name = rows["Card"].iloc[0]
        ratings: Dict[Position, List[Rating]] = {}
        for _, row in rows.iterrows():
            ratings.setdefault(Position(row["Position"]), []).append(
                Rating(value=float(row["Rating"]), role=row["Role"])
            )

        return PlayerCard(
            id=self._unique_id(
                f"{player_id}--{RatingsCleaner.slugify(card_name) or 'card'}", card_ids
            ),
            name=card_name,
            style=self._last_value(rows["Style"]),
            league=self._last_value(rows["League"]),
            ratings_by_position={pos: tuple(rs) for pos, rs in ratings.items()},
        )

    @staticmethod
    def _last_value(values: pd.Series) -> Optional[str]:
        """Most recent non-empty value (later edits win)."""
        present = values.dropna()
        return present.iloc[-1] if len(present) else None

    @staticmethod
    def _unique_id(base: str, used_ids: Dict[str, int]) -> str:
        """Suffix *base* when two different names slugify alike."""
        count = used_ids.get(base, 0)
        used_ids[base] = count + 1
        return base if count == 0 else f"{base}-{count + 1}"
