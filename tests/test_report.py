"""Tests for the lineup report."""

from src.team_generator.generator import generate_ideal_team
from src.team_generator.models import Position
from src.team_generator.report import LINEUP_COLUMNS, lineup_frame
from tests.helpers import make_card, make_formation, make_player


def _team():
    players = [
        make_player("a", [make_card("a1", {Position.ST: [9, 9, 9, 9, 9]}, style="Poacher")],
                    name="Striker"),
        make_player("b", [make_card("b1", {Position.ST: [6]}, style="Decoy")], name="Backup"),
    ]
    return generate_ideal_team(players, make_formation([Position.ST] + [Position.GK] * 10))


class TestLineupFrame:
    def test_one_row_per_role(self):
        df = lineup_frame(_team())
        assert len(df) == 22
        assert list(df.columns) == LINEUP_COLUMNS

    def test_starters_listed_first(self):
        df = lineup_frame(_team())
        assert (df["Role"].iloc[:11] == "Starter").all()
        assert (df["Role"].iloc[11:] == "Substitute").all()

    def test_assigned_rows(self):
        df = lineup_frame(_team())
        starter = df.iloc[0]
        assert starter["Player"] == "Striker"
        assert starter["Group"] == "Forward"
        assert starter["Average"] == 9.0
        assert starter["Tags"] == "consistent,promising"

        substitute = df.iloc[11]
        assert substitute["Player"] == "Backup"
        assert substitute["Tags"] == "promising"

    def test_vacant_rows(self):
        df = lineup_frame(_team())
        keeper = df.iloc[1]
        assert keeper["Player"] == "Vacant"
        assert keeper["Position"] == "GK"
        assert keeper["Average"] == 0.0
        assert keeper["Tags"] == ""
