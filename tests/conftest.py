"""Shared fixtures for the ideal team generator test suite."""

import textwrap

import pytest

from src.team_generator.generator import IdealTeamGenerator
from tests.helpers import make_formation, make_roster


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def generator():
    return IdealTeamGenerator()


@pytest.fixture
def formation():
    """Default 4-3-3 formation without style preferences."""
    return make_formation()


@pytest.fixture(scope="module")
def roster():
    """Deterministic 30-player roster with overlapping positions."""
    return make_roster(30)


# ------------------------------------------------------------------
# File fixtures
# ------------------------------------------------------------------

@pytest.fixture
def ratings_csv(tmp_path):
    """Small rating log covering aliases, accents and bad rows."""
    path = tmp_path / "ratings.csv"
    path.write_text(
        textwrap.dedent(
            """\
            Player,Card,Position,Style,League,Rating,Role
            Vinícius Jr,TOTY,LW,Regate Veloz,LALIGA EA SPORTS,8.5,Inside Forward
            Vinicius Jr,TOTY,LW,Regate Veloz,,"9,0",Winger
            Vinícius Jr,TOTY,ST,Regate Veloz,,7.0,
            Vinícius Jr,Base,LW,Básico,,6.5,
            Rodri,Base,MCD,Bloqueo,Premier League,8.0,Anchor Man
            Rodri,Base,CDM,Bloqueo,,8.5,Sweeper
            Rodri,Base,XX,Bloqueo,,8.0,
            Courtois,Base,PT,Parada Rápida,,11,
            Courtois,Base,GK,Parada Rápida,,7.5,Goalkeeper
            ,Ghost,ST,Básico,,7.0,
            """
        ),
        encoding="utf-8",
    )
    return path
