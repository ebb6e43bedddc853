"""End-to-end tests for ideal team generation."""

import copy
import json

import pytest

from src.team_generator.generator import IdealTeamGenerator, generate_ideal_team
from src.team_generator.models import AssignedPlayer, Position, Vacant
from src.team_generator.snapshot_io import SnapshotIO
from tests.helpers import make_card, make_formation, make_player, make_roster


def _filled_roles(team):
    for entry in team:
        for role in (entry.starter, entry.substitute):
            if not role.is_vacant:
                yield role


# ── Output shape ─────────────────────────────────────────────────────

class TestVacantShape:
    def test_empty_roster_all_vacant(self, generator, formation):
        team = generator.generate([], formation)
        assert len(team) == 11
        for entry, slot in zip(team, formation.slots):
            for role in (entry.starter, entry.substitute):
                assert isinstance(role, Vacant)
                assert role.is_vacant is True
                assert role.position == slot.position
                assert role.average == 0.0
                assert role.performance.stats.matches == 0
                assert role.performance.stats.std_dev == 0.0
                assert not any([
                    role.performance.is_hot_streak,
                    role.performance.is_consistent,
                    role.performance.is_promising,
                    role.performance.is_versatile,
                ])

    def test_index_aligned_with_formation(self, generator, formation, roster):
        team = generator.generate(roster, formation)
        assert [e.slot for e in team] == formation.slots

    def test_coordinates_passed_through(self, generator, formation):
        team = generator.generate([], formation)
        assert [(e.slot.x, e.slot.y) for e in team] == [
            (s.x, s.y) for s in formation.slots
        ]

    def test_assigned_role_carries_slot_position(self, generator):
        player = make_player("a", [make_card("a1", {Position.ST: [8]})])
        team = generator.generate([player], make_formation([Position.ST] * 11))
        assert isinstance(team[0].starter, AssignedPlayer)
        assert team[0].starter.position == Position.ST


# ── Single player scenario ───────────────────────────────────────────

class TestSinglePlayerScenario:
    def test_player_used_once(self, generator):
        """One card rated [9,9,9] at ST and [5] at GK; two ST slots."""
        player = make_player("A", [
            make_card("A1", {Position.ST: [9, 9, 9], Position.GK: [5]}),
        ])
        positions = [Position.ST, Position.ST] + [Position.GK] + [Position.CB] * 8
        team = generator.generate([player], make_formation(positions))

        assert team[0].starter.player.id == "A"
        assert team[0].starter.card.id == "A1"
        assert team[0].starter.average == 9.0
        assert team[1].starter.is_vacant
        assert team[2].starter.is_vacant  # GK rating exists but A is taken
        assert all(e.substitute.is_vacant for e in team)


# ── Invariants ───────────────────────────────────────────────────────

class TestInvariants:
    def test_no_player_or_card_reused(self, generator, formation, roster):
        team = generator.generate(roster, formation)
        roles = list(_filled_roles(team))
        player_ids = [r.player.id for r in roles]
        card_ids = [r.card.id for r in roles]
        assert len(roles) > 11
        assert len(player_ids) == len(set(player_ids))
        assert len(card_ids) == len(set(card_ids))

    def test_uniqueness_with_style_preferences(self, generator, roster):
        formation = make_formation(styles={i: ["Poacher"] for i in range(0, 11, 2)})
        roles = list(_filled_roles(generator.generate(roster, formation)))
        assert len({r.player.id for r in roles}) == len(roles)

    def test_discarded_cards_never_assigned(self, generator, formation, roster):
        first = generator.generate(roster, formation)
        discarded = {r.card.id for r in _filled_roles(first)}
        second = generator.generate(roster, formation, discarded)
        assert not discarded & {r.card.id for r in _filled_roles(second)}

    def test_discard_promotes_next_best(self, generator):
        players = [
            make_player("a", [make_card("a1", {Position.ST: [9]})]),
            make_player("b", [make_card("b1", {Position.ST: [8]})]),
        ]
        formation = make_formation([Position.ST] + [Position.GK] * 10)
        team = generator.generate(players, formation, {"a1"})
        assert team[0].starter.player.id == "b"
        assert team[0].substitute.is_vacant

    def test_discarded_card_frees_other_card_of_player(self, generator):
        players = [
            make_player("a", [
                make_card("a1", {Position.ST: [9]}),
                make_card("a2", {Position.ST: [7]}),
            ]),
        ]
        formation = make_formation([Position.ST] * 11)
        team = generator.generate(players, formation, ["a1"])
        assert team[0].starter.card.id == "a2"

    def test_single_discarded_card_id_as_string(self, generator):
        player = make_player("a", [make_card("a1", {Position.ST: [9]})])
        team = generator.generate([player], make_formation([Position.ST] * 11), "a1")
        assert team[0].starter.is_vacant
        assert all(e.starter.is_vacant and e.substitute.is_vacant for e in team)

    def test_style_preference_respected(self, generator, roster):
        """Slot 0 (GK) is resolved first, so every styled keeper is eligible."""
        styled_keepers = [
            card for p in roster for card in p.cards
            if card.style == "Anchor" and card.ratings_at(Position.GK)
        ]
        assert styled_keepers

        formation = make_formation(styles={0: ["Anchor"]})
        team = generator.generate(roster, formation)
        assert team[0].starter.card.style == "Anchor"


# ── Determinism / purity ─────────────────────────────────────────────

class TestDeterminism:
    def test_same_inputs_same_output(self, formation, roster):
        discarded_a = {"p3-c0", "p7-c1", "p11-c0"}
        discarded_b = ["p11-c0", "p7-c1", "p3-c0"]
        first = generate_ideal_team(roster, formation, discarded_a)
        second = generate_ideal_team(roster, formation, discarded_b)
        assert first == second

        io = SnapshotIO()
        assert json.dumps(io.team_to_dict(first, discarded_a)) == json.dumps(
            io.team_to_dict(second, discarded_b)
        )

    def test_inputs_not_mutated(self, generator, formation, roster):
        roster_before = copy.deepcopy(roster)
        formation_before = copy.deepcopy(formation)
        discarded = {"p1-c0"}
        generator.generate(roster, formation, discarded)
        assert roster == roster_before
        assert formation == formation_before
        assert discarded == {"p1-c0"}

    def test_no_state_between_calls(self, generator, formation, roster):
        generator.generate(roster, formation, {"p0-c0"})
        fresh = IdealTeamGenerator().generate(roster, formation)
        assert generator.generate(roster, formation) == fresh


# ── Substitute tiering ───────────────────────────────────────────────

class TestSubstituteTiering:
    def test_hot_streak_substitute_over_higher_average(self, generator):
        players = [
            make_player("star", [make_card("s1", {Position.GK: [9.0] * 12})]),
            make_player("solid", [make_card("v1", {Position.GK: [8.5] * 12})]),
            make_player("streaky", [make_card("h1", {Position.GK: [3.0] * 9 + [7.0] * 3})]),
        ]
        team = generator.generate(players, make_formation([Position.GK] + [Position.ST] * 10))
        assert team[0].starter.player.id == "star"
        assert team[0].substitute.player.id == "streaky"
        assert team[0].substitute.performance.is_hot_streak is True


def test_wrapper_matches_class(formation, roster):
    assert generate_ideal_team(roster, formation) == IdealTeamGenerator().generate(
        roster, formation
    )


@pytest.mark.parametrize("size", [1, 5, 40])
def test_always_eleven_slots(formation, size):
    team = generate_ideal_team(make_roster(size), formation)
    assert len(team) == 11
    assert all(e.starter is not None and e.substitute is not None for e in team)
