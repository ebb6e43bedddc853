from src.team_generator.assignment import AssignmentEngine
from src.team_generator.candidate_pool import CandidatePoolBuilder
from src.team_generator.formation_validator import FormationValidator, ValidationError
from src.team_generator.generator import IdealTeamGenerator, generate_ideal_team
from src.team_generator.models import (
    AssignedPlayer,
    Candidate,
    Formation,
    FormationSlot,
    IdealTeamSlot,
    Player,
    PlayerCard,
    PlayerPerformance,
    PlayerStats,
    Position,
    Rating,
    Vacant,
)
from src.team_generator.performance import PerformanceClassifier
from src.team_generator.placeholder import PlaceholderFiller
from src.team_generator.selection_state import SelectionState
from src.team_generator.snapshot_io import SnapshotIO

__all__ = [
    "AssignedPlayer",
    "AssignmentEngine",
    "Candidate",
    "CandidatePoolBuilder",
    "Formation",
    "FormationSlot",
    "FormationValidator",
    "IdealTeamGenerator",
    "IdealTeamSlot",
    "PerformanceClassifier",
    "PlaceholderFiller",
    "Player",
    "PlayerCard",
    "PlayerPerformance",
    "PlayerStats",
    "Position",
    "Rating",
    "SelectionState",
    "SnapshotIO",
    "Vacant",
    "ValidationError",
    "generate_ideal_team",
]
