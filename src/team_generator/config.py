from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
SNAPSHOTS_DIR = DATA_DIR / "snapshots"
TEAMS_DIR = DATA_DIR / "teams"

# Every formation fields exactly this many slots
FORMATION_SIZE = 11

# Performance tag thresholds (fixed design constants)
HOT_STREAK_WINDOW = 3          # Most recent ratings compared to the all-time average
HOT_STREAK_MARGIN = 0.5        # Recent average must exceed all-time by more than this
CONSISTENT_MIN_MATCHES = 5
CONSISTENT_MAX_STD_DEV = 0.5   # Strict upper bound
PROMISING_MAX_MATCHES = 10     # Strict upper bound, at least one match required
VERSATILE_MIN_AVERAGE = 7.5    # Per-position average that counts as high performance
VERSATILE_MIN_POSITIONS = 3

# Valid match rating range (inclusive)
MIN_RATING = 1.0
MAX_RATING = 10.0
