from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"
SNAPSHOTS_DIR = DATA_DIR / "snapshots"

# Output file for the imported roster
PLAYERS_SNAPSHOT = "players.json"

# Rating log columns (one row per logged match rating)
REQUIRED_COLUMNS = ["Player", "Card", "Position", "Style", "Rating"]
OPTIONAL_COLUMNS = ["League", "Role"]

# Spanish position codes used by older rating logs -> canonical codes
POSITION_ALIASES = {
    "PT": "GK",
    "POR": "GK",
    "LD": "RB",
    "LI": "LB",
    "DFC": "CB",
    "MCD": "CDM",
    "MDD": "RM",
    "MDI": "LM",
    "MC": "CM",
    "MO": "CAM",
    "MCO": "CAM",
    "EXD": "RW",
    "EXI": "LW",
    "DC": "ST",
}
