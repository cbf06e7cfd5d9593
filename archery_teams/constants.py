# FILE: archery_teams/constants.py
from __future__ import annotations

# --- Categories (one member of each per team) ---
COMPOUND = "Compound"
RECURVE = "Recurve"
BAREBOW = "Barebow"

CATEGORIES = (COMPOUND, RECURVE, BAREBOW)

CATEGORY_CODES = {
    COMPOUND: "C",
    RECURVE: "R",
    BAREBOW: "B",
}

# --- Default files (relative to the working directory) ---
DEFAULT_ROSTER_FILES = {
    COMPOUND: "compound_archers.txt",
    RECURVE: "recurve_archers.txt",
    BAREBOW: "barebow_archers.txt",
}
DEFAULT_REPORT_FILE = "generated_teams.txt"

# --- Search ---
# Consecutive non-improving trials tolerated before the search stops.
DEFAULT_PATIENCE = 2_000_000

# Score value of a slot that holds no competitor yet. Never a valid input score.
EMPTY_SCORE = 0

ROSTER_DELIMITER = ","

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def category_code(category: str) -> str:
    try:
        return CATEGORY_CODES[category]
    except KeyError:
        raise ValueError(f"Unknown category: {category}") from None
