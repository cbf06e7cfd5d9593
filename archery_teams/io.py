# archery_teams/io.py
from __future__ import annotations
import io
import logging
import re
from typing import Dict, Iterable, List

import pandas as pd

from .constants import CATEGORIES, ROSTER_DELIMITER, category_code
from .models import AppConfig, Roster, TeamSlot
from .validation import RosterInputError

logger = logging.getLogger(__name__)

SCORE_PATTERN = re.compile(r"^\d+$")


def parse_roster_lines(lines: Iterable[str], category: str, source: str = "<roster>") -> Roster:
    """
    Build a roster from `<name>, <score>` lines.

    The line is split on its last comma, so names may carry commas of their
    own ("Doe, Jane, 250"). Blank lines are ignored, score 0 entries are
    skipped with a warning, anything else that does not parse is fatal.
    """
    entries: Dict[str, int] = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        name, sep, score_text = line.rpartition(ROSTER_DELIMITER)
        if not sep:
            raise RosterInputError(f"{source}:{lineno}: expected '<name>{ROSTER_DELIMITER} <score>', got {line!r}")
        name = name.strip()
        score_text = score_text.strip()
        if not name:
            raise RosterInputError(f"{source}:{lineno}: missing archer name in {line!r}")
        if not SCORE_PATTERN.match(score_text):
            raise RosterInputError(f"{source}:{lineno}: score {score_text!r} is not a non-negative integer")

        score = int(score_text)
        if score == 0:
            logger.warning("Skip athlete: %s (%s:%d, no qualification score)", name, source, lineno)
            continue
        if name in entries:
            logger.warning("Duplicate athlete %s in %s:%d; keeping score %d", name, source, lineno, score)
        entries[name] = score

    return Roster(category=category, entries=entries)


def load_roster(path: str, category: str) -> Roster:
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise RosterInputError(f"Cannot read {category} roster {path}: {exc}") from exc
    roster = parse_roster_lines(lines, category, source=str(path))
    logger.info("Loaded %d %s archers from %s", len(roster), category, path)
    return roster


def parse_roster_bytes(data: bytes, category: str, source: str = "<roster>") -> Roster:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RosterInputError(f"Cannot read {category} roster {source}: {exc}") from exc
    return parse_roster_lines(text.splitlines(), category, source=source)


def load_rosters(config: AppConfig) -> Dict[str, Roster]:
    files = config.roster_files()
    return {cat: load_roster(files[cat], cat) for cat in CATEGORIES}


# ===== Report =====

def format_team_line(slot: TeamSlot) -> str:
    parts = []
    for cat, member in slot.members.items():
        name = member.name if member is not None else "-"
        parts.append(f"{name} ({category_code(cat)})")
    return f"Team {slot.team}: " + " | ".join(parts) + f" | Total qualifier = {slot.total}"


def report_lines(teams: List[TeamSlot]) -> List[str]:
    return [format_team_line(t) for t in teams]


def write_report(path: str, teams: List[TeamSlot]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in report_lines(teams):
            f.write(line + "\n")
    logger.info("Wrote %d teams to %s", len(teams), path)


def teams_dataframe(teams: List[TeamSlot]) -> pd.DataFrame:
    rows = []
    for t in teams:
        row = {"Team": t.team}
        for cat, member in t.members.items():
            row[cat] = member.name if member else ""
            row[f"{cat} score"] = member.score if member else 0
        row["Total"] = t.total
        rows.append(row)
    return pd.DataFrame(rows)


def save_teams_csv_bytes(teams: List[TeamSlot]) -> bytes:
    buf = io.StringIO()
    teams_dataframe(teams).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")
