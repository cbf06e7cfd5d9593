# FILE: archery_teams/fairness.py
from __future__ import annotations
from typing import Sequence
import numpy as np

from archery_teams.assignment import Assignment
from archery_teams.constants import EMPTY_SCORE
from archery_teams.validation import PreconditionError


def team_totals(assignment: Assignment) -> np.ndarray:
    """Combined qualification score of every team, in slot order."""
    if assignment.slot_count == 0:
        raise PreconditionError("Cannot score an assignment with no teams.")
    if (assignment.scores == EMPTY_SCORE).any():
        raise PreconditionError("Cannot score an assignment with unfilled team slots.")
    return assignment.scores.sum(axis=1)


def score_totals(totals: Sequence[int] | np.ndarray) -> int:
    """Best team minus worst team. 0 means every team is even."""
    arr = np.asarray(totals, dtype=np.int64)
    if arr.size == 0:
        raise PreconditionError("Cannot score an empty list of team totals.")
    return int(arr.max() - arr.min())


def balance_score(assignment: Assignment) -> int:
    """
    Lower is better. Only the strongest and weakest teams matter: the score
    is the spread of team totals, not their variance.
    """
    return score_totals(team_totals(assignment))


def is_balanced(totals: Sequence[int] | np.ndarray) -> bool:
    return score_totals(totals) == 0
