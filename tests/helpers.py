# FILE: tests/helpers.py
from __future__ import annotations
from typing import Dict, List, Sequence

import numpy as np

from archery_teams.assignment import Assignment
from archery_teams.models import Roster


class ScriptedRng:
    """Stands in for numpy.random.Generator.integers with a fixed sequence of draws."""

    def __init__(self, values: Sequence[int]):
        self.values = list(values)
        self.pos = 0
        self.calls: List[tuple] = []

    def integers(self, low, high, size):
        self.calls.append((low, high, size))
        chunk = self.values[self.pos:self.pos + size]
        if len(chunk) < size:
            raise AssertionError("scripted draws exhausted")
        self.pos += size
        return np.array(chunk)


def roster(category: str, entries: Dict[str, int]) -> Roster:
    return Roster(category=category, entries=entries)


def numbered_roster(category: str, prefix: str, scores: Sequence[int]) -> Roster:
    return Roster(category=category, entries={f"{prefix}{i}": s for i, s in enumerate(scores, start=1)})


def assignment_with_totals(totals: Sequence[int]) -> Assignment:
    """Single-category assignment whose team totals are exactly `totals`."""
    a = Assignment(["Compound"], len(totals))
    for slot, total in enumerate(totals):
        a.place(slot, 0, f"T{slot}", total)
    return a
