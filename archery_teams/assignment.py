# FILE: archery_teams/assignment.py
from __future__ import annotations
from typing import Iterator, List, Optional, Sequence
import numpy as np

from archery_teams.constants import CATEGORIES, EMPTY_SCORE
from archery_teams.models import Competitor, Roster, TeamSlot
from archery_teams.validation import check_slot_count


class Assignment:
    """
    One candidate team mapping: slot (team) x category.

    scores[slot, cat] holds the placed archer's qualification score,
    EMPTY_SCORE while the slot has no archer of that category yet.
    """

    def __init__(self, categories: Sequence[str], slot_count: int):
        self.categories = tuple(categories)
        self.slot_count = slot_count
        shape = (slot_count, len(self.categories))
        self.scores = np.full(shape, EMPTY_SCORE, dtype=np.int64)
        self.names = np.full(shape, "", dtype=object)

    def __len__(self) -> int:
        return self.slot_count

    def is_empty(self, slot: int, cat_idx: int) -> bool:
        return self.scores[slot, cat_idx] == EMPTY_SCORE

    def place(self, slot: int, cat_idx: int, name: str, score: int) -> None:
        self.names[slot, cat_idx] = name
        self.scores[slot, cat_idx] = score

    def is_complete(self) -> bool:
        return bool(self.slot_count) and not (self.scores == EMPTY_SCORE).any()

    def reordered(self, order: Sequence[int]) -> "Assignment":
        """Same teams, slots listed in `order`."""
        out = Assignment(self.categories, self.slot_count)
        idx = np.asarray(order, dtype=int)
        out.scores = self.scores[idx].copy()
        out.names = self.names[idx].copy()
        return out

    def slots(self) -> List[TeamSlot]:
        teams: List[TeamSlot] = []
        for slot in range(self.slot_count):
            members = {}
            for c, cat in enumerate(self.categories):
                score = int(self.scores[slot, c])
                members[cat] = None if score == EMPTY_SCORE else Competitor(name=self.names[slot, c], score=score)
            teams.append(TeamSlot(team=slot + 1, members=members))
        return teams


def _slot_draws(rng: np.random.Generator, slot_count: int) -> Iterator[int]:
    """Endless uniform draws from [0, slot_count), fetched from rng in blocks."""
    block = max(2 * slot_count, 16)
    while True:
        for slot in rng.integers(0, slot_count, size=block).tolist():
            yield int(slot)


def generate_assignment(
    rosters: Sequence[Roster],
    slot_count: int,
    rng: np.random.Generator,
    categories: Optional[Sequence[str]] = None,
) -> Assignment:
    """
    Spread every roster randomly over `slot_count` teams.

    Each archer is dropped into a uniformly drawn slot, redrawing while that
    slot already holds an archer of the same category. Rosters of exactly
    `slot_count` archers give a uniform random bijection per category.
    """
    check_slot_count(rosters, slot_count)
    cats = categories or [r.category for r in rosters]
    result = Assignment(cats, slot_count)
    draws = _slot_draws(rng, slot_count)

    for c, roster in enumerate(rosters):
        for name, score in roster.items():
            slot = next(draws)
            while not result.is_empty(slot, c):
                slot = next(draws)
            result.place(slot, c, name, score)

    return result


def generate(
    compound: Roster,
    recurve: Roster,
    barebow: Roster,
    slot_count: int,
    rng: np.random.Generator,
) -> Assignment:
    """Random Compound/Recurve/Barebow team mapping."""
    return generate_assignment([compound, recurve, barebow], slot_count, rng, categories=CATEGORIES)
