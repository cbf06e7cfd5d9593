# FILE: archery_teams/validation.py
from __future__ import annotations
from collections.abc import Mapping
from typing import Sequence

from archery_teams.models import Roster


class RosterInputError(ValueError):
    """Unreadable roster source or malformed roster line."""


class PreconditionError(ValueError):
    """Rosters or assignment not in a state the search can work with."""


def check_rosters(rosters: Sequence[Roster] | Mapping[str, Roster]) -> int:
    """
    Every roster non-empty and all of the same size.
    Returns that size (the number of teams to form).
    """
    if isinstance(rosters, Mapping):
        rosters = list(rosters.values())
    if not rosters:
        raise PreconditionError("No rosters given.")
    for r in rosters:
        if len(r) == 0:
            raise PreconditionError(f"{r.category} roster is empty.")
    # compared by position; two rosters may carry the same category label
    sizes = [len(r) for r in rosters]
    if len(set(sizes)) != 1:
        detail = ", ".join(f"{r.category}={n}" for r, n in zip(rosters, sizes))
        raise PreconditionError(f"Roster sizes differ ({detail}); every team needs one archer per category.")
    return len(rosters[0])


def check_slot_count(rosters: Sequence[Roster], slot_count: int) -> None:
    # The placement loop never terminates when a roster outnumbers the slots.
    size = check_rosters(rosters)
    if slot_count != size:
        raise PreconditionError(f"Slot count {slot_count} does not match roster size {size}.")
