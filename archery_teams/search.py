# FILE: archery_teams/search.py
"""
Random restart search over team mappings.

Every trial draws a brand new random mapping and scores it. A strictly
better mapping replaces the best one and resets the patience countdown;
anything else costs one unit of patience. The search is done when patience
runs out, so it keeps going as long as it keeps finding better mappings.
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, List, Optional, Sequence
import logging

import numpy as np

from archery_teams.assignment import Assignment, generate_assignment
from archery_teams.constants import DEFAULT_PATIENCE
from archery_teams.fairness import balance_score
from archery_teams.models import Roster, SearchResult
from archery_teams.validation import PreconditionError, check_rosters

logger = logging.getLogger(__name__)

ImprovementCallback = Callable[[int, int], None]  # (score, trial)


class SearchState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


class TeamSearch:
    def __init__(
        self,
        rosters: Sequence[Roster],
        rng: np.random.Generator,
        patience: int = DEFAULT_PATIENCE,
        on_improvement: Optional[ImprovementCallback] = None,
        progress_interval: int = 0,
    ):
        if patience <= 0:
            raise PreconditionError("patience must be a positive number of trials")
        self.rosters: List[Roster] = list(rosters)
        self.slot_count = check_rosters(self.rosters)
        self.rng = rng
        self.reset_patience = patience
        self.on_improvement = on_improvement
        self.progress_interval = progress_interval

        self.state = SearchState.IDLE
        self.best: Optional[Assignment] = None
        self.best_score: Optional[int] = None
        self.patience = patience
        self.trials = 0
        self.improvements = 0

    def _candidate(self) -> Assignment:
        return generate_assignment(self.rosters, self.slot_count, self.rng)

    def start(self) -> int:
        """Draw and score the initial mapping, then enter RUNNING."""
        self.best = self._candidate()
        self.best_score = balance_score(self.best)
        self.patience = self.reset_patience
        self.state = SearchState.RUNNING
        logger.info("Initial team mapping (score=%d).", self.best_score)
        return self.best_score

    def step(self) -> bool:
        """One trial. Returns True when the candidate replaced the best mapping."""
        if self.state is SearchState.IDLE:
            self.start()
        if self.state is SearchState.DONE:
            return False

        candidate = self._candidate()
        score = balance_score(candidate)
        self.trials += 1

        improved = score < self.best_score
        if improved:
            self.best = candidate
            self.best_score = score
            self.patience = self.reset_patience
            self.improvements += 1
            logger.info("Found better team mapping (score=%d).", score)
            if self.on_improvement is not None:
                self.on_improvement(score, self.trials)
        else:
            self.patience -= 1

        if self.progress_interval and self.trials % self.progress_interval == 0:
            logger.debug("trial %d: best=%d patience=%d", self.trials, self.best_score, self.patience)

        if self.patience <= 0:
            self.state = SearchState.DONE
        return improved

    def run(self) -> SearchResult:
        if self.state is SearchState.IDLE:
            self.start()
        while self.state is SearchState.RUNNING:
            self.step()
        return self.result()

    def result(self) -> SearchResult:
        if self.best is None:
            raise PreconditionError("Search has not been started.")
        return SearchResult(
            teams=self.best.slots(),
            score=self.best_score,
            trials=self.trials,
            improvements=self.improvements,
        )
