# archery_teams/scheduler.py
from __future__ import annotations
from collections.abc import Mapping
from typing import List, Optional, Sequence
import logging

import numpy as np

from .constants import CATEGORIES
from .models import AppConfig, Roster, SearchResult
from .search import ImprovementCallback, TeamSearch
from .validation import PreconditionError, check_rosters

logger = logging.getLogger(__name__)


def _ordered(rosters: Mapping[str, Roster] | Sequence[Roster]) -> List[Roster]:
    if not isinstance(rosters, Mapping):
        return list(rosters)
    missing = [c for c in CATEGORIES if c not in rosters]
    if missing:
        raise PreconditionError(f"Missing roster(s): {', '.join(missing)}")
    return [rosters[c] for c in CATEGORIES]


def make_rng(seed: Optional[int]) -> np.random.Generator:
    # seed None pulls fresh OS entropy, so repeated runs give different teams
    return np.random.default_rng(seed)


def schedule_teams(
    rosters: Mapping[str, Roster] | Sequence[Roster],
    config: AppConfig,
    rng: Optional[np.random.Generator] = None,
    on_improvement: Optional[ImprovementCallback] = None,
) -> SearchResult:
    ordered = _ordered(rosters)
    team_count = check_rosters(ordered)
    logger.info(
        "Building %d teams from %s (patience=%d, seed=%s)",
        team_count,
        ", ".join(f"{len(r)} {r.category}" for r in ordered),
        config.patience,
        config.random_seed,
    )

    search = TeamSearch(
        ordered,
        rng=rng if rng is not None else make_rng(config.random_seed),
        patience=config.patience,
        on_improvement=on_improvement,
        progress_interval=config.progress_interval,
    )
    result = search.run()
    logger.info(
        "Search finished after %d trials with %d improvement(s); best score %d.",
        result.trials, result.improvements, result.score,
    )
    return result
