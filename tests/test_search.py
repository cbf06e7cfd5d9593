# FILE: tests/test_search.py
import numpy as np
import pytest

from archery_teams.search import SearchState, TeamSearch
from archery_teams.validation import PreconditionError
from tests.helpers import assignment_with_totals, numbered_roster


def _rosters(n=5):
    return [
        numbered_roster("Compound", "C", [610, 655, 640, 700, 590][:n]),
        numbered_roster("Recurve", "R", [560, 600, 575, 620, 540][:n]),
        numbered_roster("Barebow", "B", [470, 520, 495, 505, 480][:n]),
    ]


class ScriptedSearch(TeamSearch):
    """Candidates with predetermined balance scores instead of random ones."""

    def __init__(self, scores, patience):
        super().__init__([numbered_roster("Compound", "C", [1, 2])], rng=None, patience=patience)
        self._scores = list(scores)

    def _candidate(self):
        return assignment_with_totals([100, 100 + self._scores.pop(0)])


def test_patience_countdown_and_reset():
    seen = []
    s = ScriptedSearch([20, 30, 10, 10, 40, 5, 5, 5, 5], patience=3)
    s.on_improvement = lambda score, trial: seen.append((trial, score))

    assert s.state is SearchState.IDLE
    assert s.start() == 20
    assert s.state is SearchState.RUNNING

    assert s.step() is False and s.patience == 2      # 30
    assert s.step() is True and s.patience == 3       # 10 resets the countdown
    assert s.step() is False and s.patience == 2      # equal score is not better
    assert s.step() is False and s.patience == 1      # 40
    assert s.step() is True and s.patience == 3       # 5

    result = s.run()
    assert s.state is SearchState.DONE
    assert result.score == 5
    assert result.trials == 8
    assert result.improvements == 2
    assert seen == [(2, 10), (5, 5)]
    assert s.step() is False


def test_best_score_never_increases():
    history = []
    s = TeamSearch(_rosters(), rng=np.random.default_rng(3), patience=300)
    history.append(s.start())
    while s.state is SearchState.RUNNING:
        s.step()
        history.append(s.best_score)
    assert all(b <= a for a, b in zip(history, history[1:]))
    assert s.trials >= 300


def test_run_terminates_and_returns_full_teams():
    s = TeamSearch(_rosters(), rng=np.random.default_rng(8), patience=50)
    result = s.run()
    assert s.state is SearchState.DONE
    assert s.patience == 0
    assert len(result.teams) == 5
    totals = [t.total for t in result.teams]
    assert result.score == max(totals) - min(totals)
    assert all(m is not None for t in result.teams for m in t.members.values())


def test_best_is_replaced_not_mutated():
    s = TeamSearch(_rosters(), rng=np.random.default_rng(1), patience=200)
    s.start()
    first = s.best
    first_names = first.names.tolist()
    s.run()
    assert first.names.tolist() == first_names
    if s.improvements:
        assert s.best is not first


def test_invalid_setup_is_rejected():
    with pytest.raises(PreconditionError):
        TeamSearch(_rosters(), rng=np.random.default_rng(0), patience=0)
    with pytest.raises(PreconditionError):
        TeamSearch(
            [numbered_roster("Compound", "C", [1, 2]), numbered_roster("Recurve", "R", [1])],
            rng=np.random.default_rng(0),
        )
    with pytest.raises(PreconditionError):
        TeamSearch(_rosters(), rng=np.random.default_rng(0), patience=5).result()
