import pandas as pd
import pytest

from burrow_search import solve_diagram
from burrow_search.burrow.state import BurrowState
from burrow_search.errors import InvalidMove, SearchBudgetExceeded
from burrow_search.puzzles.diagram import parse_diagram, unfold
from burrow_search.puzzles.samples import (
    ALMOST_SOLVED_DIAGRAM,
    ALMOST_SOLVED_ENERGY,
    SAMPLE_DIAGRAM,
    SAMPLE_FOLDED_ENERGY,
    SAMPLE_UNFOLDED_ENERGY,
)
from burrow_search.search.solver import SolverConfig, solve


def test_almost_solved_burrow():
    result = solve(parse_diagram(ALMOST_SOLVED_DIAGRAM))
    assert result is not None
    assert result.energy == ALMOST_SOLVED_ENERGY
    assert [t.describe() for t in result.transitions] == [
        "D H7->D1 (3000 energy)",
        "D H5->D0 (4000 energy)",
        "A H9->A0 (8 energy)",
    ]
    assert result.states[-1].is_goal()


def test_sample_folded_energy():
    result = solve(parse_diagram(SAMPLE_DIAGRAM))
    assert result is not None
    assert result.energy == SAMPLE_FOLDED_ENERGY
    assert result.states[0] == parse_diagram(SAMPLE_DIAGRAM)
    assert result.states[-1] == BurrowState.goal(2)
    assert sum(t.cost for t in result.transitions) == result.energy
    for transition, target in zip(result.transitions, result.states[1:]):
        assert transition.target() == target


def test_sample_unfolded_energy():
    result = solve_diagram(SAMPLE_DIAGRAM, unfolded=True)
    assert result is not None
    assert result.energy == SAMPLE_UNFOLDED_ENERGY
    assert result.states[-1] == BurrowState.goal(4)


def test_pruning_is_only_an_optimisation():
    state = parse_diagram(SAMPLE_DIAGRAM)
    pruned = solve(state, SolverConfig(prune_settled=True))
    full = solve(state, SolverConfig(prune_settled=False))
    assert pruned is not None and full is not None
    assert pruned.energy == full.energy == SAMPLE_FOLDED_ENERGY
    assert full.extra["prune_settled"] is False


def test_heuristic_is_consistent_along_the_solution():
    result = solve(parse_diagram(SAMPLE_DIAGRAM))
    assert result is not None
    remaining = result.energy
    for transition, state in zip(result.transitions, result.states):
        assert state.heuristic_lower_bound() <= remaining
        remaining -= transition.cost
    assert remaining == 0


def test_goal_input_is_solved_without_moves():
    result = solve(BurrowState.goal(4))
    assert result is not None
    assert result.energy == 0
    assert result.transitions == []
    assert result.to_frame().empty


def test_budget_is_reported_as_an_error():
    with pytest.raises(SearchBudgetExceeded):
        solve(parse_diagram(unfold(SAMPLE_DIAGRAM)), SolverConfig(max_expansions=5))


def test_result_table():
    result = solve(parse_diagram(ALMOST_SOLVED_DIAGRAM))
    assert result is not None
    frame = result.to_frame()
    assert isinstance(frame, pd.DataFrame)
    assert list(frame.columns) == [
        "step",
        "kind",
        "start",
        "end",
        "steps",
        "energy",
        "cumulative_energy",
    ]
    assert frame["energy"].sum() == ALMOST_SOLVED_ENERGY
    assert frame["cumulative_energy"].iloc[-1] == ALMOST_SOLVED_ENERGY
    assert frame["kind"].tolist() == ["D", "D", "A"]
    summary = result.summary()
    assert summary["energy"] == ALMOST_SOLVED_ENERGY
    assert summary["moves"] == 3
    assert summary["room_size"] == 2


def test_unlinked_states_on_the_path_are_an_invalid_move(monkeypatch):
    monkeypatch.setattr(
        "burrow_search.search.solver.transition_between", lambda source, target: None
    )
    with pytest.raises(InvalidMove, match="no legal move"):
        solve(parse_diagram(ALMOST_SOLVED_DIAGRAM))
