"""Minimum-energy rearrangement of a burrow."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterator

import pandas as pd

from burrow_search.burrow.moves import legal_transitions, transition_between
from burrow_search.burrow.state import BurrowState, StateTransition
from burrow_search.errors import InvalidMove
from burrow_search.search.astar import astar


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for :func:`solve`."""

    prune_settled: bool = True
    max_expansions: int | None = None


@dataclass(frozen=True)
class SolveResult:
    """Cheapest solution of one burrow."""

    energy: int
    states: list[BurrowState]
    transitions: list[StateTransition]
    expanded: int
    generated: int
    runtime_s: float
    extra: dict = field(default_factory=dict)

    @property
    def num_moves(self) -> int:
        return len(self.transitions)

    def as_records(self) -> list[dict]:
        """Flatten into one dictionary per move, suitable for CSV/JSON."""

        records = []
        spent = 0
        for step, transition in enumerate(self.transitions, start=1):
            spent += transition.cost
            records.append(
                {
                    "step": step,
                    "kind": transition.kind.letter,
                    "start": repr(transition.path.start),
                    "end": repr(transition.path.end),
                    "steps": transition.path.steps,
                    "energy": transition.cost,
                    "cumulative_energy": spent,
                }
            )
        return records

    def to_frame(self) -> pd.DataFrame:
        columns = ["step", "kind", "start", "end", "steps", "energy", "cumulative_energy"]
        return pd.DataFrame(self.as_records(), columns=columns)

    def summary(self) -> dict:
        return {
            "energy": self.energy,
            "moves": self.num_moves,
            "expanded": self.expanded,
            "generated": self.generated,
            "runtime_s": self.runtime_s,
            **self.extra,
        }


def solve(state: BurrowState, config: SolverConfig | None = None) -> SolveResult | None:
    """Return the cheapest way to bring every token home, or ``None``."""

    cfg = config or SolverConfig()

    def expand(node: BurrowState) -> Iterator[tuple[BurrowState, int]]:
        for transition in legal_transitions(node, prune_settled=cfg.prune_settled):
            yield transition.target(), transition.cost

    start = time.perf_counter()
    result = astar(
        state,
        BurrowState.is_goal,
        expand,
        BurrowState.heuristic_lower_bound,
        max_expansions=cfg.max_expansions,
    )
    runtime = time.perf_counter() - start
    if result is None:
        return None

    transitions = _transitions_along(result.path)
    return SolveResult(
        energy=result.cost,
        states=result.path,
        transitions=transitions,
        expanded=result.expanded,
        generated=result.generated,
        runtime_s=runtime,
        extra={"room_size": state.room_size, "prune_settled": cfg.prune_settled},
    )


def _transitions_along(states: list[BurrowState]) -> list[StateTransition]:
    transitions = []
    for source, target in zip(states, states[1:]):
        transition = transition_between(source, target)
        if transition is None:
            msg = "Search returned consecutive states with no legal move between them"
            raise InvalidMove(msg)
        transitions.append(transition)
    return transitions


__all__ = ["SolveResult", "SolverConfig", "solve"]
