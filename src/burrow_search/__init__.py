"""burrow-search package."""

from burrow_search.burrow.moves import legal_transitions, transition_between
from burrow_search.burrow.path import Path
from burrow_search.burrow.state import BurrowState, StateTransition
from burrow_search.burrow.topology import Amphipod, BurrowTopology, Location, steps_between
from burrow_search.errors import BurrowError, BurrowParseError, InvalidMove, SearchBudgetExceeded
from burrow_search.puzzles.diagram import parse_diagram, render_diagram, unfold
from burrow_search.search.astar import SearchResult, astar
from burrow_search.search.solver import SolveResult, SolverConfig, solve

__all__ = [
    "Amphipod",
    "BurrowError",
    "BurrowParseError",
    "BurrowState",
    "BurrowTopology",
    "InvalidMove",
    "Location",
    "Path",
    "SearchBudgetExceeded",
    "SearchResult",
    "SolveResult",
    "SolverConfig",
    "StateTransition",
    "astar",
    "legal_transitions",
    "parse_diagram",
    "render_diagram",
    "solve",
    "solve_diagram",
    "steps_between",
    "transition_between",
    "unfold",
]


def solve_diagram(text: str, *, unfolded: bool = False, config: SolverConfig | None = None):
    """Helper to parse a diagram and solve it in one call."""
    return solve(parse_diagram(unfold(text) if unfolded else text), config)
