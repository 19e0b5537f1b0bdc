"""Search utilities."""

from burrow_search.search.astar import SearchResult, astar
from burrow_search.search.solver import SolveResult, SolverConfig, solve

__all__ = ["SearchResult", "SolveResult", "SolverConfig", "astar", "solve"]
