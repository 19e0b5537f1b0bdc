"""Generic A* over implicit graphs."""

from __future__ import annotations

import heapq
import itertools
import warnings
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterable, TypeVar

from burrow_search.errors import SearchBudgetExceeded

Node = TypeVar("Node", bound=Hashable)


@dataclass(frozen=True)
class SearchResult(Generic[Node]):
    """Cheapest path found by :func:`astar`."""

    cost: int
    path: list[Node]
    expanded: int
    generated: int


def astar(
    start: Node,
    is_goal: Callable[[Node], bool],
    expand: Callable[[Node], Iterable[tuple[Node, int]]],
    heuristic: Callable[[Node], int],
    *,
    max_expansions: int | None = None,
) -> SearchResult[Node] | None:
    """Return the cheapest path from ``start`` to any goal node.

    ``expand`` yields ``(neighbor, step_cost)`` pairs. ``heuristic`` must
    never overestimate the remaining cost. Returns ``None`` once every
    reachable node has been expanded without meeting a goal.
    """

    if max_expansions is not None and max_expansions < 1:
        warnings.warn(f"[astar] max_expansions={max_expansions} allows no expansion at all")

    counter = itertools.count()
    best: dict[Node, int] = {start: 0}
    parents: dict[Node, Node | None] = {start: None}
    frontier: list[tuple[int, int, int, Node]] = [(heuristic(start), next(counter), 0, start)]
    expanded = 0
    generated = 1

    while frontier:
        _, _, cost, node = heapq.heappop(frontier)
        if cost > best[node]:
            # Superseded by a cheaper entry pushed later.
            continue
        if is_goal(node):
            return SearchResult(
                cost=cost,
                path=_reconstruct(parents, node),
                expanded=expanded,
                generated=generated,
            )
        if max_expansions is not None and expanded >= max_expansions:
            msg = f"A* gave up after {expanded} expansions ({len(frontier)} nodes still queued)"
            raise SearchBudgetExceeded(msg)
        expanded += 1
        for neighbor, step_cost in expand(node):
            tentative = cost + step_cost
            known = best.get(neighbor)
            if known is not None and tentative >= known:
                continue
            best[neighbor] = tentative
            parents[neighbor] = node
            generated += 1
            heapq.heappush(
                frontier, (tentative + heuristic(neighbor), next(counter), tentative, neighbor)
            )
    return None


def _reconstruct(parents: dict[Node, Node | None], node: Node) -> list[Node]:
    path = [node]
    parent = parents[node]
    while parent is not None:
        path.append(parent)
        parent = parents[parent]
    path.reverse()
    return path


__all__ = ["SearchResult", "astar"]
